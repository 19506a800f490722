"""Exception definitions for cmsfields"""


class CmsFieldsException(Exception):
    """Base exception for all cmsfields errors.

    Descriptor construction itself never raises; these exceptions belong to
    the layers around it (configuration, field definition files, CLI).
    """

    pass


class ConfigException(CmsFieldsException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (invalid values)
    """

    pass


class FieldsFileException(CmsFieldsException):
    """Raised when a field definition file cannot be read.

    Use this exception when:
    - The file does not exist
    - The file suffix is neither .toml nor .json
    - The content cannot be parsed or is not a list of tables/objects
    """

    pass
