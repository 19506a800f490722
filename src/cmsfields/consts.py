"""Constants for cmsfields"""

# ==================== File Paths ====================
CONFIG_PATH_DEFAULT = "cmsfields.toml"
OUTPUT_PATH_DEFAULT = "fields.json"
LOG_FILE_DEFAULT = "data/cmsfields.log"

# ==================== Field Defaults ====================
FIELD_LABEL_DEFAULT = "Field"
FIELD_NAME_DEFAULT = "field"

BOOLEAN_TYPE = "boolean"
BOOLEAN_LABEL_DEFAULT = "Boolean field"
BOOLEAN_NAME_DEFAULT = "boolean_field"

LOGO_TYPE = "logo"
LOGO_LABEL_DEFAULT = "Logo field"
LOGO_NAME_DEFAULT = "logo_field"

# Video fields are emitted with the "blog" tag; consumers already key on it.
VIDEO_TYPE = "blog"
VIDEO_NAME_DEFAULT = "videoplayer_field"

HALF_WIDTH = "half_width"

# ==================== Serialization ====================
JSON_INDENT_DEFAULT = 2
