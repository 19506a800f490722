"""CLI main entry point."""

import logging
from pathlib import Path

import click

from .config import Config
from .consts import CONFIG_PATH_DEFAULT
from .errors import CmsFieldsException
from .fields import FIELD_TYPES, create_fields
from .loader import load_field_bags
from .log import setup as setup_log
from .serialize import fields_to_json

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--config", "-c", default=CONFIG_PATH_DEFAULT, help="Configuration file path"
)
@click.pass_context
def cli(ctx, config: str):
    """cmsfields - build fields.json descriptors for CMS modules and themes."""
    ctx.ensure_object(dict)
    try:
        cfg = Config.load_or_default(config)
    except CmsFieldsException as e:
        raise click.ClickException(str(e))

    ctx.obj["config"] = cfg
    setup_log(cfg.log_file)


@cli.command(name="render")
@click.argument("source", type=click.Path(dir_okay=False))
@click.option(
    "--output", "-o", default=None, help="Output file, '-' writes to stdout"
)
@click.option("--indent", type=int, default=None, help="Override JSON indent from config")
@click.pass_context
def render(ctx, source: str, output: str | None, indent: int | None):
    """Render the field definitions in SOURCE as fields.json."""
    cfg: Config = ctx.obj["config"]
    indent = cfg.indent if indent is None else indent
    output = output or cfg.output

    try:
        bags = load_field_bags(source)
    except CmsFieldsException as e:
        raise click.ClickException(str(e))

    fields = create_fields(bags, warn_duplicates=cfg.warn_duplicate_names)
    content = fields_to_json(fields, indent=indent)

    if output == "-":
        click.echo(content)
        return

    path = Path(output)
    if path.parent != Path("."):
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")
    logger.info(f"Wrote {len(fields)} fields to {path}")
    click.echo(f"Wrote {len(fields)} fields to {path}")


@cli.command(name="types")
def types():
    """List the registered field kinds and the type tag each one emits."""
    for kind, field_cls in FIELD_TYPES.items():
        click.echo(f"{kind}\t{field_cls.variant.type_tag}")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
