"""CLI main entry point."""

import json
import logging
from pathlib import Path

import click

from .config import Config
from .consts import CONFIG_FILE_DEFAULT
from .errors import SchemaFormException
from .filters import filter_array, filter_object, needs_filter
from .log import setup as setup_log
from .schema import ArraySchema, ObjectSchema, ordered_properties, parse_schema
from .titles import find_title_from_schema, get_title
from .utils import stringify
from .values import UNDEFINED, strip_undefined
from .walker import materialize_defaults, resolve_visibility, validate_tree

logger = logging.getLogger(__name__)

ROOT_PATH_LABEL = "(root)"


def load_config(config_path: str) -> Config:
    """Load the config file when it exists, otherwise defaults plus environment."""
    if Path(config_path).exists():
        cfg = Config.load_from_file(config_path)
    else:
        cfg = Config()
    setup_log(cfg.log_file)
    return cfg


def read_document(stream) -> object:
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{stream.name}: invalid JSON: {e}")


def _run(func):
    try:
        return func()
    except SchemaFormException as e:
        logger.error(f"Application error: {e}", exc_info=True)
        raise click.ClickException(str(e))


@click.group()
@click.option(
    "--config",
    "-c",
    default=CONFIG_FILE_DEFAULT,
    help="Configuration file path (optional)",
)
@click.pass_context
def cli(ctx, config: str):
    """schemaform - schema driven form value engine."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command(name="validate")
@click.argument("schema_file", type=click.File("r"))
@click.argument("value_file", type=click.File("r"))
@click.pass_context
def validate(ctx, schema_file, value_file):
    """Print the error message of every invalid node."""
    cfg = _run(lambda: load_config(ctx.obj["config_path"]))
    schema = read_document(schema_file)
    value = read_document(value_file)

    messages = _run(lambda: validate_tree(schema, value, cfg.build_locale()))
    for path, message in messages.items():
        click.echo(f"{path or ROOT_PATH_LABEL}\t{message}")

    logger.info(f"Validation finished with {len(messages)} error(s)")
    if messages:
        ctx.exit(1)


@cli.command(name="defaults")
@click.argument("schema_file", type=click.File("r"))
@click.pass_context
def defaults(ctx, schema_file):
    """Print the default value of a schema as JSON."""
    _run(lambda: load_config(ctx.obj["config_path"]))
    schema = read_document(schema_file)

    value = _run(lambda: materialize_defaults(schema, UNDEFINED))
    click.echo(json.dumps(strip_undefined(value), indent=2, ensure_ascii=False))


@cli.command(name="visibility")
@click.argument("schema_file", type=click.File("r"))
@click.argument("value_file", type=click.File("r"))
@click.pass_context
def visibility(ctx, schema_file, value_file):
    """Print whether each property is required, optional or hidden."""
    _run(lambda: load_config(ctx.obj["config_path"]))
    schema = read_document(schema_file)
    value = read_document(value_file)

    result = _run(lambda: resolve_visibility(schema, value))
    for path, state in result.items():
        click.echo(f"{path}\t{state.value}")


@cli.command(name="search")
@click.argument("schema_file", type=click.File("r"))
@click.argument("needle")
@click.option(
    "--value",
    "value_file",
    type=click.File("r"),
    default=None,
    help="Value document, searched item by item when the schema is an array",
)
@click.pass_context
def search(ctx, schema_file, needle: str, value_file):
    """Print the properties (or array items) matching NEEDLE."""
    cfg = _run(lambda: load_config(ctx.obj["config_path"]))
    schema = _run(lambda: parse_schema(read_document(schema_file)))

    if isinstance(schema, ObjectSchema):
        for entry in ordered_properties(schema):
            if filter_object(entry.property, entry.schema, needle):
                click.echo(entry.property)
        return

    if isinstance(schema, ArraySchema):
        if value_file is None:
            raise click.UsageError("--value is required to search an array schema")
        value = read_document(value_file)
        if not isinstance(value, list):
            raise click.ClickException("Value document is not an array")
        if not needs_filter(len(value), cfg.filter_threshold):
            logger.info(
                f"{len(value)} item(s) is below the filter threshold ({cfg.filter_threshold})"
            )
        for i, item in enumerate(value):
            if not filter_array(item, i, schema.items, needle):
                continue
            if isinstance(schema.items, ObjectSchema):
                label = get_title(
                    find_title_from_schema(item, schema.items, **cfg.truncate_options()),
                    schema.items.title,
                )
            else:
                label = stringify(item)
            click.echo(f"{i}\t{label}")
        return

    raise click.ClickException("Only object and array schemas can be searched")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
