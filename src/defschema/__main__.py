"""CLI entry point for defschema."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from .config import Config
from .exceptions import DefSchemaError
from .models.common import EffectStrategy, RefStrategy, Target
from .models.definitions import parse_definition
from .schema_gen.converter import SchemaConverterService
from .utils.log_setup import configure_logging


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="DEFSCHEMA_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None, # Config value unless set
    help="Override the logging level (e.g., DEBUG, INFO).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """defschema - converts validation definitions into JSON Schema."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            # Environment variables (and .env file if present)
            cfg = Config()
    except (OSError, ValueError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    configure_logging(cfg.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("definition_file", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--name", "-n", default=None, help="Emit the root under the definitions map with this name.")
@click.option("--error-messages/--no-error-messages", default=None, help="Include custom error messages.")
@click.option("--target", type=click.Choice([t.value for t in Target]), default=None, help="Output dialect.")
@click.option("--effect-strategy", type=click.Choice([s.value for s in EffectStrategy]), default=None, help="How transforms are described.")
@click.option("--ref-strategy", type=click.Choice([s.value for s in RefStrategy]), default=None, help="How revisited definitions are emitted.")
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Output file path for the JSON Schema document."
)
@click.pass_context
def convert(
    ctx: click.Context,
    definition_file: str,
    name: Optional[str],
    error_messages: Optional[bool],
    target: Optional[str],
    effect_strategy: Optional[str],
    ref_strategy: Optional[str],
    output_file: Optional[str],
) -> None:
    """Converts a JSON definition document into a JSON Schema document."""
    config: Config = ctx.obj["config"]
    overrides: Dict[str, Any] = {
        key: value
        for key, value in {
            "error_messages": error_messages,
            "target": target,
            "effect_strategy": effect_strategy,
            "ref_strategy": ref_strategy,
        }.items()
        if value is not None
    }

    try:
        with open(definition_file) as f:
            document = json.load(f)
        definition = parse_definition(document)
        json_schema = SchemaConverterService(app_config=config).convert(definition, name=name, **overrides)
    except json.JSONDecodeError as e:
        click.echo(f"Definition file is not valid JSON: {e}", err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f"Invalid definition document: {e}", err=True)
        sys.exit(1)
    except DefSchemaError as e:
        click.echo(f"Conversion failed: {e}", err=True)
        sys.exit(1)

    if output_file:
        try:
            with open(output_file, "w") as f:
                json.dump(json_schema, f, indent=2)
            click.echo(f"JSON Schema written to {output_file}")
        except IOError as e:
            click.echo(f"Error writing output file {output_file}: {e}", err=True)
            sys.exit(1)
    else:
        click.echo(json.dumps(json_schema, indent=2))


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"defschema v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config: Config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    cli()
