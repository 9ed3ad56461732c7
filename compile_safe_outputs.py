"""
Safe outputs compiler - developer command

Compiles a safe-outputs mapping (YAML or JSON) and prints or writes the
runtime config and tool catalog.

Usage:
    python compile_safe_outputs.py safe-outputs.yml --workflow .github/workflows/triage.md
    python compile_safe_outputs.py safe-outputs.yml -w triage.md --config-out config.json --tools-out tools.json
"""

from pathlib import Path

import click
import structlog
import yaml
from pydantic import ValidationError

from compiler import compile_safe_outputs
from config import get_settings
from config_builder import SafeOutputsSerializationError
from logging_config import configure_logging
from models import SafeOutputsConfig

logger = structlog.get_logger()


def load_safe_outputs(path: Path) -> SafeOutputsConfig:
    """Load a safe-outputs mapping; a top-level ``safe-outputs`` key is unwrapped"""
    document = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if isinstance(document, dict) and "safe-outputs" in document:
        document = document["safe-outputs"] or {}
    return SafeOutputsConfig.model_validate(document)


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--workflow", "-w",
    "workflow_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the compiling workflow, used to locate dispatch targets (default: SOURCE)",
)
@click.option("--config-out", type=click.Path(dir_okay=False, path_type=Path), help="Write runtime config JSON here")
@click.option("--tools-out", type=click.Path(dir_okay=False, path_type=Path), help="Write tool catalog JSON here")
def main(source: Path, workflow_path: Path, config_out: Path, tools_out: Path):
    """Compile SOURCE into the safe outputs runtime config and tool catalog."""
    configure_logging(get_settings())

    try:
        safe_outputs = load_safe_outputs(source)
    except (yaml.YAMLError, ValidationError) as e:
        logger.error("safe_outputs_invalid", source=str(source), error=str(e))
        raise click.ClickException(f"Invalid safe outputs in {source}: {e}")

    try:
        compiled = compile_safe_outputs(safe_outputs, str(workflow_path or source))
    except SafeOutputsSerializationError as e:
        raise click.ClickException(str(e))

    if config_out:
        config_out.write_text(compiled.config_json + "\n", encoding="utf-8")
    else:
        click.echo(compiled.config_json)

    if tools_out:
        tools_out.write_text(compiled.tools_json + "\n", encoding="utf-8")
    else:
        click.echo(compiled.tools_json)


if __name__ == "__main__":
    main()
