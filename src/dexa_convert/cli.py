import click
import yaml
from pathlib import Path
from pydantic import ValidationError

from dexa_convert import __version__
from dexa_convert.common.config import load_settings
from dexa_convert.common.errors import DecodeError, DexaConvertError, RowParseError
from dexa_convert.common.logging import LOG_LEVELS, setup_logger
from dexa_convert.dataio.readers import read_export, read_export_modality
from dexa_convert.domain.modality import Modality
from dexa_convert.output.json_writer import write_json
from dexa_convert.output.tabular import write_csv

FORMATS = ("json", "csv")


def _run_or_fail(reader, input_path: str):
    try:
        return reader(input_path)
    except DecodeError as exc:
        raise click.ClickException(f"Error decoding file: {exc}") from exc
    except RowParseError as exc:
        raise click.ClickException(f"Error parsing file at {exc}") from exc
    except DexaConvertError as exc:
        raise click.ClickException(f"Error parsing file: {exc}") from exc


@click.group()
@click.version_option(version=__version__)
def main():
    """DEXA scanner export converter"""
    pass


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "output_format", type=click.Choice(FORMATS), help="Output format (default from config: json)")
@click.option("--output", "output_path", type=click.Path(dir_okay=False), help="Output file, defaults to <input>.<format>")
@click.option("--config", type=click.Path(exists=True), help="Config YAML path")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Logging level, overrides config")
def convert(input_path, output_format, output_path, config, log_level):
    """Convert a DEXA export to JSON or CSV"""
    try:
        settings = load_settings(config)
    except (ValidationError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Error loading config: {exc}") from exc
    setup_logger("dexa_convert", log_level or settings.log_level)
    output_format = output_format or settings.output_format

    result = _run_or_fail(read_export, input_path)

    if not output_path:
        output_path = f"{input_path}.{output_format}"

    with open(output_path, "w", encoding="utf-8", newline="") as out:
        if output_format == "csv":
            write_csv(result, out, float_format=settings.float_format)
        else:
            write_json(result, out, indent=settings.json_indent)

    click.echo(f"Wrote: {Path(output_path).resolve()}")


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def detect(input_path):
    """Print the scan modality of a DEXA export"""
    modality = _run_or_fail(read_export_modality, input_path)
    if modality is Modality.UNKNOWN:
        raise click.ClickException("Error parsing file: unrecognized file type")
    click.echo(modality.value)


if __name__ == "__main__":
    main()
