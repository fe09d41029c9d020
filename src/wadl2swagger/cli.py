"""CLI entry point for wadl2swagger."""

import json
import logging
from pathlib import Path

import click
import yaml

from wadl2swagger.converter.resources import convert_wadl
from wadl2swagger.errors import Wadl2SwaggerError
from wadl2swagger.parser.detect import detect_format
from wadl2swagger.parser.wadl import WADL_VERSION


def _dump(swagger: dict, syntax: str, indent: int) -> str:
    """Serialize the Swagger document as JSON or YAML."""
    if syntax == "yaml":
        return yaml.safe_dump(swagger, sort_keys=False, indent=indent, allow_unicode=True)
    return json.dumps(swagger, indent=indent, ensure_ascii=False) + "\n"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """wadl2swagger: convert WADL API descriptions to Swagger 2.0."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path (stdout if omitted).")
@click.option("--syntax", default="json", type=click.Choice(["json", "yaml"]), help="Output syntax.")
@click.option("--indent", default=2, type=click.IntRange(min=0), help="Indentation width.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "wadl"]), help="Input format.")
def convert(doc_path: Path, output: Path | None, syntax: str, indent: int, fmt: str):
    """Convert a WADL document to Swagger 2.0."""
    if fmt == "auto":
        fmt = detect_format(doc_path)
    if fmt != "wadl":
        raise click.UsageError(f"{doc_path} does not look like a WADL document (detected: {fmt}).")

    try:
        swagger = convert_wadl(doc_path)
    except Wadl2SwaggerError as e:
        raise click.ClickException(e.message) from e

    text = _dump(swagger, syntax, indent)
    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Swagger document saved to {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def detect(doc_path: Path):
    """Print the detected format of an API description."""
    fmt = detect_format(doc_path)
    if fmt == "wadl":
        click.echo(f"{fmt} {WADL_VERSION}")
    else:
        click.echo(fmt)
