"""CLI entry point for postmanify."""

import logging
from pathlib import Path

import click

from postmanify.config import ConverterConfig, parse_header
from postmanify.errors import PostmanifyError
from postmanify.generator.collection import Converter
from postmanify.postman.models import Header


def _parse_headers(ctx, param, values: tuple[str, ...]) -> tuple[Header, ...]:
    try:
        return tuple(parse_header(v) for v in values)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Generate Postman collections from Swagger 2.0 specifications."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file path for the Postman collection.")
@click.option("--hostname", default="", envvar="POSTMANIFY_HOSTNAME", help="Hostname, defaults to the specification host.")
@click.option("--hostname-prefix", default="", envvar="POSTMANIFY_HOSTNAME_PREFIX", help="Text prepended to the hostname.")
@click.option("--hostname-suffix", default="", envvar="POSTMANIFY_HOSTNAME_SUFFIX", help="Text appended to the hostname.")
@click.option("--base-path", default="", envvar="POSTMANIFY_BASE_PATH", help="Base path, defaults to the specification basePath.")
@click.option("--scheme", default=None, type=click.Choice(["http", "https"]), envvar="POSTMANIFY_SCHEME", help="URL scheme, defaults to the first specification scheme or http.")
@click.option("-H", "--header", "headers", multiple=True, callback=_parse_headers, help="Static header added to every request, as 'Key: Value'. Repeatable.")
def convert(
    source: Path,
    output: Path,
    hostname: str,
    hostname_prefix: str,
    hostname_suffix: str,
    base_path: str,
    scheme: str | None,
    headers: tuple[Header, ...],
):
    """Convert a Swagger 2.0 file into a Postman collection."""
    config = ConverterConfig(
        hostname=hostname,
        hostname_prefix=hostname_prefix,
        hostname_suffix=hostname_suffix,
        base_path=base_path,
        scheme=scheme or "",
        headers=headers,
    )

    click.echo(f"Converting {source}...")
    try:
        collection = Converter(config).convert_file(source)
        content = collection.to_json()
    except PostmanifyError as e:
        raise click.ClickException(str(e)) from e

    requests = sum(len(folder.item) for folder in collection.item)
    click.echo(f"Found {requests} requests in {len(collection.item)} folders.")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Collection saved to {output}")
