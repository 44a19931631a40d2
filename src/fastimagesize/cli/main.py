"""Command-line interface for fastimagesize."""
from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.table import Table

from fastimagesize import __version__
from fastimagesize.core.engine import ImageSizeEngine
from fastimagesize.models.config import ImageSizeConfig
from fastimagesize.transport.httpx_transport import HttpxTransport

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fastimagesize")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """fastimagesize - image dimensions from header bytes."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("sources", nargs=-1)
@click.option(
    "-t", "--type",
    "type_hints",
    multiple=True,
    help="Extension or MIME type, once per source in order",
)
@click.option("--parallel", is_flag=True, help="Fetch remote images concurrently")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
@click.option("--workers", type=int, default=8, help="Concurrent remote requests")
@click.option("--no-cache", is_flag=True, help="Disable the result cache")
def size(
    sources: tuple[str, ...],
    type_hints: tuple[str, ...],
    parallel: bool,
    as_json: bool,
    timeout: float,
    workers: int,
    no_cache: bool,
) -> None:
    """Print the dimensions of images.

    Examples:

        fastimagesize size photo.jpg

        fastimagesize size https://example.com/a.png logo -t "" -t image/gif

        fastimagesize size *.webp --json
    """
    if not sources:
        console.print("[red]Error: No sources specified[/red]")
        sys.exit(1)

    config = ImageSizeConfig(
        timeout_seconds=timeout,
        max_workers=workers,
        use_cache=not no_cache,
    )

    with ImageSizeEngine(config, HttpxTransport(config)) as engine:
        results = engine.get_image_sizes(list(sources), list(type_hints), parallel)

    if as_json:
        click.echo(json.dumps(
            {src: r.to_dict() if r else None for src, r in results.items()},
            indent=2,
        ))
    else:
        table = Table(title="Image Sizes")
        table.add_column("Source", style="cyan")
        table.add_column("Width", justify="right")
        table.add_column("Height", justify="right")
        table.add_column("Format", style="green")

        for src in dict.fromkeys(sources):
            result = results[src]
            if result is None:
                table.add_row(src, "-", "-", "[red]undetected[/red]")
            else:
                table.add_row(
                    src, str(result.width), str(result.height), result.format.value
                )

        console.print(table)

    if any(result is None for result in results.values()):
        sys.exit(1)


@cli.command()
def formats() -> None:
    """List supported image formats."""
    probes = ImageSizeEngine().list_probes()

    table = Table(title="Supported Formats")
    table.add_column("Probe", style="cyan")
    table.add_column("Format", style="yellow")
    table.add_column("Extensions / MIME subtypes", style="green")

    for probe in probes:
        table.add_row(probe["name"], probe["format"], ", ".join(probe["tokens"]))

    console.print(table)


if __name__ == "__main__":
    cli()
