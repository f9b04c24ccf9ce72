"""CLI entry point for the SDK helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from eyes_fluent.capture import image_utils
from eyes_fluent.capture.scale_provider import ContextBasedScaleProvider
from eyes_fluent.models.config import SdkConfig
from eyes_fluent.models.geometry import RectangleSize, ScaleMethod

console = Console()

DEFAULT_CONFIG = "eyes-config.json"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _parse_size(ctx, param, value: str) -> RectangleSize:
    try:
        return RectangleSize.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _build_provider(viewport: RectangleSize, content: RectangleSize, dpr: float,
                    method: str) -> ContextBasedScaleProvider:
    try:
        return ContextBasedScaleProvider(content, viewport, ScaleMethod(method), dpr)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


size_options = [
    click.option("--viewport", required=True, callback=_parse_size, help="Viewport size, WIDTHxHEIGHT"),
    click.option("--content", required=True, callback=_parse_size, help="Full page size, WIDTHxHEIGHT"),
    click.option("--dpr", type=float, default=1.0, show_default=True, help="Device pixel ratio"),
    click.option(
        "--method",
        type=click.Choice([m.value for m in ScaleMethod]),
        default=ScaleMethod.SPEED.value,
        show_default=True,
        help="Resampling quality",
    ),
]


def with_size_options(func):
    for option in reversed(size_options):
        func = option(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Visual check settings and screenshot scaling tools"""
    setup_logging(verbose)


@cli.command()
@click.option("--app-name", "-a", prompt="Application name", help="Application under test")
@click.option("--server-url", default=SdkConfig.model_fields["server_url"].default, help="Comparison service URL")
def init(app_name: str, server_url: str) -> None:
    """Create a default configuration file."""
    config_path = Path(DEFAULT_CONFIG)
    if config_path.exists():
        if not click.confirm(f"{DEFAULT_CONFIG} already exists. Overwrite?"):
            return

    cfg = SdkConfig(app_name=app_name, server_url=server_url)
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("Set \"api_key\" in this file, or use \"env:EYES_API_KEY\" to read it from the environment.")


@cli.command("scale-ratio")
@with_size_options
@click.option("--image-width", type=float, required=True, help="Width of the captured image")
def scale_ratio(viewport: RectangleSize, content: RectangleSize, dpr: float, method: str,
                image_width: float) -> None:
    """Print the scale ratio chosen for a captured image width."""
    provider = _build_provider(viewport, content, dpr, method)
    provider.update_scale_ratio(image_width)
    console.print(f"{provider.get_scale_ratio():g}")


@cli.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@with_size_options
def scale(image: Path, output: Path, viewport: RectangleSize, content: RectangleSize,
          dpr: float, method: str) -> None:
    """Normalize a captured screenshot to logical pixels."""
    provider = _build_provider(viewport, content, dpr, method)
    img = image_utils.load_image(image)
    provider.update_scale_ratio(img.width)
    scaled = provider.scale_image(img)
    output.parent.mkdir(parents=True, exist_ok=True)
    scaled.save(output)
    console.print(
        f"[green]Saved {output}[/green] ({img.width}x{img.height} -> "
        f"{scaled.width}x{scaled.height}, ratio {provider.get_scale_ratio():g})"
    )


@cli.command()
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def settings(config: str) -> None:
    """Show the match settings a default check would send."""
    try:
        cfg = SdkConfig.load(config)
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {config}[/red]")
        console.print("Run 'eyes-fluent init' to create a default config.")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid config {escape(config)}: {escape(str(e))}[/red]")
        sys.exit(1)

    check = cfg.default_check_settings()
    match = check.to_match_settings(cfg.default_match_level)

    table = Table(title="Default Check Settings")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("App", cfg.app_name or "-")
    table.add_row("Server", cfg.server_url)
    table.add_row("Match level", str(match.match_level))
    table.add_row("Stitch content", str(check.get_stitch_content()))
    table.add_row("Timeout (s)", f"{check.get_timeout():g}")
    table.add_row("Scale method", cfg.scale_method.value)
    table.add_row("Viewport", str(cfg.viewport))
    console.print(table)


if __name__ == "__main__":
    cli()
