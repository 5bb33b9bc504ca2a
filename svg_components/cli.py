"""
CLI entry point for svg-components.
"""

import logging
from functools import wraps

import typer
from rich.console import Console
from rich.logging import RichHandler

from svg_components.config import build_config, find_config_file, load_config_file
from svg_components.exceptions import (
    InvalidInputPathError,
    InvalidOutputPathError,
    SvgComponentsError,
    format_error_for_cli,
)
from svg_components.generate import generate_components
from svg_components.paths import PathKind, collect_svg_sources, is_path_valid
from svg_components.util.progress import show_summary, track_progress

app = typer.Typer(
    name="svg-components",
    help="Generate React and React Native components from SVG files",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def handle_errors(func):
    """Decorator to handle exceptions in CLI commands with nice formatting."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except SvgComponentsError as e:
            console.print(format_error_for_cli(e))
            raise typer.Exit(1)
        except Exception as e:
            console.print(f"[red]Unexpected error:[/red] {str(e)}")
            console.print("\n[yellow]This may be a bug. Please report it with the SVG that")
            console.print("triggered it and the output of --verbose.[/yellow]")
            logger.debug("Unexpected error", exc_info=True)
            raise typer.Exit(1)

    return wrapper


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
@handle_errors
def generate(
    folder: str | None = typer.Option(
        None, "--folder", "-f", help="SVG file or directory containing .svg files"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Existing directory to write components to"
    ),
    typescript: bool | None = typer.Option(
        None, "--typescript/--no-typescript", help="Generate typed .tsx components"
    ),
    react_native: bool | None = typer.Option(
        None, "--react-native/--no-react-native", help="Generate react-native-svg components"
    ),
    jobs: int | None = typer.Option(
        None, "--jobs", "-j", min=1, help="Files read and optimized concurrently (default: 8)"
    ),
    optimize: bool | None = typer.Option(
        None, "--optimize/--no-optimize", help="Optimize SVG markup before translating"
    ),
    disable: list[str] | None = typer.Option(
        None, "--disable", help="Optimization step to skip (repeatable)"
    ),
    config_file: str | None = typer.Option(
        None, "--config", "-c", help="YAML config file (default: ./svg-components.yaml)"
    ),
    templates: str | None = typer.Option(
        None, "--templates", help="Directory with templates overriding the defaults"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Convert SVG files into component source files."""
    configure_logging(verbose)

    if not is_path_valid(folder, PathKind.ANY):
        raise InvalidInputPathError(folder)

    if not is_path_valid(output, PathKind.DIRECTORY):
        raise InvalidOutputPathError(output)

    settings_file = find_config_file(config_file)
    settings = load_config_file(settings_file) if settings_file else {}

    config = build_config(
        folder,
        output,
        settings,
        settings_file,
        typescript=typescript,
        react_native=react_native,
        jobs=jobs,
        optimize=optimize,
        disable=disable,
        templates_dir=templates,
    )

    sources = collect_svg_sources(config.input_path)
    if not sources:
        console.print(f"[yellow]No .svg files found in {config.input_path}[/yellow]")
        return

    console.print(
        f"[bold blue]Converting {len(sources)} SVG file(s):[/bold blue] "
        f"dialect={config.dialect.name}"
    )

    # Each file advances the bar once when loaded and once when written
    with track_progress("Converting", total=len(sources) * 2, target=console) as tracked:
        progress, task = tracked
        report = generate_components(
            sources, config, on_progress=lambda stage, path: progress.advance(task)
        )

    for outcome in report.outcomes:
        if outcome.ok:
            console.print(f"[green]✓ {outcome.source.name} → {outcome.output.name}[/green]")
        else:
            console.print(f"[red]✗ {outcome.source.name}[/red]")
            console.print(format_error_for_cli(outcome.error))

    show_summary(
        "svg-components",
        {
            "Dialect": config.dialect.name,
            "Output": str(config.output_path),
            "Generated": len(report.generated),
            "Failed": len(report.failed),
        },
        target=console,
    )

    if report.failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
