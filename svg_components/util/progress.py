"""
Progress tracking and reporting utilities using rich.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

console = Console()


def create_progress_bar(target: Console | None = None) -> Progress:
    """
    Create a rich Progress bar with custom formatting.

    Args:
        target: Console to draw on (defaults to the module console)

    Returns:
        Configured Progress instance
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=target or console,
        transient=True,
    )


@contextmanager
def track_progress(
    description: str, total: int | None = None, target: Console | None = None
) -> Iterator[tuple[Progress, int]]:
    """
    Context manager for tracking progress with a progress bar.

    Usage:
        with track_progress("Optimizing", total=10) as (progress, task):
            for i in range(10):
                # do work
                progress.advance(task)

    Args:
        description: Description to show in progress bar
        total: Total number of steps (None for indeterminate progress)
        target: Console to draw on

    Yields:
        (Progress instance, task id)
    """
    progress = create_progress_bar(target)
    with progress:
        task = progress.add_task(description, total=total)
        yield progress, task


def show_summary(title: str, items: dict[str, str | int], target: Console | None = None):
    """
    Show a formatted summary box.

    Args:
        title: Summary title
        items: Dictionary of items to show (key: value pairs)
        target: Console to print on
    """
    from rich.panel import Panel
    from rich.table import Table

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in items.items():
        table.add_row(key, str(value))

    panel = Panel(table, title=f"[bold]{title}[/bold]", border_style="blue")
    (target or console).print(panel)
