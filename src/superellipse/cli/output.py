"""Rich console output helpers for the CLI.

Status, progress and errors go to stderr so that path and JSON output on
stdout can be piped straight into other tools.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from superellipse.domain import Metrics
from superellipse.exceptions import to_user_message

console = Console(stderr=True)
stdout_console = Console(highlight=False)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]Superellipse[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_shape_info(mode: str, width: float, height: float, exponents: str) -> None:
    """Print the shape being generated.

    Args:
        mode: Path mode name
        width: Bounding box width
        height: Bounding box height
        exponents: Human-readable exponent description
    """
    console.print(f"  {mode} {SYM_DOT} {width:g} × {height:g} {SYM_DOT} {exponents}")


def print_path_info(steps: int, precision: int, path_length: int) -> None:
    """Print a summary of a generated path."""
    console.print(
        f"  {steps + 1} points {SYM_DOT} precision {precision} {SYM_DOT} {path_length:,} chars"
    )


def print_metrics(metrics: Metrics, width: float, height: float, steps: int) -> None:
    """Print estimated metrics as a table on stdout.

    Args:
        metrics: Estimated perimeter and area
        width: Bounding box width
        height: Bounding box height
        steps: Sample count used for the estimate
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Perimeter", f"{metrics.perimeter:.2f}")
    table.add_row("Area", f"{metrics.area:.2f}")
    table.add_row("Fill ratio", f"{metrics.area / (width * height):.2%}")
    table.add_row("Samples", f"{steps:,}")
    stdout_console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print processing configuration."""
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_batch_summary(
    total_time_s: float,
    processed: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
    output_path: str | None = None,
) -> None:
    """Print batch completion summary.

    Args:
        total_time_s: Total processing time in seconds
        processed: Number of paths generated
        errors: Number of failed requests
        avg_time_ms: Average time per request in milliseconds
        min_time_ms: Fastest request in milliseconds
        max_time_ms: Slowest request in milliseconds
        output_path: Where results were written, if not stdout
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    if output_path:
        console.print(f"  [bold]{escape(output_path)}[/bold]", highlight=False)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} paths {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        timing = f"{avg_time_ms:.2f}ms avg per path"
        if min_time_ms is not None and max_time_ms is not None:
            timing += f" ({min_time_ms:.2f}-{max_time_ms:.2f}ms range)"
        console.print(f"  {timing}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", highlight=False)
    if details:
        console.print(f"  {escape(details)}", highlight=False)


def print_exception(error: Exception) -> None:
    """Print an engine error with its user-facing hint."""
    user_message = to_user_message(error)
    print_error(str(error), details=user_message.hint)


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} paths completed {SYM_DOT} {cancelled} requests cancelled")
    console.print("  No results written")
