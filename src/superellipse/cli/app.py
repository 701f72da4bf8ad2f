"""CLI application entry point for superellipse.

This module provides the main CLI interface using Typer.
"""

import json
import os
from pathlib import Path
from typing import Annotated

import typer

from superellipse import __version__
from superellipse.cli.output import (
    console,
    create_progress,
    print_batch_summary,
    print_cancellation_summary,
    print_error,
    print_exception,
    print_header,
    print_metrics,
    print_path_info,
    print_processing_info,
    print_shape_info,
    print_step,
)
from superellipse.config import (
    LoggingConfig,
    ProcessingConfig,
    SuperellipseSettings,
    get_default_settings,
)
from superellipse.core import PathProcessor, build_path, estimate_metrics
from superellipse.domain import CornerExponents, PathMode, PathRequest, SampleOptions, ShapeSpec
from superellipse.exceptions import SuperellipseError
from superellipse.io import dump_results, read_requests
from superellipse.utils import configure_logging

DEFAULT_EXPONENT = 4.0

app = typer.Typer(
    name="superellipse",
    help="Generate superellipse clip paths and estimate their perimeter and area.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Superellipse[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Superellipse geometry engine."""


WidthOption = Annotated[float, typer.Option("--width", "-W", help="Bounding box width")]
HeightOption = Annotated[float, typer.Option("--height", "-H", help="Bounding box height")]
ExponentOption = Annotated[
    float | None,
    typer.Option("--exponent", "-n", help=f"Uniform exponent (default: {DEFAULT_EXPONENT})"),
]
CornerOption = Annotated[float | None, typer.Option(help="Corner exponent")]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]


def _corner_exponents(
    top_left: float | None,
    top_right: float | None,
    bottom_right: float | None,
    bottom_left: float | None,
) -> CornerExponents | None:
    """Build corner exponents, or None when no corner option was given."""
    values = (top_left, top_right, bottom_right, bottom_left)
    if all(v is None for v in values):
        return None
    if any(v is None for v in values):
        print_error(
            "Per-corner mode needs all four corner exponents",
            details="Pass --top-left, --top-right, --bottom-right and --bottom-left",
        )
        raise typer.Exit(code=1)
    return CornerExponents(
        top_left=top_left,
        top_right=top_right,
        bottom_right=bottom_right,
        bottom_left=bottom_left,
    )


def _build_request(
    width: float,
    height: float,
    exponent: float | None,
    exponent_x: float | None,
    exponent_y: float | None,
    corners: CornerExponents | None,
    options: SampleOptions,
) -> PathRequest:
    """Pick the path mode from the exponent options that were given."""
    given = sum(
        [exponent is not None, exponent_x is not None or exponent_y is not None, corners is not None]
    )
    if given > 1:
        print_error(
            "Conflicting exponent options",
            details="Use one of --exponent, --exponent-x/--exponent-y, or the corner options",
        )
        raise typer.Exit(code=1)

    if corners is not None:
        return PathRequest(
            mode=PathMode.PER_CORNER, width=width, height=height, corners=corners, options=options
        )

    if exponent_x is not None or exponent_y is not None:
        if exponent_x is None or exponent_y is None:
            print_error("Asymmetric mode needs both --exponent-x and --exponent-y")
            raise typer.Exit(code=1)
        return PathRequest(
            mode=PathMode.ASYMMETRIC,
            width=width,
            height=height,
            exponent_x=exponent_x,
            exponent_y=exponent_y,
            options=options,
        )

    return PathRequest(
        mode=PathMode.SYMMETRIC,
        width=width,
        height=height,
        exponent=exponent if exponent is not None else DEFAULT_EXPONENT,
        options=options,
    )


def _describe_exponents(request: PathRequest) -> str:
    if request.mode == PathMode.PER_CORNER and request.corners is not None:
        return "corners " + "/".join(f"{v:g}" for v in request.corners.as_tuple())
    if request.mode == PathMode.ASYMMETRIC:
        return f"n={request.exponent_x:g}/{request.exponent_y:g}"
    return f"n={request.exponent:g}"


@app.command()
def path(
    width: WidthOption = 320.0,
    height: HeightOption = 400.0,
    exponent: ExponentOption = None,
    exponent_x: Annotated[
        float | None, typer.Option("--exponent-x", help="Exponent for the x term")
    ] = None,
    exponent_y: Annotated[
        float | None, typer.Option("--exponent-y", help="Exponent for the y term")
    ] = None,
    top_left: CornerOption = None,
    top_right: CornerOption = None,
    bottom_right: CornerOption = None,
    bottom_left: CornerOption = None,
    steps: Annotated[
        int | None,
        typer.Option("--steps", "-s", help="Angular steps (default: 360, 720 for wide shapes)"),
    ] = None,
    precision: Annotated[
        int | None,
        typer.Option("--precision", "-p", help="Decimal digits per coordinate (default: 2)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show shape details on stderr")
    ] = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Print the closed path descriptor of a superellipse.

    Uses one exponent by default, independent x/y exponents with
    --exponent-x/--exponent-y, or per-corner exponents with the four
    corner options.

    Example:
        superellipse path -W 320 -H 400 -n 4
    """
    settings = get_default_settings()
    logger = configure_logging(console_level=log_level)

    options = settings.sampling.options_for(width)
    options = SampleOptions(
        steps=steps if steps is not None else options.steps,
        precision=precision if precision is not None else options.precision,
    )
    corners = _corner_exponents(top_left, top_right, bottom_right, bottom_left)
    request = _build_request(width, height, exponent, exponent_x, exponent_y, corners, options)

    try:
        path_data = build_path(request)
    except SuperellipseError as e:
        logger.info("Path generation rejected", error=str(e), code=e.code.value)
        print_exception(e)
        raise typer.Exit(code=1)

    logger.debug("Path generated", mode=request.mode.value, length=len(path_data))

    if verbose:
        print_header(__version__)
        print_shape_info(request.mode.value, width, height, _describe_exponents(request))
        print_path_info(options.steps, options.precision, len(path_data))

    typer.echo(path_data)


@app.command()
def metrics(
    width: WidthOption = 320.0,
    height: HeightOption = 400.0,
    exponent: ExponentOption = None,
    top_left: CornerOption = None,
    top_right: CornerOption = None,
    bottom_right: CornerOption = None,
    bottom_left: CornerOption = None,
    steps: Annotated[
        int | None,
        typer.Option("--steps", "-s", help="Samples for the estimate (default: 1000)"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print metrics as JSON")] = False,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """Estimate the perimeter and area of a superellipse.

    Example:
        superellipse metrics -W 100 -H 100 -n 2
    """
    settings = get_default_settings()
    logger = configure_logging(console_level=log_level)
    sample_count = steps if steps is not None else settings.sampling.metrics_steps

    corners = _corner_exponents(top_left, top_right, bottom_right, bottom_left)
    if corners is not None and exponent is not None:
        print_error("Use either --exponent or the corner options, not both")
        raise typer.Exit(code=1)

    if corners is None and exponent is None:
        exponent = DEFAULT_EXPONENT
    shape = ShapeSpec(width=width, height=height, exponent=exponent, corners=corners)

    try:
        result = estimate_metrics(shape, sample_count)
    except SuperellipseError as e:
        logger.info("Metrics rejected", error=str(e), code=e.code.value)
        print_exception(e)
        raise typer.Exit(code=1)

    logger.debug("Metrics estimated", perimeter=result.perimeter, area=result.area)

    if as_json:
        typer.echo(json.dumps(result.to_dict()))
    else:
        print_metrics(result, width, height, sample_count)


@app.command()
def batch(
    requests_file: Annotated[
        Path,
        typer.Argument(help="JSON file with a list of path requests", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write results here instead of stdout"),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-j", help="Number of parallel workers (default: auto)", min=1),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: LogLevelOption = "WARNING",
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Minimal console output")] = False,
) -> None:
    """Generate paths for every request in a JSON file, in parallel.

    Each request names a mode (symmetric, asymmetric or per-corner), the
    dimensions, and the exponent fields for that mode. Failed requests are
    reported in the results instead of stopping the batch.

    Example:
        superellipse batch requests.json -o results.json
    """
    settings = SuperellipseSettings(
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    try:
        requests = read_requests(requests_file)
    except SuperellipseError as e:
        print_exception(e)
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step(f"Processing {len(requests)} requests")
        actual_workers = workers if workers else os.cpu_count() or 1
        print_processing_info(actual_workers, is_auto=(workers is None))

    processor = PathProcessor(settings)
    stats = processor.processing_logger.stats

    try:
        if not quiet and requests:
            with create_progress() as progress:
                task_id = progress.add_task(f"{len(requests)} requests", total=len(requests))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                results, stats = processor.process(
                    requests, max_workers=workers, progress_callback=update_progress
                )
        else:
            results, stats = processor.process(requests, max_workers=workers)
    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_summary(
                processed=stats.processed_count,
                cancelled=stats.cancelled_count,
            )
        raise typer.Exit(code=130) from None

    payload = dump_results(results)
    if output is not None:
        output.write_text(payload + "\n", encoding="utf-8")
    else:
        typer.echo(payload)

    if not quiet:
        print_batch_summary(
            total_time_s=stats.duration_seconds,
            processed=stats.processed_count,
            errors=stats.error_count,
            avg_time_ms=stats.avg_request_time_ms,
            min_time_ms=stats.min_request_time_ms,
            max_time_ms=stats.max_request_time_ms,
            output_path=str(output) if output is not None else None,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
