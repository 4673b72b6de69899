"""CLI application entry point for polyaffine.

This module provides the main CLI interface using Typer.
"""

import webbrowser
from pathlib import Path
from typing import Annotated

import typer

from polyaffine import __version__
from polyaffine.cli.output import (
    console,
    print_error,
    print_exported,
    print_header,
    print_normal_demo,
    print_samples,
    print_step,
)
from polyaffine.config import HtmlConfig, LoggingConfig, LogLevel, PolyaffineSettings
from polyaffine.core import build_samples, run_normal_demo
from polyaffine.exceptions import BackendUnavailableError, PolyaffineError
from polyaffine.render import HtmlExporter, WindowRenderer
from polyaffine.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="polyaffine",
    help="Apply 2D affine transforms to a polygon and compare naive vs inverse-transpose normals.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyaffine[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def show(
    normal_demo: Annotated[
        bool,
        typer.Option(
            "--normal-demo",
            help="Print the tangent/normal transformation comparison first",
        ),
    ] = False,
    gui: Annotated[
        bool,
        typer.Option(
            "--gui",
            help="Draw all polygons in a window (requires the gui extra)",
        ),
    ] = False,
    html: Annotated[
        bool,
        typer.Option(
            "--html",
            help="Write an animated HTML/SVG comparison page",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="HTML output path (default: affine_view.html)",
        ),
    ] = None,
    open_browser: Annotated[
        bool,
        typer.Option(
            "--open",
            help="Open the exported HTML page in the default browser",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Transform the sample polygon and show the results.

    Without options every transformed polygon is listed on the console.

    Example:
        polyaffine --normal-demo --html --open
    """
    if gui and html:
        print_error("Cannot use --gui and --html together")
        raise typer.Exit(code=1)

    if output is not None and not html:
        print_error("--output only applies to --html")
        raise typer.Exit(code=1)

    settings = PolyaffineSettings(
        html=HtmlConfig(output_path=output) if output is not None else HtmlConfig(),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )

    try:
        samples = build_samples()
        logger.info("Samples built", count=len(samples))

        if normal_demo:
            demo = run_normal_demo()
            print_normal_demo(demo)

        if gui:
            if not quiet:
                print_header(__version__)
                print_step("Opening window")
            WindowRenderer(settings.window).show(samples)
        elif html:
            if not quiet:
                print_header(__version__)
                print_step("Exporting HTML")
            path = HtmlExporter(settings.html).write(samples, run_normal_demo())
            if not quiet:
                print_exported(str(path))
            if open_browser:
                webbrowser.open(path.resolve().as_uri())
        else:
            print_samples(samples)

    except BackendUnavailableError as e:
        print_error(f"{e.backend} not found", details=e.hint)
        raise typer.Exit(code=1)
    except PolyaffineError as e:
        logger.error("Run failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
