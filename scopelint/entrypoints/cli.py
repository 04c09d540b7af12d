import logging
from pathlib import Path
from typing import Annotated

import typer

from scopelint import __version__
from scopelint.config import CheckConfig
from scopelint.services.checker import ConventionChecker
from scopelint.services.formatting import FormattingService
from scopelint.services.spec_generator import SpecificationService

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="scopelint",
    add_completion=False,
    no_args_is_help=True,
    help="Opinionated convention and formatting checks for forge projects.",
)

ProjectRoot = Annotated[
    Path,
    typer.Argument(
        help="Root of the forge project, the directory holding foundry.toml.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        resolve_path=True,
    ),
]


def _error(message: str) -> None:
    label = typer.style("error", fg=typer.colors.RED, bold=True)
    typer.echo(f"{label}: {message}", err=True)


@app.callback()
def configure(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("check")
def check(
    root: ProjectRoot = Path("."),
    jobs: Annotated[
        int | None,
        typer.Option(
            "--jobs",
            "-j",
            min=1,
            help="Number of files to check in parallel.",
            envvar="SCOPELINT_JOBS",
        ),
    ] = None,
    check_formatting: Annotated[
        bool,
        typer.Option(
            "--fmt/--no-fmt",
            help="Whether to also verify formatting with forge and taplo.",
        ),
    ] = True,
) -> None:
    """Check naming conventions and formatting, exiting with 1 on failure.

    Args:
        root: Project root to check.
        jobs: Number of worker threads.
        check_formatting: Whether to run the formatting check.
    """
    try:
        config = CheckConfig.from_project(root, jobs=jobs, check_formatting=check_formatting)
        report = ConventionChecker(config=config).run()
    except ValueError as e:
        _error(str(e))
        raise typer.Exit(code=1) from e

    conventions_ok = report.is_valid()
    formatting_ok = (
        FormattingService(src=config.root).check() if config.check_formatting else True
    )

    typer.echo(report.render(), err=True, nl=False)
    if not conventions_ok:
        _error("Convention checks failed, see details above")
    if not formatting_ok:
        _error("Formatting validation failed, run `forge fmt` and `taplo fmt` to fix")
    if not (conventions_ok and formatting_ok):
        raise typer.Exit(code=1)

    logger.info("Checks passed for %s", config.root)


@app.command("spec")
def spec(root: ProjectRoot = Path(".")) -> None:
    """Print a specification tree of source contracts built from test names.

    Args:
        root: Project root to read.
    """
    try:
        config = CheckConfig.from_project(root)
        output = SpecificationService(config=config).render()
    except ValueError as e:
        _error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(output, nl=False)


@app.command("version")
def version() -> None:
    """Print the installed version."""
    typer.echo(f"scopelint v{__version__}")


def main() -> None:
    """Entry point for executing the Typer application."""
    app()


if __name__ == "__main__":
    main()
