"""Main CLI entry point for refdb_merge."""

from pathlib import Path
from typing import Optional

import typer

from ..config import __version__, DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS
from ..logging_config import configure_logging
from .commands import merge

app = typer.Typer(
    name="refdb_merge",
    help="Merge a Greengenes-style and a Silva-style reference database into one FASTA file and one taxonomy table.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        help=f"Logging level ({', '.join(VALID_LOG_LEVELS)})",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Path to log file (default: log to STDERR)",
    ),
) -> None:
    """Reference database merging for taxonomic classifiers."""
    if version:
        typer.echo(f"refdb_merge version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    if log_level.upper() not in VALID_LOG_LEVELS:
        typer.echo(
            f"Error: Invalid log level '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}",
            err=True,
        )
        raise typer.Exit(2)

    configure_logging(level=log_level.upper(), log_file=log_file)


app.command(name="merge")(merge.merge_command)


if __name__ == "__main__":
    app()
