"""Merge a primary and a secondary reference database."""

from pathlib import Path
from typing import Optional

import typer

from ...config import DEFAULT_OUTPUT_PREFIX
from ...errors import MergeError
from ...merge.driver import run_merge


def merge_command(
    primary: Path = typer.Option(
        ...,
        "--primary",
        "-g",
        help="Primary (Greengenes-style) FASTA file",
        exists=True,
        dir_okay=False,
    ),
    secondary: Path = typer.Option(
        ...,
        "--secondary",
        "-s",
        help="Secondary (Silva-style) FASTA file; only Eukaryota records are kept",
        exists=True,
        dir_okay=False,
    ),
    taxonomy: Optional[Path] = typer.Option(
        None,
        "--taxonomy",
        "-t",
        help="Tab-delimited id -> taxonomy table for the primary FASTA. "
             "Required when primary descriptions do not embed the taxonomy.",
        exists=True,
        dir_okay=False,
    ),
    output_prefix: str = typer.Option(
        DEFAULT_OUTPUT_PREFIX,
        "--output-prefix",
        "-o",
        help="Prefix for the <prefix>_seqs.fasta and <prefix>_taxo.txt outputs",
    ),
    keep_description: bool = typer.Option(
        False,
        "--keep-description",
        help="Keep FASTA descriptions in the merged sequence file",
    ),
) -> None:
    """Merge two reference databases into one FASTA file and one taxonomy table.

    Every primary sequence is written with its taxonomy, taken from --taxonomy
    when given and from the sequence description otherwise. Eukaryote
    sequences from the secondary database follow, with their description as
    the taxonomy. RNA sequences are converted to DNA.
    """
    typer.echo("Merging reference databases...")
    typer.echo(f"  Primary: {primary}")
    typer.echo(f"  Secondary: {secondary}")
    if taxonomy:
        typer.echo(f"  Taxonomy table: {taxonomy}")

    try:
        summary = run_merge(
            primary_path=primary,
            secondary_path=secondary,
            taxonomy_path=taxonomy,
            output_prefix=output_prefix,
            keep_description=keep_description,
        )
    except MergeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"\n  Primary sequences: {summary.primary_records}")
    typer.echo(f"  Secondary sequences: {summary.secondary_records} ({summary.secondary_skipped} skipped)")
    if summary.collisions:
        typer.echo(f"  Identifiers in both sources: {summary.collisions}")
    typer.echo(f"\nSequences written to: {summary.sequences_path}")
    typer.echo(f"Taxonomy written to: {summary.taxonomy_path}")
    typer.echo("✓ Merge complete!")
