"""Merge orchestration.

Runs the primary stage to completion, then the secondary stage, writing
every emitted pair to ``<prefix>_taxo.txt`` and ``<prefix>_seqs.fasta``.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from ..config import (
    DEFAULT_OUTPUT_PREFIX,
    DEFAULT_SECONDARY_DOMAIN,
    SEQUENCES_SUFFIX,
    TAXONOMY_HEADER,
    TAXONOMY_SUFFIX,
)
from ..errors import MergeError, OutputNotWritableError
from ..io.fasta import FastaWriter, open_text, read_sequences
from ..io.taxonomy import read_taxonomy_table
from ..logging_config import get_logger
from .processors import process_primary, process_secondary
from .resolvers import make_resolver
from .types import MergedOutputPair, MergeSummary

logger = get_logger(__name__)


def output_paths(output_prefix: Union[str, Path]) -> Tuple[Path, Path]:
    """Return the (sequences, taxonomy) output paths for a prefix."""
    prefix = str(output_prefix)
    return Path(prefix + SEQUENCES_SUFFIX), Path(prefix + TAXONOMY_SUFFIX)


class MergedOutputWriter:
    """Owns the FASTA and taxonomy outputs of a merge.

    Use as a context manager. The taxonomy header is written on entry and
    both files are closed on exit.
    """

    def __init__(self, sequences_path: Union[str, Path], taxonomy_path: Union[str, Path]) -> None:
        self.sequences_path = Path(sequences_path)
        self.taxonomy_path = Path(taxonomy_path)
        self._sequences = None
        self._taxonomy = None
        self._fasta: Optional[FastaWriter] = None

    def __enter__(self) -> "MergedOutputWriter":
        try:
            for path in (self.sequences_path, self.taxonomy_path):
                path.parent.mkdir(parents=True, exist_ok=True)
            self._taxonomy = open_text(self.taxonomy_path, "w")
            self._sequences = open_text(self.sequences_path, "w")
        except OSError as e:
            self.close()
            logger.error("Cannot create output directory for %s: %s", self.sequences_path, e)
            raise OutputNotWritableError(f"Cannot create output files: {e}") from e
        except MergeError:
            self.close()
            raise
        self._fasta = FastaWriter(self._sequences)
        self._taxonomy.write("\t".join(TAXONOMY_HEADER) + "\n")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def count(self) -> int:
        """Number of pairs written so far."""
        return self._fasta.count if self._fasta else 0

    def write_pair(self, pair: MergedOutputPair) -> None:
        """Write the taxonomy row, then the sequence record, for one pair."""
        self._taxonomy.write(f"{pair.identifier}\t{pair.taxonomy_string}\n")
        self._fasta.write(pair.record)

    def close(self) -> None:
        for handle in (self._taxonomy, self._sequences):
            if handle is not None and not handle.closed:
                handle.close()


def run_merge(
    primary_path: Union[str, Path],
    secondary_path: Union[str, Path],
    taxonomy_path: Optional[Union[str, Path]] = None,
    output_prefix: Union[str, Path] = DEFAULT_OUTPUT_PREFIX,
    keep_description: bool = False,
    domain: str = DEFAULT_SECONDARY_DOMAIN,
) -> MergeSummary:
    """Merge a primary and a secondary reference database.

    Steps:
    1. Read the taxonomy table, if one is given
    2. Write every primary record with its taxonomy
    3. Write every secondary record from ``domain``, warning on shared ids

    On a fatal error the exception propagates and output written so far is
    left in place.

    Args:
        primary_path: Greengenes-style FASTA file
        secondary_path: Silva-style FASTA file
        taxonomy_path: Optional tab-delimited id -> taxonomy table for the
            primary source. Without it, taxonomy is parsed from descriptions
        output_prefix: Prefix for ``_seqs.fasta`` and ``_taxo.txt`` outputs
        keep_description: Keep FASTA descriptions in the merged sequences
        domain: First taxonomic rank kept from the secondary source

    Returns:
        MergeSummary with output paths and record counts

    Raises:
        MergeError: On any fatal condition (see refdb_merge.errors)
    """
    sequences_path, taxo_path = output_paths(output_prefix)

    logger.info("=" * 60)
    logger.info("Starting reference database merge")
    logger.info("=" * 60)
    logger.info("Primary FASTA: %s", primary_path)
    logger.info("Secondary FASTA: %s", secondary_path)
    logger.info("Taxonomy table: %s", taxonomy_path if taxonomy_path else "none (parse descriptions)")
    logger.info("Keep descriptions: %s", keep_description)

    taxonomy_table = read_taxonomy_table(taxonomy_path) if taxonomy_path else None
    resolver = make_resolver(taxonomy_table)

    summary = MergeSummary(sequences_path=sequences_path, taxonomy_path=taxo_path)

    with MergedOutputWriter(sequences_path, taxo_path) as writer:
        logger.info("Step 1: Processing primary source...")
        identifiers = process_primary(
            read_sequences(primary_path), resolver, keep_description, writer.write_pair
        )
        summary.primary_records = writer.count

        logger.info("Step 2: Processing secondary source...")
        stats = process_secondary(
            read_sequences(secondary_path),
            identifiers,
            keep_description,
            writer.write_pair,
            domain=domain,
        )
        summary.secondary_records = stats.emitted
        summary.secondary_skipped = stats.skipped
        summary.collisions = stats.collisions

    logger.info("Wrote %d sequence(s) to %s", summary.total_records, sequences_path)
    logger.info("Wrote %d taxonomy row(s) to %s", summary.total_records, taxo_path)
    return summary
