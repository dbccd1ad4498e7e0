"""Data types passed between the merge stages."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import FrozenSet

from ..io.fasta import SequenceRecord

# Identifiers seen in the primary source; frozen once primary processing ends
IdentifierSet = FrozenSet[str]


class TaxonomyOrigin(str, Enum):
    """Where a taxonomy string was taken from."""

    TABLE = "table"
    DESCRIPTION = "description"


@dataclass(frozen=True)
class TaxonomyEntry:
    """A resolved taxonomy string for one sequence.

    Attributes:
        identifier: Sequence identifier
        taxonomy_string: Opaque, semicolon-delimited classification
        origin: Whether it came from a taxonomy table or the FASTA description
    """

    identifier: str
    taxonomy_string: str
    origin: TaxonomyOrigin


@dataclass(frozen=True)
class MergedOutputPair:
    """One taxonomy row and the sequence record it describes.

    The pair is written as a unit so that the taxonomy table and the FASTA
    output stay in step.
    """

    identifier: str
    taxonomy_string: str
    record: SequenceRecord


@dataclass
class SecondaryStats:
    """Counts from processing the secondary source."""

    emitted: int = 0
    skipped: int = 0
    collisions: int = 0


@dataclass
class MergeSummary:
    """Result of a merge run.

    Attributes:
        sequences_path: Merged FASTA output
        taxonomy_path: Merged taxonomy table output
        primary_records: Records written from the primary source
        secondary_records: Records written from the secondary source
        secondary_skipped: Secondary records outside the wanted domain
        collisions: Secondary identifiers also present in the primary source
    """

    sequences_path: Path
    taxonomy_path: Path
    primary_records: int = 0
    secondary_records: int = 0
    secondary_skipped: int = 0
    collisions: int = 0

    @property
    def total_records(self) -> int:
        return self.primary_records + self.secondary_records
