"""FASTA reading and writing for the merge pipeline.

Sources are parsed lazily with Biopython so that only one record is held in
memory at a time. Files ending in ``.gz`` are compressed/decompressed
transparently.
"""

import gzip
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import IO, Iterator, Union

from Bio.Seq import Seq
from Bio.SeqIO.FastaIO import SimpleFastaParser

from ..config import FASTA_LINE_WIDTH
from ..errors import OutputNotWritableError, SequenceFormatError, SourceNotReadableError
from ..logging_config import get_logger

logger = get_logger(__name__)


class Alphabet(str, Enum):
    """Nucleotide alphabet of a sequence record."""

    DNA = "DNA"
    RNA = "RNA"


@dataclass(frozen=True)
class SequenceRecord:
    """A single FASTA record.

    Attributes:
        identifier: First word of the header line
        description: Remainder of the header line (may be empty)
        residues: Nucleotide symbols, case preserved
        alphabet: DNA or RNA
    """

    identifier: str
    description: str
    residues: str
    alphabet: Alphabet = Alphabet.DNA

    def to_dna(self) -> "SequenceRecord":
        """Return a DNA copy of this record (U->T, u->t).

        This is a symbol substitution only; the sequence is not reversed or
        complemented. DNA records are returned unchanged.
        """
        if self.alphabet is Alphabet.DNA:
            return self
        return replace(
            self,
            residues=str(Seq(self.residues).back_transcribe()),
            alphabet=Alphabet.DNA,
        )

    def without_description(self) -> "SequenceRecord":
        """Return a copy of this record with an empty description."""
        if not self.description:
            return self
        return replace(self, description="")


def open_text(path: Union[str, Path], mode: str = "r") -> IO[str]:
    """Open a plain or gzip-compressed text file.

    Args:
        path: File path; a ``.gz`` suffix selects gzip
        mode: ``"r"``, ``"w"`` or ``"a"``

    Raises:
        SourceNotReadableError: If a file opened for reading cannot be opened
        OutputNotWritableError: If a file opened for writing cannot be created
    """
    path = Path(path)
    error = SourceNotReadableError if mode == "r" else OutputNotWritableError
    try:
        if path.suffix == ".gz":
            return gzip.open(path, mode + "t", encoding="utf-8")
        return open(path, mode, encoding="utf-8")
    except OSError as e:
        logger.error("Cannot open %s: %s", path, e)
        raise error(f"Cannot open {path}: {e}") from e


def detect_alphabet(residues: str) -> Alphabet:
    """Guess the alphabet of a nucleotide string: RNA if it contains uracil."""
    if "U" in residues or "u" in residues:
        return Alphabet.RNA
    return Alphabet.DNA


def read_sequences(fasta_path: Union[str, Path]) -> Iterator[SequenceRecord]:
    """Lazily yield the records of a FASTA file in file order.

    The file is not opened until the first record is requested. Biopython's
    parser skips any text before the first ``>`` header line; such text
    never becomes a record.

    Args:
        fasta_path: Path to a FASTA file (optionally gzipped)

    Yields:
        SequenceRecord objects

    Raises:
        SourceNotReadableError: If the file cannot be opened or read
        SequenceFormatError: If the file is not valid FASTA
    """
    fasta_path = Path(fasta_path)
    logger.info("Reading FASTA file: %s", fasta_path)

    count = 0
    with open_text(fasta_path) as handle:
        try:
            for title, residues in SimpleFastaParser(handle):
                fields = title.split(None, 1)
                if not fields:
                    raise SequenceFormatError(
                        f"FASTA record without an identifier in {fasta_path}"
                    )
                description = fields[1].strip() if len(fields) > 1 else ""
                count += 1
                yield SequenceRecord(
                    identifier=fields[0],
                    description=description,
                    residues=residues,
                    alphabet=detect_alphabet(residues),
                )
        except ValueError as e:
            logger.error("Failed to parse FASTA file %s: %s", fasta_path, e)
            raise SequenceFormatError(f"Failed to parse FASTA file {fasta_path}: {e}") from e
        except OSError as e:
            logger.error("Failed to read FASTA file %s: %s", fasta_path, e)
            raise SourceNotReadableError(f"Failed to read FASTA file {fasta_path}: {e}") from e

    logger.info("Read %d sequence(s) from %s", count, fasta_path)


class FastaWriter:
    """Write SequenceRecords to an open text handle, one at a time."""

    def __init__(self, handle: IO[str], line_width: int = FASTA_LINE_WIDTH) -> None:
        self.handle = handle
        self.line_width = line_width
        self.count = 0

    def write(self, record: SequenceRecord) -> None:
        if record.description:
            self.handle.write(f">{record.identifier} {record.description}\n")
        else:
            self.handle.write(f">{record.identifier}\n")
        residues = record.residues
        for i in range(0, len(residues), self.line_width):
            self.handle.write(residues[i:i + self.line_width] + "\n")
        self.count += 1
        logger.debug("Wrote sequence '%s' (length=%d)", record.identifier, len(residues))
