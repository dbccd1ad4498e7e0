"""Tests for FASTA reading and writing."""

import gzip
import io

import pytest

from refdb_merge.errors import OutputNotWritableError, SequenceFormatError, SourceNotReadableError
from refdb_merge.io.fasta import (
    Alphabet,
    FastaWriter,
    SequenceRecord,
    detect_alphabet,
    open_text,
    read_sequences,
)


class TestSequenceRecord:
    """Test alphabet conversion and description clearing."""

    def test_dna_record_unchanged(self) -> None:
        record = SequenceRecord("seq1", "desc", "ACGTacgt", Alphabet.DNA)
        assert record.to_dna() is record

    def test_rna_to_dna(self) -> None:
        record = SequenceRecord("seq1", "desc", "ACGUacgu", Alphabet.RNA)
        dna = record.to_dna()

        assert dna.residues == "ACGTacgt"
        assert dna.alphabet is Alphabet.DNA
        assert dna.identifier == "seq1"
        assert dna.description == "desc"
        # Original record is untouched
        assert record.residues == "ACGUacgu"

    def test_conversion_is_not_a_reversal(self) -> None:
        record = SequenceRecord("seq1", "", "UUAACCGG", Alphabet.RNA)
        assert record.to_dna().residues == "TTAACCGG"

    def test_conversion_idempotent(self) -> None:
        dna = SequenceRecord("seq1", "", "GGUU", Alphabet.RNA).to_dna()
        assert dna.to_dna() == dna

    def test_without_description(self) -> None:
        record = SequenceRecord("seq1", "some text", "ACGT")
        cleared = record.without_description()

        assert cleared.description == ""
        assert cleared.residues == "ACGT"
        assert record.description == "some text"


@pytest.mark.parametrize(
    "residues,expected",
    [
        ("ACGT", Alphabet.DNA),
        ("ACGU", Alphabet.RNA),
        ("acgu", Alphabet.RNA),
        ("NNNN", Alphabet.DNA),
        ("", Alphabet.DNA),
    ],
)
def test_detect_alphabet(residues, expected) -> None:
    assert detect_alphabet(residues) is expected


class TestReadSequences:
    """Test lazy FASTA parsing."""

    def test_read_records(self, tmp_path) -> None:
        path = tmp_path / "test.fasta"
        path.write_text(">seq1 first sequence\nACGT\nacgt\n>seq2\nACGU\n")

        records = list(read_sequences(path))

        assert [r.identifier for r in records] == ["seq1", "seq2"]
        assert records[0].description == "first sequence"
        assert records[0].residues == "ACGTacgt"
        assert records[0].alphabet is Alphabet.DNA
        assert records[1].description == ""
        assert records[1].alphabet is Alphabet.RNA

    def test_description_with_semicolons(self, tmp_path) -> None:
        path = tmp_path / "silva.fasta"
        path.write_text(">AB000001.1.1500 Eukaryota;Opisthokonta;Fungi;Boletus edulis\nACGU\n")

        record = next(read_sequences(path))

        assert record.identifier == "AB000001.1.1500"
        assert record.description == "Eukaryota;Opisthokonta;Fungi;Boletus edulis"

    def test_read_gzipped(self, tmp_path) -> None:
        path = tmp_path / "test.fasta.gz"
        with gzip.open(path, "wt") as f:
            f.write(">seq1 gz\nACGT\n")

        records = list(read_sequences(path))

        assert len(records) == 1
        assert records[0].identifier == "seq1"
        assert records[0].residues == "ACGT"

    def test_missing_file_raises_on_first_record(self, tmp_path) -> None:
        records = read_sequences(tmp_path / "missing.fasta")
        with pytest.raises(SourceNotReadableError):
            next(records)

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.fasta"
        path.write_text("")
        assert list(read_sequences(path)) == []

    def test_header_without_identifier(self, tmp_path) -> None:
        path = tmp_path / "bad.fasta"
        path.write_text(">seq1\nACGT\n>\nACGT\n")

        records = read_sequences(path)
        assert next(records).identifier == "seq1"
        with pytest.raises(SequenceFormatError, match="without an identifier"):
            next(records)

    def test_undecodable_file(self, tmp_path) -> None:
        path = tmp_path / "bad.fasta"
        path.write_bytes(b">seq1 Eukaryota;\xff\xfe\nACGT\n")

        with pytest.raises(SequenceFormatError):
            list(read_sequences(path))

    def test_text_before_first_header_is_not_a_record(self, tmp_path) -> None:
        path = tmp_path / "leading.fasta"
        path.write_text("\n>seq1 d\nACGT\n")

        assert [r.identifier for r in read_sequences(path)] == ["seq1"]


def test_open_text_unwritable(tmp_path) -> None:
    """Failing to create an output file is not reported as an input problem."""
    with pytest.raises(OutputNotWritableError):
        open_text(tmp_path, "w")


class TestFastaWriter:
    """Test streaming FASTA output."""

    def test_write_without_description(self) -> None:
        handle = io.StringIO()
        writer = FastaWriter(handle)
        writer.write(SequenceRecord("seq1", "", "ACGT"))

        assert handle.getvalue() == ">seq1\nACGT\n"
        assert writer.count == 1

    def test_write_with_description(self) -> None:
        handle = io.StringIO()
        FastaWriter(handle).write(SequenceRecord("seq1", "kept text", "ACGT"))
        assert handle.getvalue() == ">seq1 kept text\nACGT\n"

    def test_line_wrapping(self) -> None:
        handle = io.StringIO()
        FastaWriter(handle, line_width=4).write(SequenceRecord("seq1", "", "ACGTACGTAC"))
        assert handle.getvalue() == ">seq1\nACGT\nACGT\nAC\n"

    def test_written_file_reads_back(self, tmp_path) -> None:
        path = tmp_path / "out.fasta"
        records = [
            SequenceRecord("seq1", "first", "ACGT" * 30),
            SequenceRecord("seq2", "", "GGCC"),
        ]
        with open(path, "w") as handle:
            writer = FastaWriter(handle)
            for record in records:
                writer.write(record)

        assert list(read_sequences(path)) == records
