#!/usr/bin/env python3
"""Example merging a small Greengenes-style and Silva-style database.

Writes two toy FASTA files to a temporary directory, merges them, and prints
the resulting taxonomy table and FASTA file.
"""

from pathlib import Path
import tempfile

from refdb_merge.logging_config import configure_logging
from refdb_merge.merge import run_merge

GREENGENES = """>1111886 AB001234.1 Methanobrevibacter smithii k__Archaea; p__Euryarchaeota; g__Methanobrevibacter; otu_127
ACGTACGTACGT
"""

SILVA = """>AB000001.1.1500 Eukaryota;Opisthokonta;Fungi;Boletus edulis
ACGUACGUACGU
>AB000002.1.1400 Bacteria;Proteobacteria;Escherichia coli
ACGUUUGGCCAA
"""


def main():
    """Run a merge on toy inputs."""
    configure_logging(level="INFO")

    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir = Path(tmpdir)
        primary = tmpdir / "gg.fasta"
        secondary = tmpdir / "silva.fasta"
        primary.write_text(GREENGENES)
        secondary.write_text(SILVA)

        summary = run_merge(primary, secondary, output_prefix=tmpdir / "merged_gg_silva")

        print("=" * 70)
        print(f"Merged {summary.total_records} sequences "
              f"({summary.secondary_skipped} secondary sequences outside Eukaryota)")
        print("=" * 70)
        print(summary.taxonomy_path.read_text())
        print(summary.sequences_path.read_text())


if __name__ == "__main__":
    main()
