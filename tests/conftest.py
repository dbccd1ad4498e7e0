"""Shared test fixtures for refdb_merge tests."""

import pytest

GREENGENES_FASTA = """>1111886 AB001234.1 Methanobrevibacter smithii k__Archaea; p__Euryarchaeota; c__Methanobacteria; o__Methanobacteriales; f__Methanobacteriaceae; g__Methanobrevibacter; Unclassified; otu_127
ACGTACGTAC
GTACGT
>1111887 AB005678.1 Escherichia coli k__Bacteria; p__Proteobacteria; c__Gammaproteobacteria; otu_204
ACGUUGCA
"""

GREENGENES_TAXONOMY = """# id\ttaxonomy
1111886\tk__Archaea; p__Euryarchaeota; c__Methanobacteria

1111887\tk__Bacteria; p__Proteobacteria; c__Gammaproteobacteria
"""

SILVA_FASTA = """>AB000001.1.1500 Eukaryota;Opisthokonta;Fungi;Boletus edulis
ACGUACGU
>AB000002.1.1400 Bacteria;Proteobacteria;Escherichia coli
ACGTTT
>1111886 eukaryota ;Viridiplantae;Arabidopsis thaliana
GGCCUU
"""


@pytest.fixture
def greengenes_fasta(tmp_path):
    """Primary FASTA whose descriptions embed the taxonomy."""
    path = tmp_path / "gg.fasta"
    path.write_text(GREENGENES_FASTA)
    return path


@pytest.fixture
def greengenes_taxonomy(tmp_path):
    """Taxonomy table covering every primary identifier."""
    path = tmp_path / "gg_taxonomy.txt"
    path.write_text(GREENGENES_TAXONOMY)
    return path


@pytest.fixture
def silva_fasta(tmp_path):
    """Secondary FASTA with one eukaryote, one bacterium and one shared id."""
    path = tmp_path / "silva.fasta"
    path.write_text(SILVA_FASTA)
    return path
