"""Default settings shared by the CLI and the merge pipeline."""

from . import __version__

DEFAULT_LOG_LEVEL = "INFO"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Output naming
DEFAULT_OUTPUT_PREFIX = "merged_gg_silva"
SEQUENCES_SUFFIX = "_seqs.fasta"
TAXONOMY_SUFFIX = "_taxo.txt"
TAXONOMY_HEADER = ("prokMSA_id", "taxonomy")

# Only this top-level rank is taken from the secondary database
DEFAULT_SECONDARY_DOMAIN = "Eukaryota"

FASTA_LINE_WIDTH = 80

__all__ = [
    "__version__",
    "DEFAULT_LOG_LEVEL",
    "VALID_LOG_LEVELS",
    "DEFAULT_OUTPUT_PREFIX",
    "SEQUENCES_SUFFIX",
    "TAXONOMY_SUFFIX",
    "TAXONOMY_HEADER",
    "DEFAULT_SECONDARY_DOMAIN",
    "FASTA_LINE_WIDTH",
]
