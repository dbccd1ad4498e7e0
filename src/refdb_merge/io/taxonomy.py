"""Taxonomy table parsing.

A taxonomy table maps sequence identifiers to taxonomy strings, one
tab-separated pair per line::

    # Greengenes id to taxonomy
    1111886<TAB>k__Archaea; p__Euryarchaeota; c__Methanobacteria; ...

Comment lines (``#``) and blank lines are ignored.
"""

from pathlib import Path
from typing import Dict, Union

from ..errors import SourceNotReadableError, TaxonomyTableFormatError
from ..logging_config import get_logger
from .fasta import open_text

logger = get_logger(__name__)


def read_taxonomy_table(table_path: Union[str, Path]) -> Dict[str, str]:
    """Read a taxonomy table into a dictionary of identifier -> taxonomy string.

    Each line is split on its first tab, so taxonomy strings may themselves
    contain tabs. When an identifier occurs more than once the last line wins.

    Args:
        table_path: Path to the tab-delimited table (optionally gzipped)

    Returns:
        Dictionary mapping identifiers to taxonomy strings

    Raises:
        SourceNotReadableError: If the table cannot be opened or read
        TaxonomyTableFormatError: If a data line has no tab separator
    """
    table_path = Path(table_path)
    logger.info("Reading taxonomy table: %s", table_path)

    taxonomy: Dict[str, str] = {}
    with open_text(table_path) as handle:
        try:
            for line_number, line in enumerate(handle, 1):
                if not line.strip() or line.startswith("#"):
                    continue

                if "\t" not in line:
                    logger.error("No tab separator on line %d of %s", line_number, table_path)
                    raise TaxonomyTableFormatError(
                        f"Line {line_number} of {table_path} is not '<id>\\t<taxonomy>': {line.rstrip()!r}"
                    )

                identifier, taxonomy_string = line.split("\t", 1)
                identifier = identifier.strip()
                if identifier in taxonomy:
                    logger.debug("Duplicate identifier '%s' on line %d replaces earlier entry", identifier, line_number)
                taxonomy[identifier] = taxonomy_string.strip()
        except ValueError as e:
            logger.error("Failed to decode taxonomy table %s: %s", table_path, e)
            raise TaxonomyTableFormatError(f"Failed to decode taxonomy table {table_path}: {e}") from e
        except OSError as e:
            logger.error("Failed to read taxonomy table %s: %s", table_path, e)
            raise SourceNotReadableError(f"Failed to read taxonomy table {table_path}: {e}") from e

    logger.info("Read %d taxonomy entries from %s", len(taxonomy), table_path)
    return taxonomy
