"""Strategies for finding the taxonomy of a primary-source sequence.

A run either has a taxonomy table, in which case every identifier is looked
up in it, or it relies on Greengenes-style descriptions that embed the
taxonomy after the sequence name::

    >1111886 AB001234.1 Methanobrevibacter k__Archaea; p__Euryarchaeota; ...; otu_127

The strategy is picked once per run by :func:`make_resolver`.
"""

import re
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Pattern

from ..errors import TaxonomyFormatError, TaxonomyResolutionError
from ..io.fasta import SequenceRecord
from ..logging_config import get_logger
from .types import TaxonomyEntry, TaxonomyOrigin

logger = get_logger(__name__)

# From the kingdom marker to the end of the description, minus any "; otu_<n>"
GREENGENES_TAXONOMY_PATTERN = re.compile(r"(k__.*?)(?:\s*;\s*otu_\d+)?\s*$", re.IGNORECASE)


class TaxonomyResolver(ABC):
    """Base class for taxonomy lookup strategies."""

    origin: TaxonomyOrigin

    @abstractmethod
    def resolve(self, record: SequenceRecord) -> TaxonomyEntry:
        """Return the taxonomy of ``record`` or raise a MergeError."""


class TableTaxonomyResolver(TaxonomyResolver):
    """Look up taxonomy strings in an identifier -> taxonomy mapping."""

    origin = TaxonomyOrigin.TABLE

    def __init__(self, table: Mapping[str, str]) -> None:
        self.table = table

    def resolve(self, record: SequenceRecord) -> TaxonomyEntry:
        try:
            taxonomy_string = self.table[record.identifier]
        except KeyError:
            logger.error("Sequence '%s' is missing from the taxonomy table", record.identifier)
            raise TaxonomyResolutionError(record.identifier) from None
        return TaxonomyEntry(record.identifier, taxonomy_string, self.origin)


class DescriptionTaxonomyResolver(TaxonomyResolver):
    """Extract taxonomy strings embedded in FASTA descriptions."""

    origin = TaxonomyOrigin.DESCRIPTION

    def __init__(self, pattern: Pattern[str] = GREENGENES_TAXONOMY_PATTERN) -> None:
        self.pattern = pattern

    def resolve(self, record: SequenceRecord) -> TaxonomyEntry:
        match = self.pattern.search(record.description)
        if match is None:
            logger.error(
                "No taxonomy in description of '%s': %s", record.identifier, record.description
            )
            raise TaxonomyFormatError(record.identifier, record.description)
        return TaxonomyEntry(record.identifier, match.group(1), self.origin)


def make_resolver(taxonomy_table: Optional[Mapping[str, str]] = None) -> TaxonomyResolver:
    """Choose the taxonomy strategy for a run.

    Args:
        taxonomy_table: Identifier -> taxonomy mapping, or None to parse
            taxonomy out of the sequence descriptions

    Returns:
        A TaxonomyResolver
    """
    if taxonomy_table is not None:
        logger.info("Resolving primary taxonomy from table (%d entries)", len(taxonomy_table))
        return TableTaxonomyResolver(taxonomy_table)
    logger.info("Resolving primary taxonomy from sequence descriptions")
    return DescriptionTaxonomyResolver()
