"""The two processing stages of a merge.

The primary stage runs first and returns the identifiers it has seen; the
secondary stage takes that set to report identifiers present in both
sources. Each stage hands every kept record to an ``emit`` callback as a
:class:`MergedOutputPair`, in input order.
"""

import re
from typing import AbstractSet, Callable, Iterable, Pattern, Set

from ..config import DEFAULT_SECONDARY_DOMAIN
from ..io.fasta import SequenceRecord
from ..logging_config import get_logger
from .resolvers import TaxonomyResolver
from .types import IdentifierSet, MergedOutputPair, SecondaryStats

logger = get_logger(__name__)

Emit = Callable[[MergedOutputPair], None]


def _prepare(record: SequenceRecord, keep_description: bool) -> SequenceRecord:
    """Clear the description unless asked to keep it, and convert RNA to DNA."""
    if not keep_description:
        record = record.without_description()
    return record.to_dna()


def process_primary(
    records: Iterable[SequenceRecord],
    resolver: TaxonomyResolver,
    keep_description: bool,
    emit: Emit,
) -> IdentifierSet:
    """Emit every primary-source record with its resolved taxonomy.

    Args:
        records: Primary (Greengenes-style) sequence records
        resolver: Taxonomy strategy for this run
        keep_description: Keep FASTA descriptions in the output
        emit: Receives each MergedOutputPair

    Returns:
        Frozen set of every identifier encountered

    Raises:
        TaxonomyResolutionError: If an identifier is missing from the table
        TaxonomyFormatError: If a description carries no taxonomy
    """
    seen: Set[str] = set()
    count = 0
    for record in records:
        seen.add(record.identifier)
        entry = resolver.resolve(record)
        emit(MergedOutputPair(record.identifier, entry.taxonomy_string, _prepare(record, keep_description)))
        count += 1

    logger.info("Processed %d primary sequence(s)", count)
    return frozenset(seen)


def domain_pattern(domain: str) -> Pattern[str]:
    """Regex matching a taxonomy string whose first rank is ``domain``."""
    return re.compile(rf"{re.escape(domain)}\s*;", re.IGNORECASE)


def process_secondary(
    records: Iterable[SequenceRecord],
    identifiers: AbstractSet[str],
    keep_description: bool,
    emit: Emit,
    domain: str = DEFAULT_SECONDARY_DOMAIN,
) -> SecondaryStats:
    """Emit the secondary-source records that belong to one domain.

    The description of a secondary (Silva-style) record is its taxonomy
    string. Records from other domains are skipped. Identifiers already
    present in the primary source are logged as warnings but still emitted.

    Args:
        records: Secondary sequence records
        identifiers: Identifiers emitted from the primary source
        keep_description: Keep FASTA descriptions in the output
        emit: Receives each MergedOutputPair
        domain: First taxonomic rank to keep

    Returns:
        SecondaryStats with emitted, skipped and collision counts
    """
    wanted = domain_pattern(domain)
    stats = SecondaryStats()

    for record in records:
        taxonomy_string = record.description
        if not wanted.match(taxonomy_string):
            stats.skipped += 1
            logger.debug("Skipping '%s' outside %s: %s", record.identifier, domain, taxonomy_string)
            continue

        if record.identifier in identifiers:
            stats.collisions += 1
            logger.warning("ID exists in both sources: %s", record.identifier)

        emit(MergedOutputPair(record.identifier, taxonomy_string, _prepare(record, keep_description)))
        stats.emitted += 1

    logger.info(
        "Processed secondary source: %d kept, %d outside %s, %d shared identifier(s)",
        stats.emitted,
        stats.skipped,
        domain,
        stats.collisions,
    )
    return stats
