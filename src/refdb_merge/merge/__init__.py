"""Merge pipeline: taxonomy resolution, the two processing stages and the driver."""

from .driver import MergedOutputWriter, output_paths, run_merge
from .processors import process_primary, process_secondary
from .resolvers import (
    DescriptionTaxonomyResolver,
    TableTaxonomyResolver,
    TaxonomyResolver,
    make_resolver,
)
from .types import (
    IdentifierSet,
    MergedOutputPair,
    MergeSummary,
    SecondaryStats,
    TaxonomyEntry,
    TaxonomyOrigin,
)

__all__ = [
    "run_merge",
    "output_paths",
    "MergedOutputWriter",
    "process_primary",
    "process_secondary",
    "TaxonomyResolver",
    "TableTaxonomyResolver",
    "DescriptionTaxonomyResolver",
    "make_resolver",
    "IdentifierSet",
    "MergedOutputPair",
    "MergeSummary",
    "SecondaryStats",
    "TaxonomyEntry",
    "TaxonomyOrigin",
]
