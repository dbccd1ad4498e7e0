"""Exceptions raised by the merge pipeline.

Every fatal condition derives from :class:`MergeError` so the CLI can report
it and exit with a non-zero status. Identifier collisions between the two
sources are not errors; they are logged as warnings.
"""


class MergeError(Exception):
    """Base class for fatal merge errors."""


class SourceNotReadableError(MergeError):
    """A sequence source or taxonomy table could not be opened or read."""


class OutputNotWritableError(MergeError):
    """A merged output file could not be created or written."""


class SequenceFormatError(MergeError):
    """A FASTA source could not be parsed."""


class TaxonomyTableFormatError(MergeError):
    """A taxonomy table line does not have an identifier and a taxonomy column."""


class TaxonomyResolutionError(MergeError):
    """A primary identifier has no entry in the supplied taxonomy table."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"No taxonomy found for sequence '{identifier}' in the taxonomy table. "
            "Every primary sequence must have a taxonomy table entry."
        )


class TaxonomyFormatError(MergeError):
    """A primary description does not carry a recognizable taxonomy string."""

    def __init__(self, identifier: str, description: str) -> None:
        self.identifier = identifier
        self.description = description
        super().__init__(
            f"Could not find a taxonomy string in the description of sequence "
            f"'{identifier}': '{description}'. Supply a taxonomy table with --taxonomy."
        )
