"""refdb_merge: Merge Greengenes-style and Silva-style reference databases into one corpus."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("refdb_merge")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "unknown"
