"""Speller archives – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    ScanError,
    SpellerRepository,
    TagExpander,
    expand,
    resolve_locale_name,
)

try:
    __version__ = metadata.version("speller-archives")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
