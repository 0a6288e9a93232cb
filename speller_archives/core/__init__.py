"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .locale_names import resolve_locale_name
from .speller_repository import (
    ARCHIVE_EXTENSIONS,
    ScanError,
    SpellerRepository,
    find_speller_archives,
)
from .tag_expander import (
    DEFAULT_ALIAS_TABLE,
    TagExpander,
    build_alias_table,
    expand,
)

__all__ = [
    "ARCHIVE_EXTENSIONS",
    "DEFAULT_ALIAS_TABLE",
    "ScanError",
    "SpellerRepository",
    "TagExpander",
    "build_alias_table",
    "expand",
    "find_speller_archives",
    "resolve_locale_name",
]
