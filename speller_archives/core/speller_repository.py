"""Discover speller archives under root directories and resolve tags to them."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from speller_archives.core.tag_expander import TagExpander

if TYPE_CHECKING:
    from speller_archives.core.app_config import AppConfig

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSIONS: tuple[str, ...] = (".zhfst", ".bhfst")


@dataclass(frozen=True, slots=True)
class ScanError:
    """Describe one directory or entry that could not be read during a scan."""

    path: Path
    detail: str


def _list_dir(path: Path) -> list[os.DirEntry[str]]:
    # Name order keeps discovery (and first-match lookup) stable across filesystems.
    with os.scandir(path) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def find_speller_archives(
    root: Path,
    extensions: Iterable[str] = ARCHIVE_EXTENSIONS,
) -> tuple[list[Path], list[ScanError]]:
    """Walk *root* depth-first and return (archives, errors).

    Directories or entries that cannot be read are logged, reported in
    *errors* and contribute nothing; the walk always runs to completion.
    """
    wanted = frozenset(extensions)
    archives: list[Path] = []
    errors: list[ScanError] = []

    def _skip(path: Path, exc: OSError) -> None:
        logger.info("Error listing %s: %s", path, exc)
        errors.append(ScanError(path=path, detail=str(exc)))

    visited: set[str] = set()
    # (path, is_directory) pairs; files are queued so they keep their place in the walk.
    stack: list[tuple[Path, bool]] = [(Path(root), True)]
    while stack:
        path, is_directory = stack.pop()
        if not is_directory:
            archives.append(path)
            continue
        real = os.path.realpath(path)
        if real in visited:
            continue
        visited.add(real)
        try:
            entries = _list_dir(path)
        except OSError as exc:
            _skip(path, exc)
            continue
        children: list[tuple[Path, bool]] = []
        for entry in entries:
            child = Path(entry.path)
            try:
                if entry.is_dir():
                    children.append((child, True))
                elif child.suffix in wanted and entry.is_file():
                    children.append((child, False))
            except OSError as exc:
                _skip(child, exc)
        stack.extend(reversed(children))
    return archives, errors


class SpellerRepository:
    """Answer archive and language queries over a fixed list of root directories."""

    def __init__(
        self,
        roots: Iterable[str | Path],
        *,
        expander: TagExpander | None = None,
        extensions: Iterable[str] = ARCHIVE_EXTENSIONS,
    ) -> None:
        self._roots: tuple[str, ...] = tuple(str(root) for root in roots)
        self._expander = expander if expander is not None else TagExpander()
        self._extensions: tuple[str, ...] = tuple(extensions)

    @classmethod
    def from_config(cls, cfg: AppConfig) -> SpellerRepository:
        return cls(
            cfg.speller_roots,
            expander=cfg.tag_expander(),
            extensions=cfg.archive_extensions,
        )

    @property
    def roots(self) -> tuple[str, ...]:
        return self._roots

    @property
    def expander(self) -> TagExpander:
        return self._expander

    def scan_with_errors(self) -> tuple[list[Path], list[ScanError]]:
        """Scan every root in order; return archives plus per-directory errors."""
        archives: list[Path] = []
        errors: list[ScanError] = []
        for root in self._roots:
            logger.info("Enumerate dictionaries in %s", root)
            found, failed = find_speller_archives(Path(root), self._extensions)
            archives.extend(found)
            errors.extend(failed)
        return archives, errors

    def get_speller_archives(self) -> list[Path]:
        archives, _errors = self.scan_with_errors()
        return archives

    def tags_for_archive(self, path: Path) -> list[str]:
        """Return the locale tags served by the archive at *path*."""
        return self._expander.expand(Path(path).stem)

    def get_supported_languages(self) -> list[str]:
        """Return every tag any discovered archive answers to, sorted and unique."""
        logger.info("Resolve supported languages")
        tags: set[str] = set()
        for path in self.get_speller_archives():
            tags.update(self.tags_for_archive(path))
        return sorted(tags)

    def get_speller_archive(self, language_tag: str) -> Path | None:
        """Return the first discovered archive serving *language_tag*, else None."""
        logger.info("Get speller archive for %s", language_tag)
        for path in self.get_speller_archives():
            if language_tag in self.tags_for_archive(path):
                return path
        return None
