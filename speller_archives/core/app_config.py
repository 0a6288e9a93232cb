"""Application configuration loading utilities for speller discovery settings."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

from speller_archives.core.speller_repository import ARCHIVE_EXTENSIONS
from speller_archives.core.tag_expander import (
    DEFAULT_ALIAS_BASES,
    DEFAULT_ALIAS_REGIONS,
    TagExpander,
    build_alias_table,
)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Store speller root directories, archive extensions and alias settings."""

    speller_roots: tuple[str, ...] = ()
    archive_extensions: tuple[str, ...] = ARCHIVE_EXTENSIONS
    alias_bases: tuple[str, ...] = DEFAULT_ALIAS_BASES
    alias_regions: tuple[str, ...] = DEFAULT_ALIAS_REGIONS

    def tag_expander(self) -> TagExpander:
        """Build the tag expander described by the alias settings."""
        table = build_alias_table(self.alias_bases, self.alias_regions)
        return TagExpander(alias_table=table)


def _config_files(root: Path | None) -> list[Path]:
    """Return `config/app.toml` under the working directory, then under *root*."""
    bases = [Path.cwd()] if root is None else [Path.cwd(), root]
    unique = dict.fromkeys(base.resolve() for base in bases)
    return [base / "config" / "app.toml" for base in unique]


def _read_table(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def _dotted(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


def _setting(
    section: Mapping[str, Any],
    key: str,
    *,
    default: tuple[str, ...],
    transform: Callable[[str], str] = str,
) -> tuple[str, ...]:
    """Read a string-or-list setting as a unique tuple, else keep *default*."""
    value = section.get(key)
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return default
    items = (str(item).strip() for item in value)
    out = tuple(dict.fromkeys(transform(item) for item in items if item))
    return out or default


@lru_cache(maxsize=8)
def load(root: Path | None = None) -> AppConfig:
    """Load and merge speller settings from `config/app.toml` candidates."""
    cfg = AppConfig()
    for path in _config_files(root):
        data = _read_table(path)
        spellers = data.get("spellers")
        if isinstance(spellers, dict):
            cfg = replace(
                cfg,
                speller_roots=_setting(
                    spellers,
                    "roots",
                    default=cfg.speller_roots,
                    transform=os.path.expanduser,
                ),
                archive_extensions=_setting(
                    spellers,
                    "extensions",
                    default=cfg.archive_extensions,
                    transform=_dotted,
                ),
            )
        tags = data.get("tags")
        if isinstance(tags, dict):
            cfg = replace(
                cfg,
                alias_bases=_setting(tags, "alias_bases", default=cfg.alias_bases),
                alias_regions=_setting(
                    tags, "alias_regions", default=cfg.alias_regions
                ),
            )
    return cfg
