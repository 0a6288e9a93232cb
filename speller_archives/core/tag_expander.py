"""Expand speller base identifiers into the locale tags they answer to."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from speller_archives.core.locale_names import resolve_locale_name

LocaleResolver = Callable[[str], str | None]
AliasTable = Mapping[str, tuple[str, ...]]

DEFAULT_ALIAS_BASES: tuple[str, ...] = ("se", "sma", "smn", "sms", "smj")
DEFAULT_ALIAS_REGIONS: tuple[str, ...] = ("NO", "SE", "FI")


def build_alias_table(
    bases: Iterable[str],
    regions: Iterable[str],
) -> AliasTable:
    """Build a read-only `{base: (base-Latn-REGION, base-REGION, ...)}` table."""
    region_list = tuple(regions)
    table: dict[str, tuple[str, ...]] = {}
    for base in bases:
        aliases: list[str] = []
        for region in region_list:
            aliases.append(f"{base}-Latn-{region}")
            aliases.append(f"{base}-{region}")
        table[base] = tuple(aliases)
    return MappingProxyType(table)


DEFAULT_ALIAS_TABLE: AliasTable = build_alias_table(
    DEFAULT_ALIAS_BASES, DEFAULT_ALIAS_REGIONS
)


@dataclass(frozen=True, slots=True, eq=False)
class TagExpander:
    """Map a base identifier to its canonical tag plus known aliases.

    Compared and hashed by identity; the alias table itself is unhashable.
    """

    alias_table: AliasTable = field(default_factory=lambda: DEFAULT_ALIAS_TABLE)
    resolver: LocaleResolver = field(default=resolve_locale_name)

    def expand(self, base: str) -> list[str]:
        """Return resolved-or-verbatim *base* followed by its alias tags.

        The result is never empty and is not de-duplicated.
        """
        resolved = self.resolver(base)
        tags = [resolved if resolved else base]
        tags.extend(self.alias_table.get(base, ()))
        return tags


def expand(base: str) -> list[str]:
    """Expand *base* with the default alias table and resolver."""
    return TagExpander().expand(base)
