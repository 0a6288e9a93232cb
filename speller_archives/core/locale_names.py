"""Canonical locale-name resolution for speller base identifiers."""

from __future__ import annotations

import re

_TAG_RE = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_](?P<region>[A-Za-z]{2}|[0-9]{3}))?$"
)


def resolve_locale_name(tag: str) -> str | None:
    """Return canonically cased `language[-Script][-REGION]` for *tag*, or None."""
    match = _TAG_RE.fullmatch(str(tag or "").strip())
    if match is None:
        return None
    parts = [match.group("language").lower()]
    script = match.group("script")
    if script:
        parts.append(script.title())
    region = match.group("region")
    if region:
        parts.append(region.upper())
    return "-".join(parts)
