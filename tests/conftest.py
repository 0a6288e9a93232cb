from collections.abc import Callable
from pathlib import Path

import pytest

from speller_archives.core.tag_expander import DEFAULT_ALIAS_TABLE, TagExpander


def _no_locale(tag: str) -> None:
    return None


@pytest.fixture()
def null_expander() -> TagExpander:
    """Expander whose locale resolver never knows a mapping."""
    return TagExpander(alias_table=DEFAULT_ALIAS_TABLE, resolver=_no_locale)


@pytest.fixture()
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    def _make(*relpaths: str) -> Path:
        for rel in relpaths:
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"PK\x03\x04")
        return tmp_path

    return _make
