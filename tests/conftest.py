#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from spath_context import LogLevel, SearchContext
from spath_paths import SearchPath

UNSET_VAR = "UNLIKELY_THIS_VAR_EXISTS"


@pytest.fixture
def unset_var(monkeypatch) -> str:
    monkeypatch.delenv(UNSET_VAR, raising=False)
    return UNSET_VAR


@pytest.fixture
def sep() -> str:
    return os.pathsep


@pytest.fixture
def make_tree():
    """Create files and directories under a root.

    Names ending in '/' are created as directories, everything else as files:
        make_tree(tmp_path, "a.txt", "b/d/", "e/f/g/a.txt")
    """

    def _make(root: Path, *entries: str) -> Path:
        for entry in entries:
            path = root / entry
            if entry.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text("", encoding="utf-8")
        return root

    return _make


@pytest.fixture
def tree(tmp_path: Path, make_tree) -> Path:
    return make_tree(
        tmp_path,
        "a.txt",
        "a/",
        "b/a.txt",
        "b/d/",
        "c/",
        "e/f/g/a.txt",
    )


@pytest.fixture
def full_search_path(tree: Path) -> SearchPath:
    return SearchPath.from_paths(
        [tree, tree / "a", tree / "b", tree / "c", tree / "e" / "f", tree / "e" / "f" / "g"]
    )


@pytest.fixture
def partial_search_path(tree: Path) -> SearchPath:
    return SearchPath.from_paths([tree / "a", tree / "c", tree / "e" / "f" / "g"])


@pytest.fixture
def debug_context() -> SearchContext:
    return SearchContext(log_level=LogLevel.DEBUG)
