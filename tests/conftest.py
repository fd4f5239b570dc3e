"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from treeops.engine import ActionEvent


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create the tree src/{a.js, b.txt, sub/c.js} and return src."""
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "a.js").write_text("console.log('a');\n")
    (src / "b.txt").write_text("plain text\n")
    (src / "sub" / "c.js").write_text("console.log('c');\n")
    return src


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create a deeper tree mixing names, extensions and an empty directory.

    Layout under root/:
        index.js, index.ts, README.md
        lib/index.js, lib/util.js
        lib/deep/index.js
        docs/guide.md
        empty/
    """
    root = tmp_path / "root"
    (root / "lib" / "deep").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "empty").mkdir()
    (root / "index.js").write_text("root js")
    (root / "index.ts").write_text("root ts")
    (root / "README.md").write_text("# readme")
    (root / "lib" / "index.js").write_text("lib index")
    (root / "lib" / "util.js").write_text("lib util")
    (root / "lib" / "deep" / "index.js").write_text("deep index")
    (root / "docs" / "guide.md").write_text("guide")
    return root


@pytest.fixture
def events() -> list[ActionEvent]:
    """Collect action events; pass ``events.append`` as observer."""
    return []
