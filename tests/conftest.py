from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from recordsync.syntax.codec import encode
from recordsync.syntax.nodes import Node


@pytest.fixture
def write_tree_document(tmp_path: Path):
    def _write(node: Node, name: str = "document.json") -> Path:
        path = tmp_path / name
        path.write_text(
            json.dumps(encode(node), indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        return path

    return _write
