import pytest
import sys
from pathlib import Path

# Add project root to sys.path
ROOT_DIR = Path(__file__).parents[1]
sys.path.insert(0, str(ROOT_DIR))

@pytest.fixture
def sample_tree(tmp_path):
    root = tmp_path / "tree"
    (root / "sub" / "empty").mkdir(parents=True)
    (root / "a.jpg").write_bytes(b"\xff\xd8\xff")
    (root / "b.PDF").write_bytes(b"%PDF-1.4\n")
    (root / "sub" / "c.txt").write_text("hello", encoding="utf-8")
    return root

@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "fileIndex.db")
