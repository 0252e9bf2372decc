# File: backend/tests/conftest.py
# Version: v0.2.0
"""
Test bootstrap and shared fixtures.

- Puts the repo root on sys.path so 'backend.*' imports work without an
  editable install.
- `fragments_file` writes a fragment source into tmp_path.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def fragments_file(tmp_path):
    """Return a writer: fragments_file(text, name=...) -> Path."""
    def _write(text: str, name: str = "lines_with_numbers.txt") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
