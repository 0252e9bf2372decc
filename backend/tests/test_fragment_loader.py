# File: backend/tests/test_fragment_loader.py
# Version: v0.1.0

"""
Tests for reading numeric fragments from text sources.
"""

import pytest

from backend.app.core.models.fragment_loader import (
    FragmentSourceError,
    FragmentSourceNotFoundError,
    iter_tokens,
    load_fragments,
    parse_fragments,
)


def test_tokens_split_on_any_whitespace():
    assert list(iter_tokens("12 34\n\t56  \n\n78")) == ["12", "34", "56", "78"]


def test_non_numeric_tokens_are_skipped_in_order():
    text = "123 abc 456\n7a8 -12 3.4 +5 0099\n"
    assert parse_fragments(text) == ["123", "456", "0099"]


def test_non_ascii_digits_are_skipped():
    assert parse_fragments("١٢٣ 123") == ["123"]


def test_load_from_file(fragments_file):
    p = fragments_file("608017\n248460 x\n\n962282\n")
    assert load_fragments(p) == ["608017", "248460", "962282"]


def test_empty_file_gives_no_fragments(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_text("", encoding="utf-8")
    assert load_fragments(str(p)) == []


def test_missing_source_is_reported(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(FragmentSourceNotFoundError) as exc_info:
        load_fragments(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value, FileNotFoundError)


def test_directory_source_is_reported(tmp_path):
    with pytest.raises(FragmentSourceError) as exc_info:
        load_fragments(tmp_path)
    assert exc_info.value.path == tmp_path


def test_non_utf8_source_is_reported(tmp_path):
    p = tmp_path / "latin1.txt"
    p.write_bytes(b"123\n\xff\xfe 456\n")
    with pytest.raises(FragmentSourceError) as exc_info:
        load_fragments(p)
    assert "UTF-8" in exc_info.value.reason
