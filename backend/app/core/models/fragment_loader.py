# File: backend/app/core/models/fragment_loader.py
# Version: v0.3.0

"""
Load numeric fragments from a plain-text source.

Tokens are whitespace/newline delimited and kept in source order. Only tokens
made entirely of ASCII digits become fragments; anything else is skipped.

v0.3.0
- A source that exists but cannot be read (directory, permissions, invalid
  UTF-8) raises FragmentSourceError instead of the raw OS/codec error.

v0.2.1
- Digits are matched as ASCII [0-9] only (str.isdigit/\\d accept other
  Unicode digit characters).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]+")


class FragmentSourceError(RuntimeError):
    """Raised when the fragment source exists but cannot be read as text."""
    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read fragment source {self.path}: {reason}")


class FragmentSourceNotFoundError(FileNotFoundError):
    """Raised when the fragment source file does not exist."""
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Fragment source not found: {self.path}")


def iter_tokens(text: str) -> Iterator[str]:
    for line in text.splitlines():
        yield from line.split()


def parse_fragments(text: str) -> List[str]:
    """
    Return every all-digit token of `text`, in order.
    """
    fragments: List[str] = []
    skipped = 0
    for token in iter_tokens(text):
        if _DIGITS_RE.fullmatch(token):
            fragments.append(token)
        else:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d non-numeric token(s)", skipped)
    return fragments


def load_fragments(path: Path | str) -> List[str]:
    """
    Read fragments from a UTF-8 text file.

    Raises:
        FragmentSourceNotFoundError: `path` does not exist.
        FragmentSourceError: `path` is not a readable UTF-8 text file.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FragmentSourceNotFoundError(p) from None
    except UnicodeDecodeError as e:
        raise FragmentSourceError(p, f"not valid UTF-8 text ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise FragmentSourceError(p, e.strerror or type(e).__name__) from e
    fragments = parse_fragments(text)
    logger.info("Loaded %d fragment(s) from %s", len(fragments), p)
    return fragments
