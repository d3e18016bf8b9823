"""Line normalization and word tokenization."""

from __future__ import annotations

import re

_STRIP_RE = re.compile(r"[^a-z\s]")
_WORD_RE = re.compile(r"\b[a-z]+\b")


def tokenize(line: str) -> list[str]:
    """Lower-case a line, drop non-letters, and return its words in order.

    Characters other than a-z and whitespace are deleted before matching,
    so they join their neighbours rather than separating them.
    """
    cleaned = _STRIP_RE.sub("", line.lower())
    return _WORD_RE.findall(cleaned)
