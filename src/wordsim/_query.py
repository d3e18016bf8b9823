"""Word-pair parsing, per-pair result building, and ranking."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from ._corpus import iter_lines
from ._errors import PairFormatError
from ._types import PairResult

if TYPE_CHECKING:
    from ._matrix import CooccurrenceMatrix
    from ._pmi import PMIMatrix

logger = logging.getLogger(__name__)


def parse_pair_line(
    line: str, lineno: int | None = None, source: str | None = None
) -> tuple[str, str] | None:
    """Split one pair-file line into ``(word, context)``.

    Words are kept verbatim. Blank lines give None; words past the second
    are ignored.

    Raises:
        PairFormatError: If the line holds a single word.
    """
    parts = line.split()
    if not parts:
        return None
    if len(parts) < 2:
        where = source or "pair list"
        if lineno is not None:
            where = f"{where}, line {lineno}"
        raise PairFormatError(f"Expected two words ({where}): {line.strip()!r}")
    return parts[0], parts[1]


def read_pairs(
    path: Path | str, *, strict: bool = True
) -> list[tuple[str, str]]:
    """Read a word-pair file, one whitespace-separated pair per line.

    Args:
        path: Pair file.
        strict: If False, lines with a single word are skipped with a
            warning instead of raising PairFormatError.

    Raises:
        InputReadError: If the file cannot be read.
        PairFormatError: On a malformed line when ``strict`` is True.
    """
    pairs: list[tuple[str, str]] = []
    for lineno, line in enumerate(iter_lines(path), start=1):
        try:
            pair = parse_pair_line(line, lineno, str(path))
        except PairFormatError as exc:
            if strict:
                raise
            logger.warning("Skipping malformed pair line: %s", exc)
            continue
        if pair is not None:
            pairs.append(pair)
    return pairs


def build_result(
    matrix: CooccurrenceMatrix, pmi: PMIMatrix, word: str, context: str
) -> PairResult:
    """Collect counts, PMI, and cosine for one ordered pair."""
    return PairResult(
        word=word,
        context=context,
        word_count=matrix.word_count(word),
        context_count=matrix.context_count(context),
        cooccurrence_count=matrix.count(word, context),
        pmi=pmi.value(word, context),
        cosine=pmi.cosine(word, context),
    )


def _cosine_key(result: PairResult) -> float:
    return float("-inf") if result.cosine is None else result.cosine


def rank_results(results: Iterable[PairResult]) -> list[PairResult]:
    """Sort by descending cosine; undefined last, ties in input order."""
    return sorted(results, key=_cosine_key, reverse=True)
