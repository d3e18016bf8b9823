"""SimilarityModel: one corpus matrix, its PMI matrix, and the query API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ._matrix import check_window_size
from ._pmi import PMIMatrix
from ._query import build_result, rank_results, read_pairs

if TYPE_CHECKING:
    from pathlib import Path

    from ._matrix import CooccurrenceMatrix
    from ._types import CorpusStats, PairResult


class SimilarityModel:
    """Answers PMI and cosine queries over a finished co-occurrence matrix.

    The PMI matrix is derived once at construction and the co-occurrence
    matrix is frozen, so counts and scores cannot drift apart.
    """

    __slots__ = ("_matrix", "_pmi", "_window_size")

    def __init__(self, matrix: CooccurrenceMatrix, window_size: int) -> None:
        check_window_size(window_size)
        self._matrix = matrix
        matrix.freeze()
        self._window_size = window_size
        self._pmi = PMIMatrix.from_cooccurrence(matrix)

    # -- Corpus statistics --

    @property
    def matrix(self) -> CooccurrenceMatrix:
        """The frozen co-occurrence matrix; further accumulation raises."""
        return self._matrix

    @property
    def pmi_matrix(self) -> PMIMatrix:
        return self._pmi

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def token_count(self) -> int:
        return self._matrix.token_count

    @property
    def type_count(self) -> int:
        return self._matrix.type_count

    def stats(self) -> CorpusStats:
        return self._matrix.stats()

    # -- Queries --

    def cosine(self, word: str, context: str) -> float | None:
        """Cosine of the two words' PMI profiles; None if either is unknown."""
        return self._pmi.cosine(word, context)

    def pmi(self, word: str, context: str) -> float | None:
        """PMI of the ordered pair; None if either word is unknown."""
        return self._pmi.value(word, context)

    def score_pair(self, word: str, context: str) -> PairResult:
        return build_result(self._matrix, self._pmi, word, context)

    def score_pairs(
        self, pairs: Iterable[tuple[str, str]]
    ) -> list[PairResult]:
        """Score every pair and return the results by descending cosine."""
        return rank_results(self.score_pair(w, c) for w, c in pairs)

    def score_pair_file(
        self, path: Path | str, *, strict: bool = True
    ) -> list[PairResult]:
        """Read a pair file and return its ranked results.

        Args:
            path: One whitespace-separated word pair per line.
            strict: Raise on malformed lines (True) or skip them (False).
        """
        return self.score_pairs(read_pairs(path, strict=strict))

    def save(self, data_dir: Path | str) -> Path:
        """Write the co-occurrence matrix as a snapshot loadable by wordsim.load()."""
        from ._snapshot import save_snapshot

        return save_snapshot(
            self._matrix, data_dir, window_size=self._window_size
        )
