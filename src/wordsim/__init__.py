"""wordsim: distributional word similarity from directional PMI co-occurrence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ._errors import (
    InputReadError,
    PairFormatError,
    SnapshotChecksumError,
    SnapshotVersionError,
    WordsimError,
)
from ._matrix import DEFAULT_WINDOW_SIZE, MIN_WINDOW_SIZE, CooccurrenceMatrix
from ._pmi import PMIMatrix
from ._tokenizer import tokenize
from ._types import UNDEFINED, CorpusStats, PairResult

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "build",
    "load",
    "CooccurrenceMatrix",
    "CorpusStats",
    "DEFAULT_WINDOW_SIZE",
    "InputReadError",
    "MIN_WINDOW_SIZE",
    "PMIMatrix",
    "PairFormatError",
    "PairResult",
    "SimilarityModel",
    "SnapshotChecksumError",
    "SnapshotVersionError",
    "UNDEFINED",
    "WordsimError",
    "tokenize",
]


def build(
    paths: Iterable[Path | str],
    window_size: int = DEFAULT_WINDOW_SIZE,
    *,
    workers: int | None = 1,
) -> "SimilarityModel":
    """Read corpus files and return a ready-to-query SimilarityModel.

    Args:
        paths: Plain-text corpus files, one sentence per line.
        window_size: Forward window including the anchor word; 2 counts
            adjacent pairs only.
        workers: Processes used to read files (None = CPU count).
    """
    from ._corpus import build_matrix
    from ._model import SimilarityModel

    matrix = build_matrix(paths, window_size, workers=workers)
    return SimilarityModel(matrix, window_size)


def load(data_dir: Path | str) -> "SimilarityModel":
    """Load a snapshot written by SimilarityModel.save()."""
    from ._model import SimilarityModel
    from ._snapshot import load_snapshot

    data = load_snapshot(data_dir)
    return SimilarityModel(data["matrix"], data["window_size"])


# Deferred import so SimilarityModel is available as wordsim.SimilarityModel
# without pulling in the query and corpus modules at package import.
def __getattr__(name: str):
    if name == "SimilarityModel":
        from ._model import SimilarityModel
        return SimilarityModel
    raise AttributeError(f"module 'wordsim' has no attribute {name!r}")
