"""Corpus reading and matrix construction, sequential or across processes."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator

from ._errors import InputReadError
from ._matrix import CooccurrenceMatrix, check_window_size

logger = logging.getLogger(__name__)


def iter_lines(path: Path | str) -> Iterator[str]:
    """Yield the lines of a text file, newline stripped.

    A leading UTF-8 byte-order mark is dropped and undecodable bytes become
    U+FFFD, which the tokenizer discards.

    Raises:
        InputReadError: If the file cannot be opened or read.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8-sig", errors="replace") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except OSError as exc:
        raise InputReadError(f"Failed to read {path}: {exc}") from exc


def accumulate_file(
    matrix: CooccurrenceMatrix, path: Path | str, window_size: int
) -> int:
    """Accumulate every line of one corpus file. Returns tokens added."""
    n_tokens = 0
    n_lines = 0
    for line in iter_lines(path):
        n_tokens += matrix.add_line(line, window_size)
        n_lines += 1
    logger.debug("Read %d lines, %d tokens from %s", n_lines, n_tokens, path)
    return n_tokens


def _build_partial(path: str, window_size: int) -> CooccurrenceMatrix:
    matrix = CooccurrenceMatrix()
    accumulate_file(matrix, path, window_size)
    return matrix


def build_matrix(
    paths: Iterable[Path | str],
    window_size: int,
    *,
    workers: int | None = 1,
) -> CooccurrenceMatrix:
    """Build one co-occurrence matrix from a sequence of corpus files.

    Args:
        paths: Corpus files, one sentence per line.
        window_size: Forward window size including the anchor word (>= 2).
        workers: Worker processes. 1 reads files in this process; None uses
            the CPU count. Partial matrices are merged in ``paths`` order
            once every file is done, so the result matches a sequential build.

    Raises:
        InputReadError: If any corpus file cannot be read.
        ValueError: If window_size or workers is out of range.
    """
    check_window_size(window_size)
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    paths = [str(p) for p in paths]
    if workers is None:
        workers = os.cpu_count() or 1

    if workers == 1 or len(paths) <= 1:
        matrix = CooccurrenceMatrix()
        for path in paths:
            accumulate_file(matrix, path, window_size)
    else:
        with ProcessPoolExecutor(max_workers=min(workers, len(paths))) as executor:
            futures = [
                executor.submit(_build_partial, path, window_size)
                for path in paths
            ]
            partials = [future.result() for future in futures]
        matrix = CooccurrenceMatrix()
        for partial in partials:
            matrix.merge(partial)

    logger.info(
        "Accumulated %d files: %d tokens, %d types (window %d)",
        len(paths), matrix.token_count, matrix.type_count, window_size,
    )
    return matrix

