"""Directional co-occurrence matrix with forward and inverted views."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping, Sequence

from ._tokenizer import tokenize
from ._types import CorpusStats

if TYPE_CHECKING:
    from collections.abc import KeysView

DEFAULT_WINDOW_SIZE: int = 2
MIN_WINDOW_SIZE: int = 2

_EMPTY: Mapping[str, int] = MappingProxyType({})


def check_window_size(window_size: int) -> None:
    if window_size < MIN_WINDOW_SIZE:
        raise ValueError(
            f"window_size must be >= {MIN_WINDOW_SIZE}, got {window_size}"
        )


class CooccurrenceMatrix:
    """Sparse word-by-word co-occurrence counts.

    ``_forward[w][c]`` counts how often ``c`` followed ``w`` inside a
    window; ``_inverted[c][w]`` holds the same count keyed the other way,
    giving direct access to the words preceding ``c``. Both views are
    updated together and always agree cell for cell. Every word seen has
    a (possibly empty) row in both views; unseen cells are never stored.
    """

    __slots__ = ("_forward", "_inverted", "_token_count", "_frozen")

    def __init__(self) -> None:
        self._forward: dict[str, dict[str, int]] = {}
        self._inverted: dict[str, dict[str, int]] = {}
        self._token_count = 0
        self._frozen = False

    # -- Write protection --

    def freeze(self) -> None:
        """Reject further accumulation. Called once derived scores exist."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError("co-occurrence matrix is frozen")

    # -- Accumulation --

    def accumulate(self, tokens: Sequence[str], window_size: int) -> None:
        """Count forward co-occurrences within one sentence.

        Each token is paired with the ``window_size - 1`` tokens after it
        (fewer at the end of the sentence). Nothing crosses the sentence.
        """
        self._check_writable()
        check_window_size(window_size)
        n = len(tokens)
        if n == 0:
            return

        forward = self._forward
        inverted = self._inverted
        for token in tokens:
            if token not in forward:
                forward[token] = {}
                inverted[token] = {}
        self._token_count += n

        for i in range(n):
            word = tokens[i]
            row = forward[word]
            for j in range(i + 1, min(i + window_size, n)):
                context = tokens[j]
                row[context] = row.get(context, 0) + 1
                col = inverted[context]
                col[word] = col.get(word, 0) + 1

    def add_line(self, line: str, window_size: int) -> int:
        """Tokenize one raw line and accumulate it. Returns tokens added."""
        tokens = tokenize(line)
        self.accumulate(tokens, window_size)
        return len(tokens)

    def merge(self, other: CooccurrenceMatrix) -> None:
        """Add every cell and the token count of ``other`` into this matrix."""
        self._check_writable()
        forward = self._forward
        inverted = self._inverted
        for word, other_row in other._forward.items():
            row = forward.get(word)
            if row is None:
                row = forward[word] = {}
                inverted[word] = {}
            for context, count in other_row.items():
                row[context] = row.get(context, 0) + count
        for context, other_col in other._inverted.items():
            col = inverted[context]
            for word, count in other_col.items():
                col[word] = col.get(word, 0) + count
        self._token_count += other._token_count

    @classmethod
    def from_rows(
        cls,
        rows: Mapping[str, Mapping[str, int]],
        token_count: int,
        columns: Mapping[str, Mapping[str, int]] | None = None,
    ) -> CooccurrenceMatrix:
        """Rebuild a matrix from its forward rows.

        Every key of ``rows`` is registered as a vocabulary word even when
        its row is empty. The inverted view is mirrored from ``rows`` unless
        ``columns`` is given, in which case it is taken in that order and
        checked cell for cell against the rows.
        """
        matrix = cls()
        forward = matrix._forward
        inverted = matrix._inverted
        for word in rows:
            forward[word] = {}
        if columns is not None:
            for context in columns:
                if context not in forward:
                    raise ValueError(f"column {context!r} has no row")
                inverted[context] = {}
        for word in rows:
            inverted.setdefault(word, {})
        for word, row in rows.items():
            target = forward[word]
            for context, count in row.items():
                if context not in inverted:
                    raise ValueError(
                        f"context {context!r} of {word!r} has no row"
                    )
                target[context] = int(count)
                if columns is None:
                    inverted[context][word] = int(count)
        if columns is not None:
            n_mirrored = 0
            for context, col in columns.items():
                target = inverted[context]
                for word, count in col.items():
                    if forward.get(word, {}).get(context) != count:
                        raise ValueError(
                            f"column cell ({word!r}, {context!r}) does not "
                            f"match its row"
                        )
                    target[word] = int(count)
                    n_mirrored += 1
            if n_mirrored != sum(len(row) for row in forward.values()):
                raise ValueError("columns do not cover every row cell")
        matrix._token_count = int(token_count)
        return matrix

    # -- Read access --

    @property
    def token_count(self) -> int:
        return self._token_count

    @property
    def type_count(self) -> int:
        return len(self._forward)

    @property
    def vocabulary(self) -> KeysView[str]:
        return self._forward.keys()

    @property
    def n_cells(self) -> int:
        return sum(len(row) for row in self._forward.values())

    @property
    def total_cooccurrences(self) -> int:
        return sum(sum(row.values()) for row in self._forward.values())

    def __contains__(self, word: object) -> bool:
        return word in self._forward

    def __len__(self) -> int:
        return len(self._forward)

    def count(self, word: str, context: str) -> int:
        row = self._forward.get(word)
        if row is None:
            return 0
        return row.get(context, 0)

    def word_count(self, word: str) -> int:
        """Total forward mass of ``word`` (pairs where it is the left member)."""
        row = self._forward.get(word)
        return sum(row.values()) if row else 0

    def context_count(self, context: str) -> int:
        """Total inverted mass of ``context`` (pairs where it is the right member)."""
        col = self._inverted.get(context)
        return sum(col.values()) if col else 0

    def row(self, word: str) -> Mapping[str, int]:
        row = self._forward.get(word)
        return _EMPTY if row is None else MappingProxyType(row)

    def column(self, context: str) -> Mapping[str, int]:
        col = self._inverted.get(context)
        return _EMPTY if col is None else MappingProxyType(col)

    def rows(self) -> Iterator[tuple[str, Mapping[str, int]]]:
        for word, row in self._forward.items():
            yield word, MappingProxyType(row)

    def columns(self) -> Iterator[tuple[str, Mapping[str, int]]]:
        for context, col in self._inverted.items():
            yield context, MappingProxyType(col)

    def stats(self) -> CorpusStats:
        return CorpusStats(
            token_count=self._token_count,
            type_count=self.type_count,
            n_cells=self.n_cells,
            total_cooccurrences=self.total_cooccurrences,
        )
