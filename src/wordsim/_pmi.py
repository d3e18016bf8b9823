"""PMI derivation and combined-profile cosine similarity."""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from ._matrix import CooccurrenceMatrix

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, float] = MappingProxyType({})


class PMIMatrix:
    """PMI scores for every populated cell of a co-occurrence matrix.

    Holds a forward view (``word -> {context: pmi}``) and an inverted view
    (``context -> {word: pmi}``) mirroring each other. Built once by
    :meth:`from_cooccurrence` and read-only afterwards.
    """

    __slots__ = ("_forward", "_inverted", "_norms")

    def __init__(
        self,
        forward: dict[str, dict[str, float]],
        inverted: dict[str, dict[str, float]],
    ) -> None:
        self._forward = forward
        self._inverted = inverted
        self._norms: dict[str, float] = {}

    @classmethod
    def from_cooccurrence(cls, matrix: CooccurrenceMatrix) -> PMIMatrix:
        """Derive PMI for every populated cell of ``matrix``.

        PMI(w, c) = log2(P(w, c) / (P(w) * P(c))), where P(w) is the forward
        row mass of w, P(c) the inverted row mass of c, and P(w, c) the cell
        count, each divided by the corpus token count. Negative values are
        kept as they are.
        """
        forward: dict[str, dict[str, float]] = {w: {} for w in matrix.vocabulary}
        inverted: dict[str, dict[str, float]] = {w: {} for w in matrix.vocabulary}

        total = matrix.token_count
        if total == 0:
            return cls(forward, inverted)

        # Marginal probabilities, computed once per word
        p_word = {
            word: sum(row.values()) / total for word, row in matrix.rows()
        }
        p_context = {
            context: sum(col.values()) / total
            for context, col in matrix.columns()
        }

        n_cells = 0
        for word, row in matrix.rows():
            target = forward[word]
            pw = p_word[word]
            for context, count in row.items():
                # count > 0 implies both marginals > 0
                value = math.log2((count / total) / (pw * p_context[context]))
                target[context] = value
                inverted[context][word] = value
                n_cells += 1

        logger.info(
            "Derived PMI for %d cells over %d types (%d tokens)",
            n_cells, len(forward), total,
        )
        return cls(forward, inverted)

    def __contains__(self, word: object) -> bool:
        return word in self._forward

    def __len__(self) -> int:
        return len(self._forward)

    def row(self, word: str) -> Mapping[str, float]:
        row = self._forward.get(word)
        return _EMPTY if row is None else MappingProxyType(row)

    def column(self, context: str) -> Mapping[str, float]:
        col = self._inverted.get(context)
        return _EMPTY if col is None else MappingProxyType(col)

    def value(self, word: str, context: str) -> float | None:
        """PMI of the ordered pair.

        None when either word is unknown; 0.0 when both are known but never
        co-occurred in this order.
        """
        row = self._forward.get(word)
        if row is None or context not in self._forward:
            return None
        return row.get(context, 0.0)

    def norm(self, word: str) -> float:
        """Euclidean length of the word's row and column taken as one vector."""
        cached = self._norms.get(word)
        if cached is not None:
            return cached
        total = 0.0
        for v in self._forward.get(word, _EMPTY).values():
            total += v * v
        for v in self._inverted.get(word, _EMPTY).values():
            total += v * v
        result = math.sqrt(total)
        self._norms[word] = result
        return result

    def dot(self, word: str, context: str) -> float:
        """Dot product of the two words' combined row and column profiles."""
        if context < word:
            word, context = context, word
        total = 0.0
        other_row = self._forward.get(context, _EMPTY)
        for key, v in self._forward.get(word, _EMPTY).items():
            w = other_row.get(key)
            if w is not None:
                total += v * w
        other_col = self._inverted.get(context, _EMPTY)
        for key, v in self._inverted.get(word, _EMPTY).items():
            w = other_col.get(key)
            if w is not None:
                total += v * w
        return total

    def cosine(self, word: str, context: str) -> float | None:
        """Cosine of the two words' combined PMI profiles.

        Returns None when either word is unknown, and 0.0 when the profiles
        share no weight or either one has zero length.
        """
        if word not in self._forward or context not in self._forward:
            return None
        dot = self.dot(word, context)
        if dot == 0.0:
            return 0.0
        denom = self.norm(word) * self.norm(context)
        if denom == 0.0:
            return 0.0
        # sqrt rounding can push |cos| a hair past 1
        return max(-1.0, min(1.0, dot / denom))
