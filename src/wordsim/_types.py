"""Data structures for wordsim."""

from __future__ import annotations

from dataclasses import dataclass

# Historical marker for "undefined": unknown word in a pair query.
UNDEFINED: float = -9999.0


@dataclass(slots=True, frozen=True)
class PairResult:
    word: str
    context: str
    word_count: int          # forward co-occurrence mass of word
    context_count: int       # inverted co-occurrence mass of context
    cooccurrence_count: int  # C[word][context], 0 when never seen
    pmi: float | None        # None when either word is out of vocabulary
    cosine: float | None     # None when either word is out of vocabulary

    @property
    def is_defined(self) -> bool:
        return self.cosine is not None

    def to_record(self) -> dict[str, str | int | float]:
        """Project to a flat record, undefined values replaced by UNDEFINED.

        Values keep full precision; rounding is left to the consumer.
        """
        return {
            "cosine": UNDEFINED if self.cosine is None else self.cosine,
            "word": self.word,
            "context": self.context,
            "word_count": self.word_count,
            "context_count": self.context_count,
            "cooccurrence_count": self.cooccurrence_count,
            "pmi": UNDEFINED if self.pmi is None else self.pmi,
        }


@dataclass(slots=True, frozen=True)
class CorpusStats:
    token_count: int
    type_count: int
    n_cells: int              # populated (word, context) cells
    total_cooccurrences: int  # sum of all cell counts
