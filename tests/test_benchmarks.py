"""Benchmark suite for the wordsim pipeline.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import random

import pytest

from wordsim import CooccurrenceMatrix, PMIMatrix, tokenize
from wordsim._query import build_result, rank_results

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Synthetic corpus: Zipf-ish draws from a fixed vocabulary, fixed seed
# ---------------------------------------------------------------------------

_VOCAB = [f"w{chr(97 + i % 26)}{chr(97 + i // 26 % 26)}" for i in range(500)]
_WEIGHTS = [1.0 / (rank + 1) for rank in range(len(_VOCAB))]


def _make_lines(n_lines: int, seed: int = 7) -> list[str]:
    rng = random.Random(seed)
    lines = []
    for _ in range(n_lines):
        n = rng.randint(5, 25)
        words = rng.choices(_VOCAB, weights=_WEIGHTS, k=n)
        lines.append("The " + " ".join(words) + ", again!")
    return lines


LINES = _make_lines(2000)
SENTENCES = [tokenize(line) for line in LINES]


def _build(window_size: int) -> CooccurrenceMatrix:
    matrix = CooccurrenceMatrix()
    for tokens in SENTENCES:
        matrix.accumulate(tokens, window_size)
    return matrix


MATRIX_W2 = _build(2)
MATRIX_W6 = _build(6)
PMI_W6 = PMIMatrix.from_cooccurrence(MATRIX_W6)
PAIRS = [(_VOCAB[i], _VOCAB[(i * 7 + 3) % len(_VOCAB)]) for i in range(40)]


def test_bench_tokenize(benchmark):
    benchmark(lambda: [tokenize(line) for line in LINES])


@pytest.mark.parametrize("window_size", [2, 6])
def test_bench_accumulate(benchmark, window_size):
    matrix = benchmark(_build, window_size)
    assert matrix.token_count == sum(len(s) for s in SENTENCES)


@pytest.mark.parametrize("name", ["w2", "w6"])
def test_bench_pmi(benchmark, name):
    matrix = {"w2": MATRIX_W2, "w6": MATRIX_W6}[name]
    pmi = benchmark(PMIMatrix.from_cooccurrence, matrix)
    assert len(pmi) == matrix.type_count


def test_bench_score_pairs(benchmark):
    def run():
        return rank_results(
            build_result(MATRIX_W6, PMI_W6, w, c) for w, c in PAIRS
        )

    results = benchmark(run)
    assert len(results) == len(PAIRS)
