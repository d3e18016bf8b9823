"""Tests for pair parsing, result building, and ranking."""

import pytest

from wordsim import PairResult
from wordsim._errors import InputReadError, PairFormatError
from wordsim._query import parse_pair_line, rank_results, read_pairs


def _result(word, cosine):
    return PairResult(
        word=word, context="x", word_count=0, context_count=0,
        cooccurrence_count=0, pmi=None if cosine is None else 0.0,
        cosine=cosine,
    )


def test_parse_pair_line():
    assert parse_pair_line("football game") == ("football", "game")
    assert parse_pair_line("  princess\tdiana  \n") == ("princess", "diana")


def test_parse_pair_line_verbatim():
    assert parse_pair_line("Clinton clinton") == ("Clinton", "clinton")


def test_parse_pair_line_blank():
    assert parse_pair_line("") is None
    assert parse_pair_line("   \t") is None


def test_parse_pair_line_extra_words_ignored():
    assert parse_pair_line("of the wife") == ("of", "the")


def test_parse_pair_line_single_word():
    with pytest.raises(PairFormatError, match="line 7"):
        parse_pair_line("lonely", 7, "pairs.txt")


def test_read_pairs(write_corpus):
    path = write_corpus("pairs.txt", ["of the", "", "football game"])
    assert read_pairs(path) == [("of", "the"), ("football", "game")]


def test_read_pairs_strict_raises(write_corpus):
    path = write_corpus("pairs.txt", ["of the", "broken", "football game"])
    with pytest.raises(PairFormatError, match="pairs.txt, line 2"):
        read_pairs(path)


def test_read_pairs_lenient_skips(write_corpus, caplog):
    path = write_corpus("pairs.txt", ["of the", "broken", "football game"])
    with caplog.at_level("WARNING", logger="wordsim._query"):
        pairs = read_pairs(path, strict=False)
    assert pairs == [("of", "the"), ("football", "game")]
    assert "broken" in caplog.text


def test_read_pairs_missing_file(tmp_path):
    with pytest.raises(InputReadError, match="absent.txt"):
        read_pairs(tmp_path / "absent.txt")


def test_rank_descending():
    ranked = rank_results([
        _result("low", -0.2), _result("high", 0.9), _result("mid", 0.1),
    ])
    assert [r.word for r in ranked] == ["high", "mid", "low"]


def test_rank_ties_keep_input_order():
    ranked = rank_results([
        _result("first", 0.5), _result("second", 0.5),
        _result("top", 0.7), _result("third", 0.5),
    ])
    assert [r.word for r in ranked] == ["top", "first", "second", "third"]


def test_rank_undefined_last():
    ranked = rank_results([
        _result("unknown", None), _result("negative", -1.0),
        _result("zero", 0.0),
    ])
    assert [r.word for r in ranked] == ["zero", "negative", "unknown"]


def test_rank_empty():
    assert rank_results([]) == []


def test_read_pairs_ignores_bom(tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_bytes("cat dog\ndog cat\n".encode("utf-8-sig"))
    assert read_pairs(path) == [("cat", "dog"), ("dog", "cat")]
