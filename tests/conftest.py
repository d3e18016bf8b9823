"""Shared fixtures for wordsim tests."""

import pytest

import wordsim

KITTY = "the kitty cat meows really loud"

ANIMALS = [
    "a cat sat on the mat",
    "a dog sat on the rug",
    "the cat chased a mouse",
    "the dog chased a cat",
    "a mouse ran under the mat",
]


@pytest.fixture
def write_corpus(tmp_path):
    """Write lines to a file under tmp_path and return its path."""
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def kitty_file(write_corpus):
    return write_corpus("kitty.txt", [KITTY])


@pytest.fixture
def animals_file(write_corpus):
    return write_corpus("animals.txt", ANIMALS)


@pytest.fixture
def animals_model(animals_file):
    return wordsim.build([animals_file], window_size=3)
