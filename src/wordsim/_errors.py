"""wordsim error types."""


class WordsimError(Exception):
    """Base error for all wordsim failures."""


class InputReadError(WordsimError):
    """A corpus or pair file could not be read."""


class PairFormatError(WordsimError):
    """A word-pair line holds fewer than two words."""


class SnapshotVersionError(WordsimError):
    """Snapshot manifest version mismatch."""


class SnapshotChecksumError(WordsimError):
    """Snapshot file checksum verification failed."""
