"""Snapshot save/load, manifest validation, and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._errors import SnapshotChecksumError, SnapshotVersionError, WordsimError
from ._matrix import CooccurrenceMatrix

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.1"

_DATA_FILES = (
    "cooccurrence.bin",
    "inverted.bin",
    "meta.bin",
)


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise WordsimError(f"manifest.json not found in {data_dir}")
    with open(manifest_path) as f:
        return json.load(f)


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != SNAPSHOT_VERSION:
        raise SnapshotVersionError(
            f"Expected snapshot version {SNAPSHOT_VERSION!r}, got {version!r}"
        )
    checksums = manifest.get("files", {})
    for filename in _DATA_FILES:
        filepath = data_dir / filename
        if not filepath.exists():
            raise WordsimError(f"Missing snapshot file: {filepath}")
        expected = checksums.get(filename)
        if expected is None:
            raise WordsimError(f"No checksum in manifest for {filename}")
        actual = _sha256(filepath)
        if actual != expected:
            raise SnapshotChecksumError(
                f"Checksum mismatch for {filename}: "
                f"expected {expected[:16]}..., got {actual[:16]}..."
            )


def _load_msgpack(path: Path) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False)


def _write_msgpack(path: Path, obj: Any) -> None:
    with open(path, "wb") as f:
        f.write(msgpack.packb(obj, use_bin_type=True))


def save_snapshot(
    matrix: CooccurrenceMatrix, data_dir: Path | str, *, window_size: int
) -> Path:
    """Write ``matrix`` and its manifest into ``data_dir`` (created if needed).

    Both views are stored so a loaded matrix keeps the same key order, and
    therefore the same floating-point results, as the one saved.
    """
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    _write_msgpack(
        data_dir / "cooccurrence.bin",
        {word: dict(row) for word, row in matrix.rows()},
    )
    _write_msgpack(
        data_dir / "inverted.bin",
        {context: dict(col) for context, col in matrix.columns()},
    )
    _write_msgpack(
        data_dir / "meta.bin",
        {"token_count": matrix.token_count, "window_size": window_size},
    )

    manifest = {
        "version": SNAPSHOT_VERSION,
        "files": {name: _sha256(data_dir / name) for name in _DATA_FILES},
    }
    with open(data_dir / "manifest.json", "w") as f:
        json.dump(manifest, f, indent=2)

    logger.info(
        "Saved snapshot of %d types, %d tokens to %s",
        matrix.type_count, matrix.token_count, data_dir,
    )
    return data_dir


def load_snapshot(data_dir: Path | str) -> dict[str, Any]:
    """Load and validate a snapshot.

    Returns a dict with ``matrix`` (CooccurrenceMatrix) and ``window_size``.
    """
    data_dir = Path(data_dir)

    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    meta = _load_msgpack(data_dir / "meta.bin")
    rows = _load_msgpack(data_dir / "cooccurrence.bin")
    columns = _load_msgpack(data_dir / "inverted.bin")
    try:
        matrix = CooccurrenceMatrix.from_rows(
            rows, meta["token_count"], columns
        )
        window_size = int(meta["window_size"])
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise WordsimError(f"Malformed snapshot in {data_dir}: {exc}") from exc

    logger.info(
        "Loaded snapshot of %d types, %d tokens from %s",
        matrix.type_count, matrix.token_count, data_dir,
    )
    return {"matrix": matrix, "window_size": window_size}
