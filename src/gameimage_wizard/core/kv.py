# -*- coding: utf-8 -*-
"""JSON-backed string-to-string store, one file per concern.

There is no locking between processes: the wizard and the backend may both
write the same file and the last writer wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gameimage_wizard.utils.file_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)

Kv = dict[str, str]


class KvError(RuntimeError):
    """Raised when a key-value file exists but cannot be used."""


def read(path: str | Path) -> Kv:
    """Return the mapping stored at ``path``; a missing file is an empty mapping."""
    file_path = Path(path)
    try:
        data = read_json_file(file_path, missing={})
    except (OSError, ValueError) as exc:
        raise KvError(f"Could not read key-value file {file_path}: {exc}") from exc
    bad = sorted(key for key, value in data.items() if not isinstance(value, str))
    if bad:
        raise KvError(f"Key-value file {file_path} holds non-string values for: {', '.join(bad)}")
    return data


def write(path: str | Path, key: str, value: str) -> None:
    """Set ``key`` to ``value``, creating the file if needed."""
    data = read(path)
    data[str(key)] = str(value)
    try:
        write_json_file(path, data)
    except OSError as exc:
        raise KvError(f"Could not write key '{key}' to {path}: {exc}") from exc
    logger.debug("kv write %s: %s=%s", path, key, value)


def erase(path: str | Path, key: str) -> None:
    """Remove ``key``; erasing an absent key or file changes nothing."""
    data = read(path)
    if key not in data:
        return
    del data[key]
    try:
        write_json_file(path, data)
    except OSError as exc:
        raise KvError(f"Could not erase key '{key}' from {path}: {exc}") from exc
    logger.debug("kv erase %s: %s", path, key)
