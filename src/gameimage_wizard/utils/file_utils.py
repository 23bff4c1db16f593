# -*- coding: utf-8 -*-
"""JSON files shared with the packaging tool.

The tool reads the same files while the wizard runs, so writes go through a
sibling temporary file that replaces the target in one step.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def read_json_file(path: str | Path, missing: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return the JSON object stored at ``path``.

    When ``missing`` is given, an absent file yields a copy of it instead of
    raising ``FileNotFoundError``.
    """
    file_path = Path(path)
    if missing is not None and not file_path.exists():
        return dict(missing)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path.name} holds {type(data).__name__}, not a JSON object")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Replace ``path`` with ``data``; readers never see a half-written file."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{file_path.name}.", suffix=".tmp", dir=file_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        os.replace(tmp_name, file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return file_path
