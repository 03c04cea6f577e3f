"""Reading and writing JSON files, with errors that name the file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json_file(path: str | Path) -> Any:
    """Load and return the JSON document stored at ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OSError(f"Cannot read from file {path}: {exc}") from exc
    try:
        return json.loads(text)
    except ValueError as exc:
        raise ValueError(f"Cannot deserialize from file {path}: {exc}") from exc


def write_json_file(path: str | Path, data: Any) -> None:
    """Write ``data`` to ``path`` as pretty-printed JSON, replacing any old content."""
    path = Path(path)
    try:
        text = json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Cannot serialize data to write to file {path}: {exc}"
        ) from exc
    try:
        handle = path.open("w", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Cannot create file {path}: {exc}") from exc
    with handle:
        try:
            handle.write(text)
        except OSError as exc:
            raise OSError(f"Cannot write to {path}: {exc}") from exc