"""Loading and saving the cockroach roster."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .cockroach import Cockroach, _json_int, _json_str

log = logging.getLogger(__name__)

DATA_FILE = "cockroaches.json"

_IMAGES = {
    "Fast": ":/resources/img/first.png",
    "Speed": ":/resources/img/second.png",
    "Storm": ":/resources/img/third.gif",
    "Lord": ":/resources/img/fourth.png",
    "Leopard": ":/resources/img/fifth.png",
}

# Lanes used when a roster is restored from file.
_LOADED_LANES = {
    "Fast": 210,
    "Speed": 310,
    "Storm": 400,
    "Lord": 100,
    "Leopard": 490,
}
_LOADED_X = 10

PathLike = Union[str, "os.PathLike[str]"]


def default_cockroaches() -> list[Cockroach]:
    """The standard five racers with fresh statistics."""
    return [
        Cockroach("Fast", _IMAGES["Fast"], 10, 210),
        Cockroach("Speed", _IMAGES["Speed"], 10, 310),
        Cockroach("Storm", _IMAGES["Storm"], 20, 400),
        Cockroach("Lord", _IMAGES["Lord"], 0, 100),
        Cockroach("Leopard", _IMAGES["Leopard"], 10, 490),
    ]


def cockroach_from_record(record: Any) -> Optional[Cockroach]:
    """Build a known cockroach from a stored record, or None if it cannot be placed."""
    if not isinstance(record, dict):
        return None
    name = _json_str(record.get("name"))
    if name not in _IMAGES:
        log.warning("Unknown cockroach: %r", name)
        return None
    cockroach = Cockroach(name, _IMAGES[name], _LOADED_X, _LOADED_LANES[name])
    cockroach.race_count = _json_int(record.get("raceCount"))
    cockroach.win_count = _json_int(record.get("winCount"))
    return cockroach


def load_cockroaches(path: PathLike = DATA_FILE) -> list[Cockroach]:
    """Read the roster; a missing or malformed file gives an empty list."""
    try:
        text = Path(path).read_bytes()
    except OSError:
        log.warning("Data file %s not found, a new one will be created.", path)
        return []
    try:
        data = json.loads(text)
    except (ValueError, UnicodeDecodeError):
        data = None
    if not isinstance(data, list):
        log.warning("Data file %s does not hold a JSON array.", path)
        return []
    roster = [c for c in (cockroach_from_record(r) for r in data) if c is not None]
    log.debug("Loaded %d cockroaches", len(roster))
    return roster


def save_cockroaches(cockroaches: Iterable[Cockroach], path: PathLike = DATA_FILE) -> None:
    """Write the roster as a JSON array."""
    records = [c.to_json() for c in cockroaches]
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(records, handle, indent=4, ensure_ascii=False)
        handle.write("\n")
    log.debug("Cockroaches saved to %s", path)