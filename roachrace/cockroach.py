"""Racing cockroaches and their persistent statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _json_int(value: Any) -> int:
    """Read an integer from a JSON value; anything that is not an integral number gives 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _json_str(value: Any) -> str:
    """Read a string from a JSON value; anything that is not a string gives an empty one."""
    return value if isinstance(value, str) else ""


@dataclass(eq=False)
class Cockroach:
    """A racer with a start point, a current position and race statistics."""

    name: str
    image_path: str
    start_x: int
    start_y: int
    race_count: int = 0
    win_count: int = 0
    position: tuple[int, int] = field(init=False)

    def __post_init__(self) -> None:
        self.position = (self.start_x, self.start_y)

    @property
    def start_position(self) -> tuple[int, int]:
        return (self.start_x, self.start_y)

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def set_position(self, x: int, y: int) -> None:
        self.position = (x, y)

    def reset_position(self) -> None:
        """Put the cockroach back on its start point."""
        self.position = self.start_position

    def increment_race_count(self) -> None:
        self.race_count += 1

    def increment_win_count(self) -> None:
        self.win_count += 1

    def to_json(self) -> dict[str, Any]:
        """The record stored for this cockroach."""
        return {
            "name": self.name,
            "raceCount": self.race_count,
            "winCount": self.win_count,
        }

    def update_from_json(self, data: Mapping[str, Any]) -> None:
        """Take over the fields present in a stored record."""
        if "name" in data:
            self.name = _json_str(data["name"])
        if "raceCount" in data:
            self.race_count = _json_int(data["raceCount"])
        if "winCount" in data:
            self.win_count = _json_int(data["winCount"])