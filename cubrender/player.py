"""Player position, view direction and keyboard-driven movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

__all__ = ["Key", "QuitRequested", "Player"]

WALL = 1


class Key(Enum):
    ESCAPE = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    LEFT = auto()
    RIGHT = auto()


class QuitRequested(Exception):
    """The escape key was pressed or released."""


_HEADINGS = {
    "S": (0.0, 1.0, 0.5, 0.0),
    "E": (1.0, 0.0, 0.0, -0.5),
    "N": (0.0, -1.0, -0.5, 0.0),
}


@dataclass
class Player:
    """A viewer on the map with its direction and camera plane vectors."""

    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    held: set[Key] = field(default_factory=set)

    @classmethod
    def facing(cls, heading: str, x: float, y: float) -> Player:
        """Create a player at (x, y) looking towards a map heading letter."""
        dir_x, dir_y, plane_x, plane_y = _HEADINGS.get(heading, (0.0, 0.0, 0.0, 0.0))
        return cls(x, y, dir_x, dir_y, plane_x, plane_y)

    def press(self, key: Key) -> None:
        if key is Key.ESCAPE:
            raise QuitRequested
        self.held.add(key)

    def release(self, key: Key) -> None:
        if key is Key.ESCAPE:
            raise QuitRequested
        self.held.discard(key)

    def rotate(self, angle: float) -> None:
        """Turn direction and camera plane by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def rotate_left(self, rot_speed: float) -> None:
        self.rotate(-rot_speed)

    def rotate_right(self, rot_speed: float) -> None:
        self.rotate(rot_speed)

    def _step(self, grid: Sequence[Sequence[int]], dx: float, dy: float) -> None:
        if grid[int(self.y)][int(self.x + dx)] != WALL:
            self.x += dx
        if grid[int(self.y + dy)][int(self.x)] != WALL:
            self.y += dy

    def update(
        self,
        grid: Sequence[Sequence[int]],
        move_speed: float,
        side_speed: float,
        rot_speed: float,
    ) -> None:
        """Apply one frame of movement for the keys currently held."""
        if Key.W in self.held:
            self._step(grid, self.dir_x * move_speed, self.dir_y * move_speed)
        if Key.S in self.held:
            self._step(grid, -self.dir_x * move_speed, -self.dir_y * move_speed)
        if Key.A in self.held:
            self._step(grid, self.plane_x * side_speed, self.plane_y * side_speed)
        if Key.D in self.held:
            self._step(grid, -self.plane_x * side_speed, -self.plane_y * side_speed)
        if Key.RIGHT in self.held:
            self.rotate_right(rot_speed)
        if Key.LEFT in self.held:
            self.rotate_left(rot_speed)