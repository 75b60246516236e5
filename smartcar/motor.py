"""Wheel motors and the compass directions they face."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    """A compass heading, numbered clockwise from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turned_right(self) -> Direction:
        """Return the heading a quarter turn clockwise from this one."""
        return Direction((self + 1) % 4)

    def turned_left(self) -> Direction:
        """Return the heading a quarter turn anticlockwise from this one."""
        return Direction((self + 3) % 4)


@dataclass
class Motor:
    """A single wheel motor with an identifier, a heading and a speed."""

    id: int
    direction: Direction = Direction.NORTH
    speed: float = 0.0

    def stop(self) -> None:
        """Bring the motor to a halt."""
        self.speed = 0.0

    def turn_right(self) -> None:
        """Rotate the motor's heading a quarter turn clockwise."""
        self.direction = self.direction.turned_right()

    def turn_left(self) -> None:
        """Rotate the motor's heading a quarter turn anticlockwise."""
        self.direction = self.direction.turned_left()