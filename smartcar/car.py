"""The car controller that drives four wheel motors and tracks position."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import ClassVar, Optional, TextIO

from .camera import Camera
from .motor import Direction, Motor


@dataclass
class Point:
    """A position on the plane."""

    x: float = 0.0
    y: float = 0.0


class CarController:
    """Coordinates four wheel motors to move and turn the car.

    ``instance()`` returns the shared controller; constructing one directly
    gives an independent car.
    """

    _instance: ClassVar[Optional[CarController]] = None

    def __init__(self) -> None:
        self._back_left = Motor(1)
        self._back_right = Motor(2)
        self._front_left = Motor(3)
        self._front_right = Motor(4)
        self.position = Point()
        self.turning = False
        self.camera = Camera()

    @classmethod
    def instance(cls) -> CarController:
        """Return the single shared controller, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def motors(self) -> tuple[Motor, Motor, Motor, Motor]:
        """Back-left, back-right, front-left and front-right motors."""
        return (self._back_left, self._back_right, self._front_left, self._front_right)

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = value

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = value

    @property
    def direction(self) -> Direction:
        """The heading the car faces."""
        return self._back_left.direction

    def _set_speeds(self, left: float, right: float) -> None:
        self._back_left.speed = left
        self._front_left.speed = left
        self._back_right.speed = right
        self._front_right.speed = right

    def move_forward(self, speed: float) -> None:
        """Drive all wheels forward at ``speed``."""
        self._set_speeds(speed, speed)

    def move_backward(self, speed: float) -> None:
        """Drive all wheels backward at ``speed``."""
        self._set_speeds(-speed, -speed)

    def turn_left(self, speed: float) -> None:
        """Stop the left wheels and drive the right ones to pivot left."""
        self._set_speeds(0.0, speed)
        self.turning = True

    def turn_right(self, speed: float) -> None:
        """Stop the right wheels and drive the left ones to pivot right."""
        self._set_speeds(speed, 0.0)
        self.turning = True

    def stop(self) -> None:
        """Halt every motor."""
        for motor in self.motors:
            motor.stop()

    def update(self) -> None:
        """Apply one step: finish a pending turn or move along the heading, then stop."""
        if self.turning:
            pivot_right = self._back_left.speed != 0
            for motor in self.motors:
                if pivot_right:
                    motor.turn_right()
                else:
                    motor.turn_left()
            self.turning = False
        else:
            speed = self._back_left.speed
            heading = self._back_left.direction
            if heading is Direction.NORTH:
                self.position.y += speed
            elif heading is Direction.SOUTH:
                self.position.y -= speed
            elif heading is Direction.EAST:
                self.position.x += speed
            else:
                self.position.x -= speed
        self.stop()

    def print_direction(self, file: Optional[TextIO] = None) -> None:
        """Write the current heading, e.g. ``North``, on its own line."""
        out = file if file is not None else sys.stdout
        out.write(self.direction.name.capitalize() + "\n")

    def reset(self) -> None:
        """Stop, return to the origin and face north."""
        for motor in self.motors:
            motor.stop()
            motor.direction = Direction.NORTH
        self.position.x = 0.0
        self.position.y = 0.0
        self.turning = False