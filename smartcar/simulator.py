"""Terminal simulator: draws the car on a grid and drives it from input."""

from __future__ import annotations

import math
import sys
import time
from typing import Callable, List, Optional, TextIO

from .car import CarController

MAP_WIDTH = 21
MAP_HEIGHT = 21

CLEAR_SCREEN = "\x1b[2J\x1b[H"

_NUMBER_CHARS = frozenset("+-0123456789.eE")


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return int(-magnitude if value < 0 else magnitude)


def world_to_map(x: float, y: float) -> tuple[int, int]:
    """Return the (row, column) grid cell for world coordinates."""
    center_row = MAP_HEIGHT // 2
    center_col = MAP_WIDTH // 2
    return center_row - _round_half_away(y), center_col + _round_half_away(x)


def render_map(x: float, y: float) -> str:
    """Return the grid as text, with ``C`` in the car's cell and ``.`` elsewhere."""
    car_row, car_col = world_to_map(x, y)
    lines = (
        "".join("C" if (row, col) == (car_row, car_col) else "." for col in range(MAP_WIDTH))
        for row in range(MAP_HEIGHT)
    )
    return "".join(line + "\n" for line in lines)


class _TokenReader:
    """Reads whitespace-separated characters and numbers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: List[str] = []

    def _getc(self) -> Optional[str]:
        if self._pending:
            return self._pending.pop()
        ch = self._stream.read(1)
        return ch or None

    def _unget(self, chars: List[str]) -> None:
        self._pending.extend(reversed(chars))

    def _first_non_space(self) -> Optional[str]:
        while True:
            ch = self._getc()
            if ch is None or not ch.isspace():
                return ch

    def read_char(self) -> Optional[str]:
        """Return the next non-blank character, or None at end of input."""
        return self._first_non_space()

    def read_float(self) -> Optional[float]:
        """Return the next number, or None if the input holds none here."""
        first = self._first_non_space()
        if first is None:
            return None
        chars = [first]
        while True:
            ch = self._getc()
            if ch is None:
                break
            if ch not in _NUMBER_CHARS:
                self._unget([ch])
                break
            chars.append(ch)
        for end in range(len(chars), 0, -1):
            try:
                value = float("".join(chars[:end]))
            except ValueError:
                continue
            self._unget(chars[end:])
            return value
        self._unget(chars)
        return None

    def ignore_line(self, limit: int = 1000) -> None:
        """Discard input up to and including the next newline."""
        for _ in range(limit):
            ch = self._getc()
            if ch is None or ch == "\n":
                return


class Simulator:
    """Draws a car on a text map and drives it by script or by commands."""

    def __init__(
        self,
        car: CarController,
        input: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        pause: float = 0.8,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.car = car
        self.input = input
        self.output = output
        self.pause = pause
        self.sleep = sleep
        self._reader: Optional[_TokenReader] = None

    @property
    def _out(self) -> TextIO:
        return self.output if self.output is not None else sys.stdout

    @property
    def reader(self) -> _TokenReader:
        if self._reader is None:
            self._reader = _TokenReader(self.input if self.input is not None else sys.stdin)
        return self._reader

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def draw_map(self) -> None:
        """Clear the screen and draw the pose and the map."""
        x, y = self.car.x, self.car.y
        self._write(
            CLEAR_SCREEN
            + "Car Simulator\n"
            + "-------------\n"
            + f"Pose: (x = {x:g}, y = {y:g})\n\n"
            + "Map Legend: C = car, . = empty\n\n"
            + render_map(x, y)
            + "\n"
        )

    def _show(self) -> None:
        self.draw_map()
        self.sleep(self.pause)

    def run_demo_path(self) -> None:
        """Drive a fixed route, drawing the map after each step."""
        car = self.car
        self._show()

        car.move_forward(3.0)
        car.update()
        self._show()

        car.turn_right(1.0)
        car.update()
        self._show()

        car.move_backward(2.0)
        car.update()
        self._show()

        car.turn_left(1.0)
        car.update()
        self._show()

        car.stop()
        self._show()

    def interactive_mode(self) -> None:
        """Read commands until ``z`` or the end of input."""
        actions = {
            "w": self.car.move_forward,
            "s": self.car.move_backward,
            "a": self.car.turn_left,
            "d": self.car.turn_right,
        }
        while True:
            self.draw_map()
            self._write(
                "Commands:\n"
                "  w : forward\n"
                "  s : backward\n"
                "  a : turn left\n"
                "  d : turn right\n"
                "  x : stop\n"
                "  z : quit\n\n"
                "Enter command: "
            )
            cmd = self.reader.read_char()
            if cmd is None or cmd == "z":
                return
            if cmd == "x":
                self.car.stop()
                continue

            self._write("Enter value: ")
            value = self.reader.read_float()
            if value is None:
                return

            action = actions.get(cmd)
            if action is not None:
                action(value)
            self.car.update()

    def run(self) -> None:
        """Ask whether to run the demo route, otherwise take commands."""
        self._write("Run demo path? (y/n): ")
        answer = self.reader.read_char()
        if answer in ("y", "Y"):
            self.run_demo_path()
        else:
            self.interactive_mode()