"""Menu-driven command-line front end for the car simulator."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .car import CarController
from .simulator import Simulator, _TokenReader

MENU = (
    "=== Car Menu ===\n"
    "w : Move Forward\n"
    "s : Move Backward\n"
    "a : Turn Left\n"
    "d : Turn Right\n"
    "x : Stop\n"
    "c : Capture Camera Frame\n"
    "r : Reset Car\n"
    "z : Quit\n"
)


def _say(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_speed(reader: _TokenReader) -> Optional[float]:
    """Prompt until a number is entered; None if input runs out."""
    while True:
        _say("Enter speed: ")
        value = reader.read_float()
        if value is not None:
            return value
        if reader.read_char() is None:
            return None
        reader.ignore_line()
        _say("Invalid number! Try again.\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive car menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="smartcar", description="Smart car simulator.")
    parser.parse_args(argv)

    _say("=== Smart Car Simulator ===\n")
    car = CarController.instance()
    car.camera.start_streaming()

    sim = Simulator(car, input=sys.stdin, output=sys.stdout)
    reader = sim.reader
    movements = {
        "w": car.move_forward,
        "s": car.move_backward,
        "a": car.turn_left,
        "d": car.turn_right,
    }

    running = True
    while running:
        sim.draw_map()
        _say(MENU)
        _say("Enter command: ")
        command = reader.read_char()
        if command is None:
            break
        command = command.lower()

        if command in movements:
            speed = _read_speed(reader)
            if speed is None:
                break
            movements[command](speed)
            car.update()
        elif command == "x":
            car.stop()
        elif command == "c":
            car.camera.capture_frame(car.x, car.y)
        elif command == "r":
            car.reset()
        elif command == "z":
            running = False
        else:
            _say("Invalid command! Try again.\n")

    car.camera.stop_streaming()
    _say("Simulation ended.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())