# smartcar

A small terminal simulator of a four-wheeled smart car. The car drives on a
21 × 21 grid. Each step moves it forward or backward, or turns it a quarter
turn left or right. A simulated camera reports a frame capture at the car's
position.

## Running

```
smartcar
```

The command takes no options apart from `--help`. It says that the camera has
started streaming. It then draws the map, shows the car's pose and marks the
car with `C`, and shows this menu:

| Key | Action                                   |
|-----|------------------------------------------|
| w   | move forward (asks for a speed)          |
| s   | move backward (asks for a speed)         |
| a   | turn left (asks for a speed)             |
| d   | turn right (asks for a speed)            |
| x   | stop                                     |
| c   | capture a camera frame at the car        |
| r   | reset the car to the origin facing north |
| z   | quit                                     |

Commands are not case sensitive. An unknown key gets "Invalid command! Try
again." If the speed is not a number, the rest of that line is dropped and
the speed is asked for again. `z` or the end of input stops the loop. The
program then says that the camera has stopped streaming, and then
"Simulation ended."

## Using the library

```python
from smartcar.car import CarController
from smartcar.motor import Direction

car = CarController.instance()
car.reset()
car.turn_right(10.0)
car.update()                   # the car now faces east
car.move_forward(4.0)
car.update()                   # the car moves 4 units along x
assert car.direction is Direction.EAST
assert (car.x, car.y) == (4.0, 0.0)
```

### `smartcar.motor`

- `Direction`: an `IntEnum` with `NORTH`, `EAST`, `SOUTH` and `WEST`, numbered
  clockwise. `turned_right()` and `turned_left()` return the heading a quarter
  turn away.
- `Motor(id, direction=Direction.NORTH, speed=0.0)`: a dataclass with
  `stop()`, `turn_right()` and `turn_left()`.

### `smartcar.car`

- `Point(x=0.0, y=0.0)`: a position.
- `CarController`: `CarController.instance()` always returns the same shared
  controller. Constructing `CarController()` directly gives an independent
  car.
  - `move_forward(speed)`, `move_backward(speed)`, `turn_left(speed)` and
    `turn_right(speed)` only set the wheel speeds. A turn stops the wheels on
    the side the car turns towards.
  - `update()` applies one step. A pending turn rotates the heading a quarter
    turn: right if the left wheels are moving, left otherwise. If no turn is
    pending, the car moves along its heading by the back-left motor's speed.
    Either way, all motors then stop.
  - `stop()` and `reset()`. `reset()` stops the car, puts it back at the
    origin and faces it north.
  - `print_direction(file=None)` writes the heading, such as `North`.
  - The attributes and properties are `x`, `y` (both settable), `position`,
    `direction`, `motors`, `turning` and `camera`.

### `smartcar.camera`

- `Camera(stream=None)` has `start_streaming()`, `stop_streaming()` and
  `capture_frame(x, y)`. Each one writes a one-line message to `stream`, or
  to standard output if no stream is given.

### `smartcar.simulator`

- `world_to_map(x, y)` returns the `(row, column)` grid cell for world
  coordinates. The origin is at the centre, and y grows upwards. Halves round
  away from zero.
- `render_map(x, y)` returns the grid as text.
- `Simulator(car, input=None, output=None, pause=0.8, sleep=time.sleep)` has
  these methods:
  - `draw_map()` clears the screen and draws the pose and the map.
  - `run_demo_path()` drives a fixed route and pauses between steps.
  - `interactive_mode()` reads `w`/`s`/`a`/`d` followed by a value, `x` or
    `z`.
  - `run()` first asks whether to play the demo.

## Limitations

- The camera records nothing. It only prints messages.
- The map is a fixed 21 × 21 grid. A car that moves outside it is not drawn.
- The `smartcar` command always starts the menu. The scripted demo path is
  only reachable through `Simulator.run()` or `Simulator.run_demo_path()`.

## Tests

```
pip install .[test]
pytest
```