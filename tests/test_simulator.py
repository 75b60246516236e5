import io

import pytest

from smartcar.car import CarController
from smartcar.motor import Direction
from smartcar.simulator import (
    CLEAR_SCREEN,
    MAP_HEIGHT,
    MAP_WIDTH,
    Simulator,
    render_map,
    world_to_map,
)


def make_sim(text=""):
    car = CarController()
    pauses = []
    out = io.StringIO()
    sim = Simulator(car, input=io.StringIO(text), output=out, sleep=pauses.append)
    return sim, car, out, pauses


def test_origin_maps_to_center():
    assert world_to_map(0, 0) == (MAP_HEIGHT // 2, MAP_WIDTH // 2)


def test_x_moves_columns_and_y_moves_rows():
    row0, col0 = world_to_map(0, 0)
    row, col = world_to_map(3, 4)
    assert col - col0 == 3
    assert row0 - row == 4


@pytest.mark.parametrize("half, whole", [(0.5, 1), (-0.5, -1), (2.5, 3), (-2.5, -3)])
def test_halves_round_away_from_zero(half, whole):
    assert world_to_map(half, half) == world_to_map(whole, whole)


def test_render_map_shape_and_single_car():
    grid = render_map(2, -3).splitlines()
    assert len(grid) == MAP_HEIGHT
    assert all(len(line) == MAP_WIDTH for line in grid)
    assert sum(line.count("C") for line in grid) == 1
    row, col = world_to_map(2, -3)
    assert grid[row][col] == "C"


def test_render_map_off_grid_has_no_car():
    assert "C" not in render_map(100, 100)


def test_draw_map_output():
    sim, car, out, _ = make_sim()
    car.y = 5.0
    sim.draw_map()
    text = out.getvalue()
    assert text.startswith(CLEAR_SCREEN)
    assert "Pose: (x = 0, y = 5)" in text
    assert render_map(0, 5) in text


def test_demo_path_final_state_and_pauses():
    sim, car, _, pauses = make_sim()
    sim.run_demo_path()
    assert (car.x, car.y) == (-2.0, 3.0)
    assert car.direction is Direction.NORTH
    assert pauses == [0.8] * 6


def test_interactive_forward():
    sim, car, _, _ = make_sim("w 5\nz\n")
    sim.interactive_mode()
    assert car.y == 5.0
    assert car.x == 0.0


def test_interactive_turn_then_forward():
    sim, car, _, _ = make_sim("d 1\nw 2\nz\n")
    sim.interactive_mode()
    assert car.direction is Direction.EAST
    assert car.x == 2.0


def test_interactive_stop_and_unknown_command_do_not_move():
    sim, car, _, _ = make_sim("x\nq 3\nz\n")
    sim.interactive_mode()
    assert (car.x, car.y) == (0.0, 0.0)


def test_interactive_stops_on_bad_value():
    sim, car, out, _ = make_sim("w abc\nw 4\n")
    sim.interactive_mode()
    assert car.y == 0.0
    assert out.getvalue().count("Enter value: ") == 1


def test_interactive_ends_at_end_of_input():
    sim, car, out, _ = make_sim("s 2")
    sim.interactive_mode()
    assert car.y == -2.0
    assert out.getvalue().endswith("Enter command: ")


def test_run_yes_runs_demo():
    sim, car, _, pauses = make_sim("Y\n")
    sim.run()
    assert len(pauses) == 6
    assert car.y == 3.0


def test_run_no_goes_interactive():
    sim, car, _, pauses = make_sim("n\nw 4\nz\n")
    sim.run()
    assert pauses == []
    assert car.y == 4.0