"""Terminal smart car simulator: motors, car controller, camera, grid map and menu."""

__version__ = "0.1.0"