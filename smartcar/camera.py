"""A simulated on-board camera that reports what it does."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass
class Camera:
    """Simulated camera; messages go to ``stream`` or standard output."""

    stream: Optional[TextIO] = None

    def _say(self, message: str) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(message + "\n")

    def start_streaming(self) -> None:
        """Begin streaming."""
        self._say("Camera Streaming started.")

    def stop_streaming(self) -> None:
        """Stop streaming."""
        self._say("Camera Streaming stopped.")

    def capture_frame(self, x: float, y: float) -> None:
        """Capture one frame at the given car coordinates."""
        self._say(f"Camera Capturing frame at ({x:g}, {y:g})")