"""Input handling that drives the camera: keys, mouse look, scroll zoom and resizing."""

from __future__ import annotations

from collections.abc import Iterable

from .camera import Camera, CamMovement
from .geometry import SCR_HEIGHT, SCR_WIDTH

_MOVEMENT_KEYS = (
    ("w", CamMovement.FORWARD),
    ("s", CamMovement.BACKWARD),
    ("a", CamMovement.LEFT),
    ("d", CamMovement.RIGHT),
)


class Controls:
    """Frame timing and input state for one window, forwarding motion to a camera."""

    def __init__(self, camera: Camera | None = None) -> None:
        self.camera = camera if camera is not None else Camera()
        self.width = SCR_WIDTH
        self.height = SCR_HEIGHT
        self.last_x = SCR_WIDTH / 2.0
        self.last_y = SCR_HEIGHT / 2.0
        self.delta_time = 0.0
        self.last_frame = 0.0
        self.should_close = False
        self._first_mouse = True

    def time_check(self, now: float) -> float:
        """Record the current time and return the seconds since the previous call."""
        self.delta_time = now - self.last_frame
        self.last_frame = now
        return self.delta_time

    def process_keys(self, keys: Iterable[str]) -> None:
        """Act on the currently held keys: "escape", "w", "a", "s", "d"; others are ignored."""
        held = {key.lower() for key in keys}
        if "escape" in held:
            self.should_close = True
        for key, movement in _MOVEMENT_KEYS:
            if key in held:
                self.camera.process_keyboard(movement, self.delta_time)

    def process_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def process_mouse(self, x: float, y: float, right_pressed: bool) -> None:
        """Turn the camera while the right mouse button is held."""
        if not right_pressed:
            self._first_mouse = True
            return

        if self._first_mouse:
            self.last_x = x
            self.last_y = y
            self._first_mouse = False

        x_offset = x - self.last_x
        y_offset = self.last_y - y

        self.last_x = x
        self.last_y = y

        self.camera.process_mouse(x_offset, y_offset, True)

    def process_scroll(self, x_offset: float, y_offset: float) -> None:
        self.camera.process_scroll(y_offset)

    def aspect_ratio(self) -> float:
        if self.height == 0:
            raise ValueError("window height is zero")
        return self.width / self.height