"""
Per-frame input sampling.

Keys are level-triggered (held until released). Mouse clicks and key presses
also get edges, computed once per frame by ``begin_frame`` and latched by
``end_frame``; screen handlers only ever read them.
"""

from __future__ import annotations

from typing import Dict, Set, Tuple

# Physical key names (as in arcade.key) -> logical input names
KEY_BINDINGS: Dict[str, str] = {
    "LEFT": "left",
    "A": "left",
    "RIGHT": "right",
    "D": "right",
    "SPACE": "shoot",
    "UP": "shoot",
    "W": "shoot",
    "ESCAPE": "escape",
}


class InputState:
    """Held keys, mouse position and click edges for the current frame"""

    def __init__(self):
        self.held: Set[str] = set()
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.mouse_down = False

        # Edge state
        self.clicked = False
        self.pressed_keys: Set[str] = set()
        self._was_down = False
        self._pending_keys: Set[str] = set()
        self._pending_click = False

    # ----------------------------
    # Raw events (from the window)
    # ----------------------------

    def press_key(self, key: str):
        if key not in self.held:
            self._pending_keys.add(key)
        self.held.add(key)

    def release_key(self, key: str):
        self.held.discard(key)

    def move_mouse(self, x: float, y: float):
        self.mouse_x = x
        self.mouse_y = y

    def press_mouse(self, x: float, y: float):
        self.move_mouse(x, y)
        self.mouse_down = True
        # A press and release within one frame still counts as a click
        self._pending_click = True

    def release_mouse(self, x: float, y: float):
        self.move_mouse(x, y)
        self.mouse_down = False

    # ----------------------------
    # Frame boundaries (from the frame driver)
    # ----------------------------

    def begin_frame(self):
        """Compute this frame's edges; call once before any handler runs"""
        self.clicked = self._pending_click or (self.mouse_down and not self._was_down)
        self.pressed_keys = set(self._pending_keys)
        self._pending_click = False
        self._pending_keys.clear()

    def end_frame(self):
        """Latch the current button state; call once after all handlers ran"""
        self._was_down = self.mouse_down
        self.clicked = False
        self.pressed_keys = set()

    # ----------------------------
    # Queries
    # ----------------------------

    def is_held(self, key: str) -> bool:
        return key in self.held

    def was_pressed(self, key: str) -> bool:
        return key in self.pressed_keys

    def consume(self, key: str):
        """Forget a key so it will not read as held or pressed again until re-pressed"""
        self.held.discard(key)
        self.pressed_keys.discard(key)
        self._pending_keys.discard(key)

    @property
    def mouse(self) -> Tuple[float, float]:
        return self.mouse_x, self.mouse_y
