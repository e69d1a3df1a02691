"""
Arcade window: the frame driver for the interactive game.

``on_update`` is the single per-frame callback. It computes input edges,
runs the active screen's routine and latches the input state, in that order
and exactly once per frame.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import arcade
from arcade.camera import Camera2D
from arcade.types import LBWH, LRBT

from .input_state import InputState, KEY_BINDINGS
from .palette import BG
from .render import draw_controller
from .screens import ScreenController
from .session import GameSession
from .sound import SoundBank
from .utils import to_surface

logger = logging.getLogger(__name__)

TITLE = "Shape Shooter"
FPS = 60

# arcade key codes -> logical input names
KEY_NAMES = {getattr(arcade.key, name): action for name, action in KEY_BINDINGS.items()}


class GameWindow(arcade.Window):
    """
    Window hosting the screen controller.

    The logical surface is always ``session.width`` x ``session.height``; a
    camera stretches it over whatever the real window size is (fullscreen on
    another resolution included) and mouse events are mapped back through
    ``to_surface``.
    """

    def __init__(self, session: GameSession, fullscreen: bool = False):
        super().__init__(session.width, session.height, TITLE,
                         fullscreen=fullscreen, update_rate=1 / FPS)
        self.background_color = BG

        half_w, half_h = session.width / 2, session.height / 2
        self.camera = Camera2D(
            viewport=LBWH(0, 0, self.width, self.height),
            position=(half_w, half_h),
            projection=LRBT(-half_w, half_w, -half_h, half_h),
        )

        self.inputs = InputState()
        self.controller = ScreenController(session, self.inputs)

    # ----------------------------
    # Frame driver
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.controller.halted:
            return
        self.inputs.begin_frame()
        self.controller.tick()
        self.inputs.end_frame()

    def on_draw(self):
        self.clear()
        self.camera.use()
        draw_controller(self.controller)

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        # pyglet may fire this before __init__ has built the camera
        camera = getattr(self, "camera", None)
        if camera is not None:
            camera.viewport = LBWH(0, 0, width, height)
        logger.debug("Window resized to %dx%d", width, height)

    # ----------------------------
    # Input events
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.inputs.press_key(name)

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None:
            self.inputs.release_key(name)

    def _surface(self, x: float, y: float):
        session = self.controller.session
        return to_surface(x, y, (self.width, self.height), (session.width, session.height))

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self.inputs.move_mouse(*self._surface(x, y))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self.inputs.press_mouse(*self._surface(x, y))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self.inputs.release_mouse(*self._surface(x, y))


def run_game(sound_dir: Optional[str] = None, fullscreen: bool = False,
             seed: Optional[int] = None, enable_sound: bool = True, **session_kwargs):
    """Build the session and window and enter arcade's event loop"""
    sound_kwargs = {"enabled": enable_sound}
    if sound_dir is not None:
        sound_kwargs["sound_dir"] = sound_dir
    sounds = SoundBank(**sound_kwargs)

    session = GameSession(rng=random.Random(seed), sounds=sounds, **session_kwargs)
    window = GameWindow(session, fullscreen=fullscreen)
    logger.info("Window %dx%d opened", session.width, session.height)
    arcade.run()
    return window
