"""
Screen state machine: menu, shape selection, instructions, play and game over.

Exactly one screen is active. ``ScreenController.tick`` runs the active
screen's update routine once per frame; drawing is left to the window, which
dispatches on ``controller.screen`` the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from .entities import ShapeKind
from .input_state import InputState
from .session import GameSession

logger = logging.getLogger(__name__)


class Screen(Enum):
    MENU = "menu"
    SHAPE_SELECT = "shape_select"
    INSTRUCTIONS = "instructions"
    PLAY = "play"
    GAME_OVER = "game_over"


@dataclass
class Button:
    """Clickable rectangle in surface coordinates (x, y is the centre)"""
    label: str
    x: float
    y: float
    width: float = 360.0
    height: float = 90.0

    def contains(self, px: float, py: float) -> bool:
        return (abs(px - self.x) <= self.width / 2
                and abs(py - self.y) <= self.height / 2)

    @property
    def lrtb(self):
        return (self.x - self.width / 2, self.x + self.width / 2,
                self.y - self.height / 2, self.y + self.height / 2)


@dataclass
class ShapeSlot:
    """One shape preview on the selection screen"""
    shape: ShapeKind
    x: float
    y: float
    box: float = 160.0

    def contains(self, px: float, py: float) -> bool:
        half = self.box / 2
        return abs(px - self.x) <= half and abs(py - self.y) <= half


def layout_shape_slots(width: float, y: float, spacing: float = 200.0,
                       box: float = 160.0) -> List[ShapeSlot]:
    """Lay every ShapeKind out in one row centred horizontally"""
    kinds = list(ShapeKind)
    x0 = width / 2 - spacing * (len(kinds) - 1) / 2
    return [ShapeSlot(kind, x0 + i * spacing, y, box) for i, kind in enumerate(kinds)]


class ScreenController:
    """
    Owns the active screen and the game session.

    Args:
        session: Session that ``PLAY`` advances
        inputs: Input state; edges must be computed by the caller before ``tick``
        initial: Screen to start on
    """

    def __init__(self, session: GameSession, inputs: InputState,
                 initial: Screen = Screen.MENU):
        self.session = session
        self.inputs = inputs
        self.screen = initial
        self.halted = False

        self.selected_shape: Optional[ShapeKind] = None

        w, h = session.width, session.height
        cx = w / 2

        # Layout (surface coordinates, y down)
        self.menu_buttons = {
            "play": Button("Play", cx, h * 0.45),
            "instructions": Button("Instructions", cx, h * 0.58),
            "quit": Button("Quit", cx, h * 0.71),
        }
        self.shape_slots = layout_shape_slots(w, h * 0.45)
        self.select_buttons = {
            "continue": Button("Continue", cx, h * 0.68),
            "quit": Button("Quit", cx, h * 0.81),
        }
        self.game_over_buttons = {
            "restart": Button("Restart", cx, h * 0.55),
            "menu": Button("Main Menu", cx, h * 0.68),
            "quit": Button("Quit", cx, h * 0.81),
        }

        self._routines: Dict[Screen, Callable[[], None]] = {
            Screen.MENU: self._update_menu,
            Screen.SHAPE_SELECT: self._update_shape_select,
            Screen.INSTRUCTIONS: self._update_instructions,
            Screen.PLAY: self._update_play,
            Screen.GAME_OVER: self._update_game_over,
        }

    # ----------------------------
    # Dispatch
    # ----------------------------

    def tick(self):
        """Run the active screen's routine once"""
        if self.halted:
            return
        self._routines[self.screen]()

    def switch(self, screen: Screen):
        if screen is not self.screen:
            logger.debug("Screen %s -> %s", self.screen.value, screen.value)
        self.screen = screen

    def quit(self):
        logger.info("Quit requested, halting frame dispatch")
        self.halted = True

    def _clicked(self, target) -> bool:
        return self.inputs.clicked and target.contains(*self.inputs.mouse)

    # ----------------------------
    # Screen routines
    # ----------------------------

    def _update_menu(self):
        if self._clicked(self.menu_buttons["play"]):
            self.switch(Screen.SHAPE_SELECT)
        elif self._clicked(self.menu_buttons["instructions"]):
            self.switch(Screen.INSTRUCTIONS)
        elif self._clicked(self.menu_buttons["quit"]):
            self.quit()

    def _update_instructions(self):
        if self.inputs.was_pressed("escape"):
            self.inputs.consume("escape")
            self.switch(Screen.MENU)

    def _update_shape_select(self):
        if not self.inputs.clicked:
            return

        for slot in self.shape_slots:
            if slot.contains(*self.inputs.mouse):
                self.selected_shape = slot.shape
                logger.debug("Selected shape %s", slot.shape.value)
                return

        if self.continue_visible and self._clicked(self.select_buttons["continue"]):
            self.start_game()
        elif self._clicked(self.select_buttons["quit"]):
            self.quit()

    def _update_play(self):
        held = self.inputs.is_held
        self.session.update(
            left=held("left"), right=held("right"), shoot=held("shoot"))
        if self.session.game_over:
            self.switch(Screen.GAME_OVER)

    def _update_game_over(self):
        if self._clicked(self.game_over_buttons["restart"]):
            self.start_game()
        elif self._clicked(self.game_over_buttons["menu"]):
            self.switch(Screen.MENU)
        elif self._clicked(self.game_over_buttons["quit"]):
            self.quit()

    # ----------------------------
    # Transitions
    # ----------------------------

    @property
    def continue_visible(self) -> bool:
        return self.selected_shape is not None

    def start_game(self):
        """Reset the session with the chosen shape and enter PLAY"""
        shape = self.selected_shape or ShapeKind.CIRCLE
        self.session.reset(shape=shape)
        logger.info("Starting game as %s", shape.value)
        self.switch(Screen.PLAY)
