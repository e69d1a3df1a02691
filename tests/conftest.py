import random

import pytest

from game.shapes.input_state import InputState
from game.shapes.screens import ScreenController
from game.shapes.session import GameSession


class FakeClock:
    """Manually advanced clock"""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class ScriptedRandom(random.Random):
    """Random source with a fixed spawn draw and a fixed spawn position"""

    def __init__(self, draw: float = 0.999, x_fraction: float = 0.5):
        super().__init__(0)
        self.draw = draw
        self.x_fraction = x_fraction

    def random(self):
        return self.draw

    def uniform(self, a, b):
        return a + (b - a) * self.x_fraction


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock):
    """Session that never spawns enemies on its own"""
    return GameSession(clock=clock, rng=ScriptedRandom())


@pytest.fixture
def controller(session):
    return ScreenController(session, InputState())


def run_frame(ctl: ScreenController):
    """One frame the way the window drives it"""
    ctl.inputs.begin_frame()
    ctl.tick()
    ctl.inputs.end_frame()


def click(ctl: ScreenController, x: float, y: float, hold_frames: int = 1):
    ctl.inputs.press_mouse(x, y)
    for _ in range(hold_frames):
        run_frame(ctl)
    ctl.inputs.release_mouse(x, y)
    run_frame(ctl)
