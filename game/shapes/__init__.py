"""Shape shooter - single-screen arcade shooter with a Gymnasium interface"""

from .entities import ShapeKind, Player, Bullet, Enemy
from .session import GameSession, FrameEvents
from .screens import Screen, ScreenController
from .input_state import InputState
from .sound import SoundBank, NullSound
from .shooter_env import ShapeShooterEnv, run_random_episode

__all__ = [
    'ShapeKind', 'Player', 'Bullet', 'Enemy',
    'GameSession', 'FrameEvents',
    'Screen', 'ScreenController', 'InputState',
    'SoundBank', 'NullSound',
    'ShapeShooterEnv', 'run_random_episode',
]
