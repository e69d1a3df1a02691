"""
ShapeShooterEnv - the shape shooter as a Gymnasium environment
--------------------------------------------------------------
- Same GameSession the interactive game plays
- Deterministic difficulty ramp: the session clock is steps / fps
- Discrete MultiDiscrete action space: [move(3), shoot(2)]
- Vector observation: player state + top-K nearest enemies

Quick test:
    python -m game.shapes.shooter_env
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .entities import ShapeKind
from .session import GameSession, FrameEvents
from .utils import clamp

logger = logging.getLogger(__name__)


class ShapeShooterEnv(gym.Env):
    """Vertical shape shooter environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        obs_mode: str = "vector",
        fps: int = 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        shape: str = "circle",
        reward_kill: float = 1.0,
        reward_escape: float = 1.0,
        reward_shot: float = 0.01,
        reward_game_over: float = 5.0,
        **session_kwargs,
    ):
        super().__init__()

        assert obs_mode in ("vector",), "Only 'vector' observations are implemented."
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.obs_mode = obs_mode

        self.fps = fps
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.shape = ShapeKind.parse(shape)

        self.reward_kill = reward_kill
        self.reward_escape = reward_escape
        self.reward_shot = reward_shot
        self.reward_game_over = reward_game_over

        self._step_count = 0
        self.session = GameSession(clock=self._clock, rng=random.Random(), **session_kwargs)

        # move: 0 stay, 1 left, 2 right; shoot: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Player: x(1) health(1) lives(1) cooldown(1) level(1)
        # Each enemy: rel pos(2)
        obs_dim = 5 + self.k_enemies * 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._last_events = FrameEvents()

    def _clock(self) -> float:
        return self._step_count / self.fps

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        shape = self.shape
        if options and "shape" in options:
            shape = ShapeKind.parse(options["shape"])

        self._step_count = 0
        self._last_events = FrameEvents()
        self.session.reset(shape=shape, seed=seed)

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, shoot = int(action[0]), int(action[1])

        events = self.session.update(left=move == 1, right=move == 2, shoot=shoot == 1)
        self._last_events = events
        self._step_count += 1

        reward = self._compute_reward(events)
        terminated = self.session.game_over
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        s = self.session
        p = s.player

        obs_parts = [
            p.x / s.width * 2 - 1,
            s.health_fraction * 2 - 1,
            s.lives / max(1, s.start_lives) * 2 - 1,
            clamp(s.cooldown / max(1, s.shoot_cooldown_frames) * 2 - 1, -1, 1),
            clamp(s.level / 20.0 * 2 - 1, -1, 1),
        ]

        def dist2(e):
            ex, ey = e.center
            return (ex - p.x) ** 2 + (ey - p.y) ** 2

        enemies_sorted = sorted(s.enemies, key=dist2)
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                ex, ey = enemies_sorted[i].center
                obs_parts += [
                    clamp((ex - p.x) / s.width, -1, 1),
                    clamp((ey - p.y) / s.height, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: FrameEvents) -> float:
        reward = 0.0
        reward += self.reward_kill * events.kills
        reward -= self.reward_escape * events.escapes
        reward -= self.reward_shot * events.shots
        if events.game_over:
            reward -= self.reward_game_over
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        info = self.session.snapshot()
        info.update({
            "kills": self._last_events.kills,
            "escapes": self._last_events.escapes,
            "step": self._step_count,
        })
        return info

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            self._window = _make_playfield_window(self.session)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def _make_playfield_window(session: GameSession):
    import arcade
    from .palette import BG
    from .render import draw_play

    class PlayfieldWindow(arcade.Window):
        """Read-only view of a session driven by env steps"""

        def __init__(self):
            super().__init__(session.width, session.height, "ShapeShooterEnv - Arcade")
            self.background_color = BG

        def on_draw(self):
            self.clear()
            draw_play(session)

    return PlayfieldWindow()


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: Optional[int] = 42) -> float:
    """Run a random episode and return its total reward"""
    env = ShapeShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f} (score {info['score']}, level {info['level']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
