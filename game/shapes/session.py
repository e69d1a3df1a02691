"""
GameSession - all mutable state of one play-through
----------------------------------------------------
- Player that moves left/right along the bottom and shoots straight up
- Enemies spawn at random along the top, faster as the level rises
- Difficulty level derived from elapsed time since the session started
- Escaped enemies cost health; losing all health costs a life
- Bullet/enemy collisions award score (one-hit kills)

The session knows nothing about windows or key codes: ``update`` takes three
booleans (left, right, shoot) and returns what happened during the frame.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from .entities import Player, Bullet, Enemy, ShapeKind
from .utils import clamp, circles_overlap

logger = logging.getLogger(__name__)


@dataclass
class FrameEvents:
    """What happened during one call to ``GameSession.update``"""
    shots: int = 0
    kills: int = 0
    escapes: int = 0
    lives_lost: int = 0
    game_over: bool = False


class GameSession:
    """Player, bullets, enemies and the score/health/lives counters"""

    def __init__(
        self,
        width: int = 1920,
        height: int = 1080,
        player_radius: float = 30.0,
        player_speed: float = 8.0,
        player_bottom_margin: float = 100.0,
        bullet_radius: float = 5.0,
        bullet_speed: float = 10.0,
        shoot_cooldown_frames: int = 10,
        enemy_size: float = 40.0,
        enemy_base_speed: float = 2.0,
        enemy_speed_per_level: float = 0.1,
        escape_damage: int = 34,
        max_health: int = 100,
        start_lives: int = 3,
        points_per_kill: int = 10,
        level_seconds: float = 10.0,
        spawn_rate_base: int = 30,
        spawn_rate_step: int = 2,
        spawn_rate_min: int = 5,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
        sounds=None,
    ):
        if width <= 2 * player_radius or height <= 0:
            raise ValueError(f"Surface {width}x{height} too small for player radius {player_radius}")
        if enemy_size >= width:
            raise ValueError(f"enemy_size {enemy_size} does not fit in width {width}")
        if level_seconds <= 0:
            raise ValueError("level_seconds must be positive")

        # Arena
        self.width = width
        self.height = height

        # Gameplay config
        self.player_radius = player_radius
        self.player_speed = player_speed
        self.player_bottom_margin = player_bottom_margin
        self.bullet_radius = bullet_radius
        self.bullet_speed = bullet_speed
        self.shoot_cooldown_frames = shoot_cooldown_frames
        self.enemy_size = enemy_size
        self.enemy_base_speed = enemy_base_speed
        self.enemy_speed_per_level = enemy_speed_per_level
        self.escape_damage = escape_damage
        self.max_health = max_health
        self.start_lives = start_lives
        self.points_per_kill = points_per_kill
        self.level_seconds = level_seconds
        self.spawn_rate_base = spawn_rate_base
        self.spawn_rate_step = spawn_rate_step
        self.spawn_rate_min = spawn_rate_min

        self.clock = clock or time.monotonic
        self.rng = rng or random.Random()
        self.sounds = sounds

        # World state
        self.player: Player = None  # type: ignore
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []

        self.reset()

    # ----------------------------
    # Session lifecycle
    # ----------------------------

    def reset(self, shape: Optional[ShapeKind] = None, seed: Optional[int] = None):
        """Start a fresh session; keeps the current shape unless one is given"""
        if seed is not None:
            self.rng.seed(seed)
        if shape is None:
            shape = self.player.shape if self.player is not None else ShapeKind.CIRCLE

        self.player = Player(
            x=self.width / 2,
            y=self.height - self.player_bottom_margin,
            radius=self.player_radius,
            shape=ShapeKind(shape),
            speed=self.player_speed,
        )
        self.bullets = []
        self.enemies = []

        self.lives = self.start_lives
        self.health = self.max_health
        self.score = 0
        self.cooldown = 0
        self.frame = 0
        self.game_over = False

        self.start_time = self.clock()
        self.level = 1
        self.spawn_rate = self.spawn_rate_for(self.level)
        logger.debug("Session reset with shape %s", self.player.shape.value)

    # ----------------------------
    # Difficulty
    # ----------------------------

    def level_for(self, elapsed: float) -> int:
        return int(max(0.0, elapsed) // self.level_seconds) + 1

    def spawn_rate_for(self, level: int) -> int:
        return max(self.spawn_rate_min, self.spawn_rate_base - self.spawn_rate_step * level)

    def enemy_speed(self) -> float:
        return self.enemy_base_speed + self.level * self.enemy_speed_per_level

    @property
    def elapsed(self) -> float:
        return self.clock() - self.start_time

    # ----------------------------
    # Per-frame update
    # ----------------------------

    def update(self, left: bool = False, right: bool = False, shoot: bool = False) -> FrameEvents:
        events = FrameEvents()
        if self.game_over:
            events.game_over = True
            return events

        self.frame += 1
        self._update_difficulty()
        self._apply_move(left, right)
        self._apply_shoot(shoot, events)
        self._update_bullets()
        self._spawn_logic()

        self._update_enemies(events)
        if self.game_over:
            return events

        self._handle_collisions(events)
        return events

    def _update_difficulty(self):
        self.level = self.level_for(self.elapsed)
        self.spawn_rate = self.spawn_rate_for(self.level)

    def _apply_move(self, left: bool, right: bool):
        dx = 0.0
        if left:
            dx -= self.player.speed
        if right:
            dx += self.player.speed

        r = self.player.radius
        self.player.x = clamp(self.player.x + dx, r, self.width - r)

    def _apply_shoot(self, shoot: bool, events: FrameEvents):
        if shoot and self.cooldown == 0:
            self.bullets.append(Bullet(
                x=self.player.x,
                y=self.player.y - self.player.radius,
                radius=self.bullet_radius,
                speed=self.bullet_speed,
            ))
            self.cooldown = self.shoot_cooldown_frames
            events.shots += 1
            self._play("shoot")

        if self.cooldown > 0:
            self.cooldown -= 1

    def _update_bullets(self):
        for b in self.bullets:
            b.y -= b.speed
            if b.y < 0:
                b.alive = False
        self.bullets = [b for b in self.bullets if b.alive]

    def _spawn_logic(self):
        # Independent draw every frame; mean wait is spawn_rate + 1 frames
        if self.rng.random() < 1.0 / (self.spawn_rate + 1):
            self._spawn_enemy()

    def _spawn_enemy(self):
        x = self.rng.uniform(0, self.width - self.enemy_size)
        self.enemies.append(Enemy(x=x, y=-self.enemy_size, size=self.enemy_size))

    def _update_enemies(self, events: FrameEvents):
        speed = self.enemy_speed()

        for e in self.enemies:
            e.y += speed
            if e.y <= self.height:
                continue

            e.alive = False
            events.escapes += 1
            self._play("explosion")
            self.health = clamp(self.health - self.escape_damage, 0, self.max_health)
            if self.health > 0:
                continue

            self.lives -= 1
            events.lives_lost += 1
            if self.lives > 0:
                self.health = self.max_health
                logger.info("Life lost, %d remaining", self.lives)
                continue

            self.lives = 0
            self.game_over = True
            events.game_over = True
            logger.info("Game over with score %d at level %d", self.score, self.level)
            break

        self.enemies = [e for e in self.enemies if e.alive]

    def _handle_collisions(self, events: FrameEvents):
        for b in self.bullets:
            for e in self.enemies:
                if not e.alive:
                    continue
                ex, ey = e.center
                if circles_overlap(b.x, b.y, b.radius, ex, ey, e.size / 2):
                    e.alive = False
                    b.alive = False
                    self.score += self.points_per_kill
                    events.kills += 1
                    self._play("hit")
                    break

        self.enemies = [e for e in self.enemies if e.alive]
        self.bullets = [b for b in self.bullets if b.alive]

    def _play(self, cue: str):
        if self.sounds is not None:
            self.sounds.play(cue)

    # ----------------------------
    # Read-only helpers
    # ----------------------------

    @property
    def health_fraction(self) -> float:
        return clamp(self.health / self.max_health, 0.0, 1.0)

    def snapshot(self) -> dict:
        return {
            "score": self.score,
            "health": self.health,
            "lives": self.lives,
            "level": self.level,
            "num_enemies": len(self.enemies),
            "num_bullets": len(self.bullets),
            "frame": self.frame,
            "game_over": self.game_over,
        }
