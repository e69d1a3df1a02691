import random

import pytest

from game.shapes.entities import Bullet, Enemy, ShapeKind
from game.shapes.session import GameSession

from conftest import FakeClock, ScriptedRandom


def escaping_enemy(session):
    """Enemy that crosses the bottom boundary on the next update"""
    return Enemy(x=100.0, y=session.height - 1, size=session.enemy_size)


def test_fresh_session_defaults(session):
    assert session.lives == 3
    assert session.health == session.max_health == 100
    assert session.score == 0
    assert session.level == 1
    assert session.spawn_rate == 28
    assert session.player.x == 960
    assert session.player.y == 980
    assert session.bullets == [] and session.enemies == []


def test_player_stays_at_left_boundary(session):
    for _ in range(300):
        session.update(left=True)
        assert session.player.x >= session.player.radius
    assert session.player.x == session.player.radius


def test_player_stays_at_right_boundary(session):
    for _ in range(300):
        session.update(right=True)
    assert session.player.x == session.width - session.player.radius


def test_left_and_right_cancel(session):
    session.update(left=True, right=True)
    assert session.player.x == 960


def test_level_steps_with_elapsed_time(session, clock):
    levels = []
    for t in (0, 9.99, 10, 19.5, 25, 100, 300):
        clock.now = t
        session.update()
        levels.append(session.level)
    assert levels == [1, 1, 2, 2, 3, 11, 31]
    assert levels == sorted(levels)


def test_spawn_rate_has_a_floor(session, clock):
    clock.now = 25
    session.update()
    assert session.spawn_rate == 24
    clock.now = 500
    session.update()
    assert session.spawn_rate == 5


def test_enemy_speed_grows_with_level(session, clock):
    session.enemies.append(Enemy(x=0, y=0))
    clock.now = 40  # level 5
    session.update()
    assert session.enemies[0].y == pytest.approx(2.5)


def test_shoot_cooldown(session):
    shots = 0
    for _ in range(21):
        shots += session.update(shoot=True).shots
    assert shots == 3


def test_bullet_spawns_above_player(session):
    session.update(shoot=True)
    (bullet,) = session.bullets
    assert bullet.x == session.player.x
    # spawned at y - radius, then moved once
    assert bullet.y == session.player.y - session.player.radius - session.bullet_speed
    assert session.cooldown == session.shoot_cooldown_frames - 1


def test_cooldown_ticks_without_input(session):
    session.update(shoot=True)
    for _ in range(9):
        session.update()
    assert session.cooldown == 0


def test_bullets_leave_at_top(session):
    session.bullets.append(Bullet(x=10, y=5))
    session.update()
    assert session.bullets == []


def test_spawned_enemy_starts_above_screen_and_descends(clock):
    session = GameSession(clock=clock, rng=ScriptedRandom(draw=0.0, x_fraction=1.0))
    session.update()
    assert len(session.enemies) == 1
    enemy = session.enemies[0]
    assert enemy.y == pytest.approx(-session.enemy_size + session.enemy_speed())
    assert enemy.x + enemy.size == session.width

    session.rng.draw = 0.999
    session.update()
    assert enemy.y == pytest.approx(-session.enemy_size + 2 * session.enemy_speed())


def test_spawn_threshold_is_one_over_rate_plus_one(clock):
    session = GameSession(clock=clock, rng=ScriptedRandom(draw=1 / 29))
    session.update()
    assert session.enemies == []

    session.rng.draw = 1 / 29 - 1e-9
    session.update()
    assert len(session.enemies) == 1


def test_mean_spawn_interval(clock):
    session = GameSession(clock=clock, rng=random.Random(1234))
    draws = 29_000
    for _ in range(draws):
        session._spawn_logic()
    expected = draws / (session.spawn_rate + 1)
    assert abs(len(session.enemies) - expected) < expected * 0.15


def test_bullet_hit_removes_enemy_and_scores(session):
    session.bullets.append(Bullet(x=100, y=500))
    session.enemies.append(Enemy(x=80, y=480))
    events = session.update()
    assert events.kills == 1
    assert session.score == 10
    assert session.enemies == [] and session.bullets == []


def test_near_miss_keeps_both(session):
    session.bullets.append(Bullet(x=100, y=500))
    session.enemies.append(Enemy(x=200, y=480))
    session.update()
    assert session.score == 0
    assert len(session.enemies) == 1 and len(session.bullets) == 1


def test_one_bullet_removes_only_the_first_enemy(session):
    first = Enemy(x=80, y=480)
    second = Enemy(x=85, y=480)
    session.enemies.extend([first, second])
    session.bullets.append(Bullet(x=100, y=500))
    session.update()
    assert len(session.enemies) == 1
    assert session.enemies[0] is second
    assert session.score == 10


def test_enemy_is_removed_by_one_bullet_only(session):
    session.enemies.append(Enemy(x=80, y=480))
    session.bullets.extend([Bullet(x=100, y=500), Bullet(x=100, y=505)])
    session.update()
    assert session.score == 10
    assert len(session.bullets) == 1


def test_escape_costs_health_once(session):
    session.enemies.append(escaping_enemy(session))
    events = session.update()
    assert events.escapes == 1
    assert session.health == 66
    assert session.enemies == []

    session.update()
    assert session.health == 66


def test_health_depletion_costs_a_life(session):
    for expected in (66, 32):
        session.enemies.append(escaping_enemy(session))
        session.update()
        assert session.health == expected

    session.enemies.append(escaping_enemy(session))
    events = session.update()
    assert events.lives_lost == 1
    assert session.lives == 2
    assert session.health == session.max_health


def test_three_depletions_end_the_game(session):
    session.score = 120
    for _ in range(9):
        assert not session.game_over
        session.enemies.append(escaping_enemy(session))
        session.update()
        assert 0 <= session.health <= session.max_health
    assert session.game_over
    assert session.lives == 0
    assert session.health == 0
    assert session.score == 120


def test_game_over_aborts_rest_of_frame(session):
    session.lives = 1
    session.health = 34
    session.enemies.extend([escaping_enemy(session), escaping_enemy(session)])
    # A bullet sitting on an enemy would score if the collision pass ran
    session.enemies.append(Enemy(x=80, y=480))
    session.bullets.append(Bullet(x=100, y=500))

    events = session.update()
    assert events.game_over
    assert events.escapes == 1
    assert session.score == 0
    assert len(session.enemies) == 2


def test_update_after_game_over_is_inert(session):
    session.game_over = True
    session.enemies.append(Enemy(x=0, y=0))
    events = session.update(right=True)
    assert events.game_over
    assert session.player.x == 960
    assert session.enemies[0].y == 0


def test_invariants_hold_over_a_long_run(clock):
    session = GameSession(clock=clock, rng=random.Random(7))
    last_score = 0
    for frame in range(5000):
        clock.now = frame / 60
        session.update(left=frame % 200 < 100, right=frame % 200 >= 100, shoot=True)
        r = session.player.radius
        assert r <= session.player.x <= session.width - r
        assert 0 <= session.health <= session.max_health
        assert session.score >= last_score
        assert session.score % 10 == 0
        last_score = session.score
        if session.game_over:
            break


def test_reset_restores_everything_and_keeps_shape(session, clock):
    session.reset(shape=ShapeKind.STAR)
    session.score = 50
    session.lives = 1
    session.health = 10
    session.enemies.append(Enemy(x=0, y=0))
    session.update(left=True, shoot=True)

    clock.now = 100
    session.reset()
    assert session.player.shape is ShapeKind.STAR
    assert (session.score, session.lives, session.health) == (0, 3, 100)
    assert session.enemies == [] and session.bullets == []
    assert session.player.x == 960
    assert session.elapsed == 0
    assert session.level == 1


def test_sound_cues(clock):
    played = []

    class Recorder:
        def play(self, cue):
            played.append(cue)

    session = GameSession(clock=clock, rng=ScriptedRandom(), sounds=Recorder())
    session.enemies.append(Enemy(x=session.player.x - 20, y=session.player.y - 70))
    session.update(shoot=True)
    session.enemies.append(escaping_enemy(session))
    session.update()
    assert played == ["shoot", "hit", "explosion"]


def test_rejects_bad_config():
    with pytest.raises(ValueError):
        GameSession(width=40, player_radius=30)
    with pytest.raises(ValueError):
        GameSession(level_seconds=0)
