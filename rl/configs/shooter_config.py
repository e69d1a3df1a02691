"""
Configuration for the shape shooter
Gameplay constants, environment parameters and evaluation settings
"""

# Gameplay constants (GameSession keyword arguments)
GAME_CONFIG = {
    "width": 1920,
    "height": 1080,
    "player_radius": 30.0,
    "player_speed": 8.0,          # px/frame
    "bullet_radius": 5.0,
    "bullet_speed": 10.0,         # px/frame
    "shoot_cooldown_frames": 10,
    "enemy_size": 40.0,
    "enemy_base_speed": 2.0,      # px/frame, plus 0.1 per level
    "escape_damage": 34,
    "max_health": 100,
    "start_lives": 3,
    "points_per_kill": 10,
    "level_seconds": 10.0,        # one difficulty level per 10 s
    "spawn_rate_base": 30,
    "spawn_rate_min": 5,
}

# Environment parameters (ShapeShooterEnv keyword arguments)
ENV_CONFIG = {
    "fps": 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "shape": "circle",
    "reward_kill": 1.0,       # Reward for destroying an enemy
    "reward_escape": 1.0,     # Penalty for every enemy reaching the bottom
    "reward_shot": 0.01,      # Penalty for shooting (encourage efficiency)
    "reward_game_over": 5.0,  # Game over penalty
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    "log_dir": "./logs",
    "policies": ["random", "tracker"],
}


def make_env_kwargs(**overrides):
    """Merge ENV_CONFIG with GAME_CONFIG-style overrides for ShapeShooterEnv"""
    kwargs = dict(ENV_CONFIG)
    kwargs.update(overrides)
    return kwargs


if __name__ == "__main__":
    for name, cfg in (("GAME_CONFIG", GAME_CONFIG), ("ENV_CONFIG", ENV_CONFIG), ("EVAL_CONFIG", EVAL_CONFIG)):
        print(name)
        print("-" * 50)
        for key, value in cfg.items():
            print(f"  {key:25} {value}")
