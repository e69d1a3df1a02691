"""
Play the shape shooter:
    python -m game.shapes [--fullscreen] [--sound-dir DIR] [--seed N]
"""

import argparse
import logging

from rl.configs.shooter_config import GAME_CONFIG

from .window import run_game


def main():
    parser = argparse.ArgumentParser(description="Play the shape shooter")
    parser.add_argument("--fullscreen", action="store_true", help="Open the window fullscreen")
    parser.add_argument(
        "--sound-dir",
        type=str,
        default=None,
        help="Directory containing shoot.wav, hit.wav and explosion.wav",
    )
    parser.add_argument("--no-sound", action="store_true", help="Disable all sound cues")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for enemy spawns")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_game(
        sound_dir=args.sound_dir,
        fullscreen=args.fullscreen,
        seed=args.seed,
        enable_sound=not args.no_sound,
        **GAME_CONFIG,
    )


if __name__ == "__main__":
    main()
