"""
Evaluation script for scripted policies on the shape shooter environment
"""

import argparse
import logging
import time
from typing import Callable, Dict, Optional

import numpy as np

from game.shapes import ShapeShooterEnv
from rl.configs.shooter_config import ENV_CONFIG, EVAL_CONFIG, make_env_kwargs
from rl.metrics import EpisodeMetrics

logger = logging.getLogger(__name__)


def random_policy(env: ShapeShooterEnv) -> Callable[[np.ndarray], np.ndarray]:
    """Uniformly random actions from the env's action space"""
    def act(obs):
        return env.action_space.sample()
    return act


def tracker_policy(env: ShapeShooterEnv, deadzone: float = 0.005) -> Callable[[np.ndarray], np.ndarray]:
    """
    Move under the nearest enemy and keep firing.

    Reads the first enemy slot of the observation (relative x of the nearest
    enemy, normalised by the surface width).
    """
    def act(obs):
        dx = float(obs[5])
        if abs(dx) <= deadzone:
            move = 0
        elif dx < 0:
            move = 1
        else:
            move = 2
        return np.array([move, 1], dtype=np.int64)
    return act


POLICIES: Dict[str, Callable[[ShapeShooterEnv], Callable[[np.ndarray], np.ndarray]]] = {
    "random": random_policy,
    "tracker": tracker_policy,
}


def evaluate_policy(
    policy: str = "tracker",
    n_episodes: int = 10,
    render: bool = False,
    seed: Optional[int] = None,
    log_dir: Optional[str] = None,
    env_kwargs: Optional[dict] = None,
    verbose: int = 1,
):
    """
    Roll out a scripted policy

    Args:
        policy: Name of the policy ('random' or 'tracker')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for the first episode; episode i uses seed + i
        log_dir: Directory for the per-episode CSV (None disables it)
        env_kwargs: Keyword arguments for ShapeShooterEnv (defaults to ENV_CONFIG)
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")

    env = ShapeShooterEnv(render_mode="human" if render else None,
                          **(env_kwargs if env_kwargs is not None else ENV_CONFIG))
    if seed is not None:
        env.action_space.seed(seed)
    act = POLICIES[policy](env)

    with EpisodeMetrics(log_dir=log_dir, policy_name=policy, verbose=verbose) as metrics:
        for episode in range(n_episodes):
            obs, info = env.reset(seed=seed + episode if seed is not None else None)

            terminated = False
            truncated = False
            total_reward = 0.0
            steps = 0
            kills = 0
            escapes = 0

            while not (terminated or truncated):
                obs, reward, terminated, truncated, info = env.step(act(obs))
                total_reward += reward
                steps += 1
                kills += info["kills"]
                escapes += info["escapes"]

                if render:
                    time.sleep(1 / env.fps)

            metrics.record(total_reward, steps, info["score"], kills, escapes, info["level"])
            logger.debug("Episode %d finished: %s", episode + 1, info)

            if verbose > 0:
                print(f"Episode {episode + 1}/{n_episodes}: "
                      f"Reward = {total_reward:.2f}, Score = {info['score']}, Length = {steps}")

    env.close()
    summary = metrics.get_summary()

    if verbose > 0:
        print("\n" + "=" * 50)
        print(f"Evaluation Results [{policy}] ({n_episodes} episodes):")
        print(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
        print(f"Mean Score: {summary['mean_score']:.1f} ± {summary['std_score']:.1f}")
        print(f"Mean Episode Length: {summary['mean_length']:.1f}")
        print(f"Highest Level: {summary['max_level']}")
        print("=" * 50)

    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate scripted policies on the shape shooter")
    parser.add_argument(
        "--policy",
        type=str,
        default="tracker",
        choices=sorted(POLICIES) + ["all"],
        help="Policy to roll out (default: tracker)",
    )
    parser.add_argument(
        "--episodes",
        dest="n_episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of evaluation episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=EVAL_CONFIG["log_dir"],
        help="Directory for per-episode CSV files",
    )
    parser.add_argument("--max-steps", type=int, default=None, help="Override the episode step limit")
    parser.add_argument("--render", action="store_true", help="Watch the rollout in a window")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    overrides = {}
    if args.max_steps is not None:
        overrides["max_steps"] = args.max_steps
    env_kwargs = make_env_kwargs(**overrides)

    policies = EVAL_CONFIG["policies"] if args.policy == "all" else [args.policy]
    results = {}
    for name in policies:
        results[name] = evaluate_policy(
            policy=name,
            n_episodes=args.n_episodes,
            render=args.render,
            seed=args.seed,
            log_dir=args.log_dir,
            env_kwargs=env_kwargs,
        )

    if "random" in results and "tracker" in results:
        improvement = results["tracker"]["mean_score"] - results["random"]["mean_score"]
        print(f"\nTracker score improvement over random: {improvement:.1f}")


if __name__ == "__main__":
    main()
