"""
Per-episode metrics for policy rollouts.
Records: reward, length, score, kills, escapes and level reached.
"""

import os
import csv
from typing import Any, Dict, List, Optional

import numpy as np


class EpisodeMetrics:
    """
    Collects episode statistics and optionally mirrors them to a CSV file.
    """

    FIELDS = ["episode", "reward", "length", "score", "kills", "escapes", "level"]

    def __init__(self, log_dir: Optional[str] = None, policy_name: str = "policy", verbose: int = 1):
        self.log_dir = log_dir
        self.policy_name = policy_name
        self.verbose = verbose

        self.rows: List[Dict[str, Any]] = []

        # CSV file
        self.csv_path: Optional[str] = None
        self.csv_file = None
        self.csv_writer = None

    def open(self):
        """Create the CSV file and write the header."""
        if self.log_dir is None:
            return
        os.makedirs(self.log_dir, exist_ok=True)
        self.csv_path = os.path.join(self.log_dir, f"{self.policy_name}_metrics.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.writer(self.csv_file)
        self.csv_writer.writerow(self.FIELDS)
        self.csv_file.flush()

        if self.verbose > 0:
            print(f"[EpisodeMetrics] Logging to {self.csv_path}")

    def record(self, reward: float, length: int, score: int, kills: int, escapes: int, level: int):
        row = {
            "episode": len(self.rows) + 1,
            "reward": float(reward),
            "length": int(length),
            "score": int(score),
            "kills": int(kills),
            "escapes": int(escapes),
            "level": int(level),
        }
        self.rows.append(row)

        if self.csv_writer:
            self.csv_writer.writerow([row[f] for f in self.FIELDS])
            self.csv_file.flush()

    def close(self):
        if self.csv_file:
            self.csv_file.close()
            self.csv_file = None
            self.csv_writer = None
            if self.verbose > 0:
                print(f"[EpisodeMetrics] Saved {len(self.rows)} episodes to {self.csv_path}")

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics."""
        if not self.rows:
            return {}

        rewards = [r["reward"] for r in self.rows]
        scores = [r["score"] for r in self.rows]
        return {
            "mean_reward": float(np.mean(rewards)),
            "std_reward": float(np.std(rewards)),
            "mean_score": float(np.mean(scores)),
            "std_score": float(np.std(scores)),
            "mean_length": float(np.mean([r["length"] for r in self.rows])),
            "mean_kills": float(np.mean([r["kills"] for r in self.rows])),
            "max_level": int(max(r["level"] for r in self.rows)),
            "total_episodes": len(self.rows),
        }
