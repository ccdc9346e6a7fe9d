from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path

LOG_LEVEL_ENV = "MOVIECLUST_LOG_LEVEL"
LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def default_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()


@dataclass(frozen=True, kw_only=True)
class ClusterConfig:
    ratings_path: Path = Path("dane.csv")
    imdb_path: Path | None = None
    target_user: int = 1
    k: int = 2
    count: int = 5
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.k <= 0:
            raise ValueError(f"k must be positive, got {self.k}")
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ClusterConfig":
        return cls(
            ratings_path=Path(args.ratings),
            imdb_path=Path(args.imdb) if args.imdb else None,
            target_user=int(args.user_id),
            k=int(args.k),
            count=int(args.count),
            log_level=str(args.log_level).upper(),
        )
