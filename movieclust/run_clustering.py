"""Recommend movies for one user by clustering everyone's ratings.

Usage examples
--------------
Defaults (user 1, two clusters, five titles each way):
    python -m movieclust.run_clustering --ratings dane.csv

With IMDb ids next to the titles:
    python -m movieclust.run_clustering --ratings dane.csv --imdb imdb.csv

Another user, more clusters, debug output of the clustering rounds:
    python -m movieclust.run_clustering --user-id 7 --k 4 --count 10 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
from typing import List

from movieclust.config import LOG_LEVELS, ClusterConfig, default_log_level
from movieclust.data.loaders import attach_imdb_ids, load_imdb_ids, load_ratings
from movieclust.models.base import Recommendation
from movieclust.models.cluster import ClusterRanker

logger = logging.getLogger(__name__)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Cluster users by their ratings and recommend movies to one of them.",
    )

    parser.add_argument(
        "--ratings",
        type=str,
        default="dane.csv",
        help="Ratings CSV (user id, title, rating) with a header row.",
    )
    parser.add_argument(
        "--imdb",
        type=str,
        default=None,
        help="Optional CSV mapping title to IMDb id, used to decorate output.",
    )
    parser.add_argument(
        "--user-id",
        type=int,
        default=1,
        help="User to recommend for.",
    )
    parser.add_argument(
        "--k",
        type=int,
        default=2,
        help="Number of user clusters.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="How many titles to list at each end of the ranking.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=default_log_level(),
        choices=LOG_LEVELS,
        help="Logging level (also read from MOVIECLUST_LOG_LEVEL).",
    )

    return parser.parse_args(argv)


def format_recommendation(rec: Recommendation) -> str:
    if rec.imdb_id:
        return f"{rec.title} ({rec.imdb_id})"
    return rec.title


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        config = ClusterConfig.from_args(args)
    except ValueError as e:
        raise SystemExit(f"Invalid arguments: {e}") from e

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ratings = load_ratings(config.ratings_path)
    except FileNotFoundError as e:
        raise SystemExit(f"Error loading movie ratings: {e}") from e

    if config.imdb_path is not None:
        try:
            ratings = attach_imdb_ids(ratings, load_imdb_ids(config.imdb_path))
        except FileNotFoundError as e:
            raise SystemExit(f"Error loading IMDB IDs: {e}") from e

    model = ClusterRanker(k=config.k, count=config.count)
    logger.info("Fitting %s (k=%d) on %d ratings...", model.__class__.__name__, config.k, len(ratings))
    model.fit(ratings)
    top, bottom = model.recommend(config.target_user)

    if not top and not bottom:
        print("No recommendations available.")
        return

    print(f"Top {config.count} recommended movies:")
    for rec in top:
        print(format_recommendation(rec))

    print(f"\nTop {config.count} least recommended movies:")
    for rec in bottom:
        print(format_recommendation(rec))


if __name__ == "__main__":
    main()
