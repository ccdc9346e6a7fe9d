from __future__ import annotations

from abc import ABC
from typing import List, Mapping

import pandas as pd

from .base import Recommendation, RecommenderModel


class HeuristicRanker(RecommenderModel, ABC):
    """Base class for non-learned ranking heuristics."""

    def fit(
        self,
        ratings: pd.DataFrame,
        users: pd.DataFrame | None = None,
    ) -> "HeuristicRanker":
        """Fit heuristic-specific statistics."""
        raise NotImplementedError

    @staticmethod
    def rank_scores(scores: Mapping[str, float], ascending: bool = False) -> pd.DataFrame:
        """Order a title -> score map by score, ties broken by title ascending."""
        ranking = pd.DataFrame(
            {
                "Title": [str(title) for title in scores],
                "score": [float(score) for score in scores.values()],
            },
            columns=["Title", "score"],
        )
        return ranking.sort_values(
            by=["score", "Title"],
            ascending=[ascending, True],
            kind="mergesort",
        ).reset_index(drop=True)

    @classmethod
    def top_k_from_scores(
        cls,
        scores: Mapping[str, float],
        k: int,
        imdb_ids: Mapping[str, str] | None = None,
    ) -> List[Recommendation]:
        """Return the k highest-scoring items (descending)."""
        return cls._take(cls.rank_scores(scores, ascending=False), k, imdb_ids)

    @classmethod
    def bottom_k_from_scores(
        cls,
        scores: Mapping[str, float],
        k: int,
        imdb_ids: Mapping[str, str] | None = None,
    ) -> List[Recommendation]:
        """Return the k lowest-scoring items (ascending)."""
        return cls._take(cls.rank_scores(scores, ascending=True), k, imdb_ids)

    @staticmethod
    def _take(
        ranking: pd.DataFrame,
        k: int,
        imdb_ids: Mapping[str, str] | None,
    ) -> List[Recommendation]:
        if k < 0:
            raise ValueError(f"Result count must be non-negative, got {k}")

        imdb_ids = imdb_ids or {}
        return [
            Recommendation(
                title=row.Title,
                score=float(row.score),
                imdb_id=imdb_ids.get(row.Title, ""),
            )
            for row in ranking.head(k).itertuples(index=False)
        ]
