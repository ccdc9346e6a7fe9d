from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from movieclust.data.store import build_rating_matrix, dedupe_ratings, group_ratings_by_user
from movieclust.models.base import Recommendation
from movieclust.models.cluster.distance import profile_distance
from movieclust.models.cluster.kclusters import cluster_users, find_cluster, update_centroids
from movieclust.models.heuristic_base import HeuristicRanker

logger = logging.getLogger(__name__)


def calculate_recommendations(
    user_id: int,
    profiles: Dict[int, Dict[str, float]],
    members: Sequence[int],
) -> Dict[str, float]:
    """Sum cluster-mates' ratings for every title the user has not rated.

    The user may be among ``members``; their own titles are all seen and so
    never contribute.
    """
    seen = profiles.get(int(user_id), {})
    scores: Dict[str, float] = {}
    for member in members:
        for title, rating in profiles.get(int(member), {}).items():
            if title not in seen:
                scores[title] = scores.get(title, 0.0) + rating
    return scores


class ClusterRanker(HeuristicRanker):
    """Recommend titles rated by the members of a user's cluster.

    Users are grouped with ``cluster_users``; a user's candidates are the
    titles their cluster-mates rated and they did not, scored by the sum of
    those ratings. Both ends of the ranking are exposed: the top of the list
    as recommendations and the bottom as titles to avoid.

    Parameters
    ----------
    k : int
        Number of clusters.
    count : int
        Length of the top and bottom lists.
    """

    def __init__(self, k: int = 2, count: int = 5) -> None:
        if int(k) <= 0:
            raise ValueError(f"Cluster count must be positive, got {k}")
        if int(count) < 0:
            raise ValueError(f"Result count must be non-negative, got {count}")
        self.k = int(k)
        self.count = int(count)

        self.user_ids_: List[int] = []
        self.clusters_: Dict[int, List[int]] = {}
        self.centroids_: List[int] = []
        self._profiles: Dict[int, Dict[str, float]] = {}
        self._imdb_ids: Dict[str, str] = {}

    def fit(
        self,
        ratings: pd.DataFrame,
        users: pd.DataFrame | None = None,
    ) -> "ClusterRanker":
        """Cluster every user found in ``ratings``.

        Parameters
        ----------
        ratings : pd.DataFrame
            Observed ratings (UserID, Title, Rating, optionally IMDBID).
        users : pd.DataFrame | None
            Not required; clustering covers all users present in ``ratings``.

        Returns
        -------
        ClusterRanker
            Fitted ranker with cluster membership and final centroids.
        """
        self.user_ids_ = []
        self.clusters_ = {}
        self.centroids_ = []
        self._profiles = {}
        self._imdb_ids = {}
        if ratings.empty:
            return self

        work = dedupe_ratings(ratings)
        self._profiles = group_ratings_by_user(work)
        self._imdb_ids = self._collect_imdb_ids(work)

        matrix = build_rating_matrix(work)
        self.user_ids_ = [int(uid) for uid in matrix.user_ids.tolist()]
        self.clusters_ = cluster_users(self.user_ids_, self.k, matrix)
        self.centroids_ = update_centroids(self.clusters_, self.k)

        logger.info(
            "Clustered %d users over %d titles into k=%d clusters (sizes=%s)",
            len(self.user_ids_),
            len(matrix.titles),
            self.k,
            [len(self.clusters_[j]) for j in range(self.k)],
        )
        return self

    def cluster_of(self, user_id: int) -> int | None:
        return find_cluster(user_id, self.clusters_)

    def user_distance(self, user_a: int, user_b: int) -> float:
        return profile_distance(
            self._profiles.get(int(user_a), {}),
            self._profiles.get(int(user_b), {}),
        )

    def score_items(self, user_id: int) -> Dict[str, float]:
        cluster = self.cluster_of(user_id)
        if cluster is None:
            logger.info("User %d is not in any cluster; no recommendations", int(user_id))
            return {}

        if logger.isEnabledFor(logging.DEBUG):
            centroid = self.centroids_[cluster]
            logger.debug(
                "User %d in cluster %d (centroid=%d, distance=%.4f, members=%d)",
                int(user_id),
                cluster,
                centroid,
                self.user_distance(user_id, centroid),
                len(self.clusters_[cluster]),
            )
        return calculate_recommendations(user_id, self._profiles, self.clusters_[cluster])

    def recommend(
        self,
        user_id: int,
        count: int | None = None,
    ) -> Tuple[List[Recommendation], List[Recommendation]]:
        """Return the best and worst scored unseen titles for a fitted user."""
        count = self.count if count is None else int(count)
        scores = self.score_items(user_id)
        return (
            self.top_k_from_scores(scores, count, self._imdb_ids),
            self.bottom_k_from_scores(scores, count, self._imdb_ids),
        )

    def recommend_movies(
        self,
        ratings: pd.DataFrame,
        user_id: int,
    ) -> Tuple[List[str], List[str]]:
        """Cluster ``ratings`` from scratch and return top/bottom titles for one user."""
        self.fit(ratings)
        top, bottom = self.recommend(user_id)
        return [r.title for r in top], [r.title for r in bottom]

    def predict(
        self,
        users: pd.DataFrame,
        ratings: pd.DataFrame,
        k: int = 5,
    ) -> Dict[int, List[Recommendation]]:
        """Produce top-K recommendations for each user.

        Parameters
        ----------
        users : pd.DataFrame
            Users to recommend for (UserID column).
        ratings : pd.DataFrame
            Observed ratings the clustering is fitted on.
        k : int
            Number of recommendations per user.

        Returns
        -------
        dict[int, list[Recommendation]]
            Mapping from UserID to recommendations sorted by score descending.
        """
        self.fit(ratings)

        preds: Dict[int, List[Recommendation]] = {}
        for uid in users["UserID"].astype(int).values:
            preds[int(uid)] = self.top_k_from_scores(self.score_items(int(uid)), k, self._imdb_ids)
        return preds

    @staticmethod
    def _collect_imdb_ids(ratings: pd.DataFrame) -> Dict[str, str]:
        if "IMDBID" not in ratings.columns:
            return {}
        known = ratings[ratings["IMDBID"].fillna("").astype(str) != ""]
        return dict(zip(known["Title"].astype(str), known["IMDBID"].astype(str)))
