from movieclust.models.base import Recommendation, RecommenderModel
from movieclust.models.cluster import ClusterRanker
from movieclust.models.heuristic_base import HeuristicRanker

__all__ = [
    "Recommendation",
    "RecommenderModel",
    "HeuristicRanker",
    "ClusterRanker",
]
