from .distance import distances_to, profile_distance
from .kclusters import (
    EMPTY_CENTROID,
    N_ITERATIONS,
    assign_to_clusters,
    cluster_users,
    find_cluster,
    initialize_centroids,
    update_centroids,
)
from .ranker import ClusterRanker, calculate_recommendations

__all__ = [
    "ClusterRanker",
    "EMPTY_CENTROID",
    "N_ITERATIONS",
    "assign_to_clusters",
    "calculate_recommendations",
    "cluster_users",
    "distances_to",
    "find_cluster",
    "initialize_centroids",
    "profile_distance",
    "update_centroids",
]
