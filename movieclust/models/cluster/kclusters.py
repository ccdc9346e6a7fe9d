"""Nearest-centroid user clustering over a zero-filled rating matrix.

Centroids are existing users, not mean profiles: after every assignment the
first member of each cluster becomes its next centroid, and a cluster that
lost all its members gets the ``EMPTY_CENTROID`` sentinel. The loop always
runs ``N_ITERATIONS`` rounds, even once assignments stop changing.

Ordering is explicit so that a run is reproducible:

- users are processed in the order given (ascending UserID when they come
  from ``RatingMatrix.user_ids``), so cluster members stay in that order;
- a user equidistant from several centroids joins the lowest centroid index.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import numpy as np

from movieclust.data.store import RatingMatrix
from movieclust.models.cluster.distance import distances_to

logger = logging.getLogger(__name__)

N_ITERATIONS = 10
EMPTY_CENTROID = -1


def initialize_centroids(users: Sequence[int], k: int) -> List[int]:
    """Seed centroid ``i`` with ``users[i % len(users)]``.

    When ``k`` exceeds the number of users the seeds repeat.
    """
    if k <= 0:
        raise ValueError(f"Cluster count must be positive, got {k}")
    if len(users) == 0:
        raise ValueError("Cannot cluster an empty user population")
    return [int(users[i % len(users)]) for i in range(k)]


def assign_to_clusters(
    users: Sequence[int],
    centroids: Sequence[int],
    matrix: RatingMatrix,
) -> Dict[int, List[int]]:
    """Assign every user to its nearest centroid index.

    Returns an entry for each centroid index, empty when nobody joined it.
    """
    if all(c == EMPTY_CENTROID for c in centroids):
        raise ValueError("No usable centroid to assign users to")

    user_rows = matrix.rows(users)
    distances = np.full((len(users), len(centroids)), np.inf, dtype=np.float64)
    for j, centroid in enumerate(centroids):
        if centroid == EMPTY_CENTROID:
            continue
        distances[:, j] = distances_to(user_rows, matrix.row(centroid))

    # argmin picks the first minimum, i.e. the lowest centroid index on ties
    nearest = np.argmin(distances, axis=1)

    clusters: Dict[int, List[int]] = {j: [] for j in range(len(centroids))}
    for user, j in zip(users, nearest.tolist()):
        clusters[int(j)].append(int(user))
    return clusters


def update_centroids(clusters: Dict[int, List[int]], k: int) -> List[int]:
    """Pick the first member of each cluster as its next centroid."""
    return [
        clusters[j][0] if clusters.get(j) else EMPTY_CENTROID
        for j in range(k)
    ]


def cluster_users(
    users: Sequence[int],
    k: int,
    matrix: RatingMatrix,
) -> Dict[int, List[int]]:
    """Run the fixed-round assign/update loop and return the final membership."""
    centroids = initialize_centroids(users, k)

    clusters: Dict[int, List[int]] = {}
    for iteration in range(N_ITERATIONS):
        clusters = assign_to_clusters(users, centroids, matrix)
        centroids = update_centroids(clusters, k)
        logger.debug(
            "iteration=%d sizes=%s centroids=%s",
            iteration + 1,
            [len(clusters[j]) for j in range(k)],
            centroids,
        )

    return clusters


def find_cluster(user_id: int, clusters: Dict[int, List[int]]) -> int | None:
    """Return the lowest cluster index containing ``user_id``, if any."""
    for j in sorted(clusters):
        if int(user_id) in clusters[j]:
            return j
    return None
