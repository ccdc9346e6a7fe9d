from __future__ import annotations

from typing import Mapping

import numpy as np


def profile_distance(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Euclidean distance over the union of rated titles.

    A title rated by only one side counts as a 0.0 rating on the other side,
    so it contributes the square of the known rating.
    """
    total = 0.0
    for title in sorted(a.keys() | b.keys()):
        diff = a.get(title, 0.0) - b.get(title, 0.0)
        total += diff * diff
    return float(np.sqrt(total))


def distances_to(rows: np.ndarray, centroid_row: np.ndarray) -> np.ndarray:
    """Distance from every row of a zero-filled rating matrix to one centroid row.

    Equal to ``profile_distance`` of the underlying profiles: titles neither
    side rated are 0.0 on both sides and add nothing.
    """
    return np.linalg.norm(rows - centroid_row, axis=1)
