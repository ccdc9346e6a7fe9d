from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np
import pandas as pd
from scipy import sparse

RATING_COLUMNS = ["UserID", "Title", "Rating"]


@dataclass(frozen=True, kw_only=True)
class RatingMatrix:
    """Dense user x title rating matrix; a missing rating is 0.0.

    Rows follow ``user_ids`` (ascending), columns follow ``titles`` (ascending).
    """

    user_ids: np.ndarray
    titles: np.ndarray
    values: np.ndarray
    row_of: Dict[int, int]

    def rows(self, user_ids) -> np.ndarray:
        return self.values[[self.row_of[int(uid)] for uid in user_ids]]

    def row(self, user_id: int) -> np.ndarray:
        return self.values[self.row_of[int(user_id)]]


def _check_columns(ratings: pd.DataFrame) -> None:
    missing = set(RATING_COLUMNS) - set(ratings.columns)
    if missing:
        raise ValueError(f"ratings missing required columns: {sorted(missing)}")


def dedupe_ratings(ratings: pd.DataFrame) -> pd.DataFrame:
    """Keep the last observation for every (UserID, Title) pair."""
    _check_columns(ratings)
    work = ratings.copy()
    work["UserID"] = work["UserID"].astype("int64")
    work["Title"] = work["Title"].astype(str)
    return work.drop_duplicates(subset=["UserID", "Title"], keep="last").reset_index(drop=True)


def group_ratings_by_user(ratings: pd.DataFrame) -> Dict[int, Dict[str, float]]:
    """Build one title -> rating profile per user, keyed by ascending UserID.

    Later observations for the same (user, title) overwrite earlier ones.
    """
    _check_columns(ratings)
    profiles: Dict[int, Dict[str, float]] = {}
    for row in ratings[RATING_COLUMNS].itertuples(index=False):
        profiles.setdefault(int(row.UserID), {})[str(row.Title)] = float(row.Rating)
    return {uid: profiles[uid] for uid in sorted(profiles)}


def build_rating_matrix(ratings: pd.DataFrame) -> RatingMatrix:
    work = dedupe_ratings(ratings)

    user_ids = np.sort(work["UserID"].astype(np.int64).unique())
    titles = np.sort(work["Title"].astype(str).unique())

    row_of = {int(uid): i for i, uid in enumerate(user_ids.tolist())}
    col_of = {title: j for j, title in enumerate(titles.tolist())}

    rows = work["UserID"].astype(np.int64).map(row_of).to_numpy(dtype=np.int64)
    cols = work["Title"].astype(str).map(col_of).to_numpy(dtype=np.int64)
    data = work["Rating"].to_numpy(dtype=np.float64)

    # dedupe normalises id and title types, so (row, col) pairs are unique and csr never sums
    values = sparse.csr_matrix(
        (data, (rows, cols)),
        shape=(len(user_ids), len(titles)),
        dtype=np.float64,
    ).toarray()

    return RatingMatrix(user_ids=user_ids, titles=titles, values=values, row_of=row_of)
