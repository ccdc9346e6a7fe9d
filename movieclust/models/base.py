from abc import ABC, abstractmethod
from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True, kw_only=True)
class Recommendation:
    title: str
    score: float
    imdb_id: str = ""


class RecommenderModel(ABC):

    @abstractmethod
    def predict(
        self,
        users: pd.DataFrame,
        ratings: pd.DataFrame,
        k: int = 5,
    ) -> dict[int, list[Recommendation]]:
        """Produce top-K recommendations for each user.

        Parameters
        ----------
        users : pd.DataFrame
            Users to recommend for (UserID column).
        ratings : pd.DataFrame
            Observed ratings (UserID, Title, Rating, optionally IMDBID).
        k : int
            Number of recommendations per user.

        Returns
        -------
        dict[int, list[Recommendation]]
            Mapping from UserID to a list of Recommendation objects sorted by
            score descending (length up to k).
        """
        ...
