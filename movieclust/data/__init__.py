from .loaders import attach_imdb_ids, load_imdb_ids, load_ratings
from .store import RatingMatrix, build_rating_matrix, dedupe_ratings, group_ratings_by_user

__all__ = [
    "RatingMatrix",
    "attach_imdb_ids",
    "build_rating_matrix",
    "dedupe_ratings",
    "group_ratings_by_user",
    "load_imdb_ids",
    "load_ratings",
]
