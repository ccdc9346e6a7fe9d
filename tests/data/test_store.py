import numpy as np
import pandas as pd
import pytest

from movieclust.data.store import build_rating_matrix, dedupe_ratings, group_ratings_by_user


@pytest.fixture
def ratings_with_duplicates():
    return pd.DataFrame({
        "UserID": [3, 1, 1, 3, 1],
        "Title":  ["X", "B", "A", "X", "B"],
        "Rating": [1.0, 2.0, 4.0, 5.0, 3.5],
    })


def test_group_by_user_last_rating_wins(ratings_with_duplicates):
    # act
    profiles = group_ratings_by_user(ratings_with_duplicates)

    # assert
    assert profiles == {1: {"B": 3.5, "A": 4.0}, 3: {"X": 5.0}}
    assert list(profiles) == [1, 3]


def test_group_by_user_empty(empty_ratings):
    assert group_ratings_by_user(empty_ratings) == {}


def test_dedupe_keeps_last_observation(ratings_with_duplicates):
    # act
    result = dedupe_ratings(ratings_with_duplicates)

    # assert
    assert len(result) == 3
    assert result.set_index(["UserID", "Title"])["Rating"].to_dict() == {
        (1, "A"): 4.0,
        (3, "X"): 5.0,
        (1, "B"): 3.5,
    }


def test_rating_matrix_is_zero_filled_and_sorted(ratings_with_duplicates):
    # act
    matrix = build_rating_matrix(ratings_with_duplicates)

    # assert
    assert matrix.user_ids.tolist() == [1, 3]
    assert matrix.titles.tolist() == ["A", "B", "X"]
    np.testing.assert_allclose(matrix.values, [[4.0, 3.5, 0.0], [0.0, 0.0, 5.0]])
    np.testing.assert_allclose(matrix.row(3), [0.0, 0.0, 5.0])
    assert matrix.rows([3, 1]).shape == (2, 3)


def test_missing_columns_rejected():
    with pytest.raises(ValueError, match="Rating"):
        group_ratings_by_user(pd.DataFrame({"UserID": [1], "Title": ["A"]}))


def test_mixed_type_titles_dedupe_to_one_rating():
    # arrange — title 7 and "7" name the same movie
    ratings = pd.DataFrame({
        "UserID": [1, 1],
        "Title": [7, "7"],
        "Rating": [2.0, 3.0],
    })

    # act
    matrix = build_rating_matrix(ratings)
    profiles = group_ratings_by_user(dedupe_ratings(ratings))

    # assert
    np.testing.assert_allclose(matrix.values, [[3.0]])
    assert profiles == {1: {"7": 3.0}}
