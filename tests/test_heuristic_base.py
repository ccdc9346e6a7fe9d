import pytest

from movieclust.models.heuristic_base import HeuristicRanker


SCORES = {"A": 9.0, "B": 3.0, "C": 7.5, "D": 3.0, "E": 1.0, "F": 12.0}


def test_top_sorted_descending():
    # act
    result = HeuristicRanker.top_k_from_scores(SCORES, 3)

    # assert
    assert [r.title for r in result] == ["F", "A", "C"]
    assert [r.score for r in result] == [12.0, 9.0, 7.5]


def test_bottom_sorted_ascending():
    # act
    result = HeuristicRanker.bottom_k_from_scores(SCORES, 3)

    # assert — B and D tie at 3.0, title breaks the tie
    assert [r.title for r in result] == ["E", "B", "D"]


def test_ties_broken_by_title_in_both_directions():
    # arrange
    scores = {"Y": 2.0, "X": 2.0, "Z": 2.0}

    # act
    top = HeuristicRanker.top_k_from_scores(scores, 3)
    bottom = HeuristicRanker.bottom_k_from_scores(scores, 3)

    # assert
    assert [r.title for r in top] == ["X", "Y", "Z"]
    assert [r.title for r in bottom] == ["X", "Y", "Z"]


def test_count_larger_than_map():
    # act
    result = HeuristicRanker.top_k_from_scores({"A": 1.0, "B": 2.0}, 5)

    # assert — no padding
    assert [r.title for r in result] == ["B", "A"]


def test_zero_count():
    assert HeuristicRanker.top_k_from_scores(SCORES, 0) == []
    assert HeuristicRanker.bottom_k_from_scores(SCORES, 0) == []


def test_empty_scores():
    assert HeuristicRanker.top_k_from_scores({}, 5) == []
    assert HeuristicRanker.bottom_k_from_scores({}, 5) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        HeuristicRanker.top_k_from_scores(SCORES, -1)


def test_large_count_covers_whole_map_once():
    # act
    top = HeuristicRanker.top_k_from_scores(SCORES, len(SCORES) + 2)
    bottom = HeuristicRanker.bottom_k_from_scores(SCORES, len(SCORES) + 2)

    # assert
    assert sorted(r.title for r in top) == sorted(SCORES)
    assert sorted(r.title for r in bottom) == sorted(SCORES)


@pytest.mark.parametrize("n", [1, 2, 3])
def test_top_worst_not_below_bottom_best(n):
    # act
    top = HeuristicRanker.top_k_from_scores(SCORES, n)
    bottom = HeuristicRanker.bottom_k_from_scores(SCORES, n)

    # assert
    assert min(r.score for r in top) >= max(r.score for r in bottom)


def test_imdb_ids_attached_when_known():
    # act
    result = HeuristicRanker.top_k_from_scores({"A": 1.0, "B": 2.0}, 2, {"A": "tt01"})

    # assert
    assert [(r.title, r.imdb_id) for r in result] == [("B", ""), ("A", "tt01")]
