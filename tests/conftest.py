import pandas as pd
import pytest


@pytest.fixture
def three_user_ratings():
    """U1={A:5,B:3}, U2={A:4,B:2,C:5}, U3={C:1,D:5}."""
    return pd.DataFrame({
        "UserID": [1, 1, 2, 2, 2, 3, 3],
        "Title":  ["A", "B", "A", "B", "C", "C", "D"],
        "Rating": [5.0, 3.0, 4.0, 2.0, 5.0, 1.0, 5.0],
    })


@pytest.fixture
def empty_ratings():
    return pd.DataFrame({
        "UserID": pd.Series(dtype="int64"),
        "Title": pd.Series(dtype="object"),
        "Rating": pd.Series(dtype="float64"),
    })
