"""CSV loaders for rating records and title -> IMDb id mappings.

Both files carry a header row, which is skipped. Rows may have differing
field counts; a row too short to use is logged and skipped, never fatal.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

_INTEGER = r"[+-]?\d+"
_INT64 = np.iinfo(np.int64)


def _read_records(path: Path | str) -> List[List[str]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"could not open file: {path}")

    with path.open("r", newline="", encoding="utf-8") as handle:
        return list(csv.reader(handle))


def _fits_int64(text: str) -> bool:
    return bool(_INT64.min <= int(text) <= _INT64.max)


def _empty_ratings() -> pd.DataFrame:
    return pd.DataFrame({
        "UserID": pd.Series(dtype="int64"),
        "Title": pd.Series(dtype="object"),
        "Rating": pd.Series(dtype="float64"),
        "IMDBID": pd.Series(dtype="object"),
    })


def load_ratings(path: Path | str) -> pd.DataFrame:
    """Load ``user id, title, rating`` records.

    Parameters
    ----------
    path : Path | str
        CSV file with a header row. Fields past the third are ignored.

    Returns
    -------
    pd.DataFrame
        Columns UserID (int), Title (str), Rating (float) and IMDBID (empty).
        A rating that does not parse as a number becomes 0.0. Rows with fewer
        than three fields or a non-integer user id are dropped.
    """
    records = []
    for line_no, record in enumerate(_read_records(path), start=1):
        if line_no == 1 or not record:
            continue
        if len(record) < 3:
            logger.warning(
                "Invalid record at line %d: expected at least 3 fields, got %d",
                line_no,
                len(record),
            )
            continue
        records.append((line_no, record[0], record[1], record[2]))

    if not records:
        return _empty_ratings()

    raw = pd.DataFrame(records, columns=["Line", "UserID", "Title", "Rating"])

    valid_user = raw["UserID"].str.fullmatch(_INTEGER).fillna(False).astype(bool)
    valid_user &= raw["UserID"].where(valid_user, "0").map(_fits_int64)
    for line_no, user_id in raw.loc[~valid_user, ["Line", "UserID"]].itertuples(index=False):
        logger.warning("Invalid UserID at line %d: %r", line_no, user_id)
    raw = raw[valid_user]

    ratings = pd.DataFrame({
        "UserID": raw["UserID"].astype("int64"),
        "Title": raw["Title"].astype(str),
        "Rating": pd.to_numeric(raw["Rating"], errors="coerce").fillna(0.0).astype("float64"),
        "IMDBID": "",
    }).reset_index(drop=True)

    logger.info("Loaded %d ratings from %s (%d users)", len(ratings), path, ratings["UserID"].nunique())
    return ratings


def load_imdb_ids(path: Path | str) -> Dict[str, str]:
    """Load a ``title, imdb id`` mapping; later rows win for repeated titles."""
    imdb_ids: Dict[str, str] = {}
    for line_no, record in enumerate(_read_records(path), start=1):
        if line_no == 1 or not record:
            continue
        if len(record) < 2:
            logger.warning(
                "Invalid record at line %d: expected at least 2 fields, got %d",
                line_no,
                len(record),
            )
            continue
        imdb_ids[record[0]] = record[1]

    logger.info("Loaded %d IMDb ids from %s", len(imdb_ids), path)
    return imdb_ids


def attach_imdb_ids(ratings: pd.DataFrame, imdb_ids: Dict[str, str]) -> pd.DataFrame:
    """Return a copy of ``ratings`` with IMDBID filled in where the title is mapped."""
    work = ratings.copy()
    current = work["IMDBID"] if "IMDBID" in work.columns else pd.Series("", index=work.index)
    mapped = work["Title"].map(imdb_ids)
    work["IMDBID"] = mapped.where(mapped.notna(), current.fillna("")).astype(str)
    return work
