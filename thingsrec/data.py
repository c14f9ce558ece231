from __future__ import annotations

from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from .model import Rating


def validate_ratings_frame(
    df: pd.DataFrame,
    *,
    person_col: str = "person",
    thing_col: str = "thing",
    score_col: str = "score",
) -> None:
    """Validate that a ratings table has usable person/thing/score columns.

    Duplicate (person, thing) rows are allowed; the recommender resolves them
    by taking the first match.
    """
    cols = (person_col, thing_col, score_col)
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"ratings missing required columns: {missing}")

    nulls = [c for c in cols if df[c].isna().any()]
    if nulls:
        raise ValueError(f"ratings contain null values in columns: {nulls}")

    scores = pd.to_numeric(df[score_col], errors="coerce")
    if scores.isna().any():
        bad = sorted(set(df.loc[scores.isna(), score_col].astype(str).tolist()))
        raise ValueError(f"ratings column {score_col!r} has non-numeric values: {bad}")

    if not np.isfinite(scores.to_numpy(dtype=np.float64)).all():
        raise ValueError(f"ratings column {score_col!r} has non-finite values")


def ratings_from_frame(
    df: pd.DataFrame,
    *,
    person_col: str = "person",
    thing_col: str = "thing",
    score_col: str = "score",
) -> List[Rating]:
    """Convert a ratings DataFrame to `Rating` records, preserving row order."""
    validate_ratings_frame(df, person_col=person_col, thing_col=thing_col, score_col=score_col)

    persons = df[person_col].astype(str).tolist()
    things = df[thing_col].astype(str).tolist()
    scores = pd.to_numeric(df[score_col]).astype("float64").tolist()
    return [Rating(person=p, thing=t, score=float(s)) for p, t, s in zip(persons, things, scores)]


def load_ratings_csv(
    path: Path,
    *,
    person_col: str = "person",
    thing_col: str = "thing",
    score_col: str = "score",
) -> List[Rating]:
    """Read a ratings CSV; ids are read as strings so leading zeros survive."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"ratings CSV not found: {path}")

    df = pd.read_csv(path, dtype={person_col: "string", thing_col: "string"})
    return ratings_from_frame(df, person_col=person_col, thing_col=thing_col, score_col=score_col)
