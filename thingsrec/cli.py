"""Command-line entrypoint: nearest-neighbour recommendation for one person.

Example:
    python -m thingsrec.cli --person Alice --ratings data/ratings.csv
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from .config import load_config, with_overrides
from .data import load_ratings_csv
from .recommender import ThingsRecommender
from .utils import setup_logging


logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Recommend a thing from the most similar person's ratings")
    p.add_argument("--person", type=str, required=True, help="Person to recommend for")
    p.add_argument("--ratings", type=Path, default=None, help="Ratings CSV (person, thing, score)")
    p.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: ./config.yaml if present)")
    p.add_argument("--top-similar", type=int, default=None, help="How many similar persons to show")
    p.add_argument("--log-level", type=str, default=None, help="DEBUG/INFO/WARNING/...")
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)
    cfg = with_overrides(
        load_config(args.config),
        ratings_csv=args.ratings,
        top_similar=args.top_similar,
        log_level=args.log_level,
    )
    setup_logging(cfg.log_level)

    if cfg.ratings_csv is None:
        raise ValueError("No ratings CSV given (use --ratings or ratings.csv in config.yaml)")

    logger.info("Loading ratings from %s", cfg.ratings_csv)
    ratings = load_ratings_csv(
        cfg.ratings_csv,
        person_col=cfg.person_col,
        thing_col=cfg.thing_col,
        score_col=cfg.score_col,
    )
    rec = ThingsRecommender(ratings)

    if not rec.has_person(args.person):
        logger.warning("Person %r has no ratings; treating as a person with nothing rated", args.person)

    closest = rec.closest_person(args.person)
    thing = rec.recommend(args.person)
    sims = rec.similar_persons(args.person, top_n=int(cfg.top_similar))

    print("\n=== Closest Person ===")
    print(closest if closest is not None else "No other person found.")

    print("\n=== Recommendation ===")
    print(thing if thing is not None else "No recommendation found.")

    print("\n=== Similar Persons ===")
    if sims:
        df_s = pd.DataFrame([s.__dict__ for s in sims])
        print(df_s.to_string(index=False))
    else:
        print("No similar persons found.")


if __name__ == "__main__":
    main()
