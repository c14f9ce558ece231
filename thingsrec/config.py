from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml


DEFAULT_CONFIG_NAME = "config.yaml"


@dataclass(frozen=True)
class ThingsRecConfig:
    ratings_csv: Optional[Path] = None
    person_col: str = "person"
    thing_col: str = "thing"
    score_col: str = "score"
    top_similar: int = 10
    log_level: str = "INFO"


def _section(doc: dict, name: str) -> dict:
    raw = doc.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"config section {name!r} must be a mapping")
    return raw


def config_from_mapping(doc: dict[str, Any], *, base_dir: Optional[Path] = None) -> ThingsRecConfig:
    """Build a config from a parsed YAML mapping.

    Layout:
        ratings: {csv, person_col, thing_col, score_col}
        recommender: {top_similar}
        logging: {level}
    Relative `ratings.csv` paths resolve against `base_dir`.
    """
    if not isinstance(doc, dict):
        raise ValueError("config.yaml must be a mapping")

    ratings_cfg = _section(doc, "ratings")
    rec_cfg = _section(doc, "recommender")
    log_cfg = _section(doc, "logging")

    csv_path: Optional[Path] = None
    if ratings_cfg.get("csv"):
        csv_path = Path(str(ratings_cfg["csv"]))
        if not csv_path.is_absolute() and base_dir is not None:
            csv_path = (base_dir / csv_path).resolve()

    top_similar = int(rec_cfg.get("top_similar", 10))
    if top_similar < 1:
        raise ValueError(f"recommender.top_similar must be >= 1, got {top_similar}")

    return ThingsRecConfig(
        ratings_csv=csv_path,
        person_col=str(ratings_cfg.get("person_col", "person")),
        thing_col=str(ratings_cfg.get("thing_col", "thing")),
        score_col=str(ratings_cfg.get("score_col", "score")),
        top_similar=top_similar,
        log_level=str(log_cfg.get("level", "INFO")).upper(),
    )


def load_config(config_path: Optional[Path] = None) -> ThingsRecConfig:
    """Load `config.yaml`.

    An explicit path must exist. Without one, `config.yaml` in the current
    directory is used when present, otherwise defaults.
    """
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.is_file():
            return ThingsRecConfig()
        config_path = candidate

    config_path = Path(config_path).resolve()
    if not config_path.is_file():
        raise FileNotFoundError(f"config file not found: {config_path}")

    doc = yaml.safe_load(config_path.read_text())
    if doc is None:
        doc = {}
    return config_from_mapping(doc, base_dir=config_path.parent)


def with_overrides(cfg: ThingsRecConfig, **overrides: Any) -> ThingsRecConfig:
    """Return `cfg` with every non-None override applied (CLI flags win over YAML)."""
    known = {f.name for f in fields(cfg)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ValueError(f"unknown config fields: {unknown}")
    return replace(cfg, **{k: v for k, v in overrides.items() if v is not None})
