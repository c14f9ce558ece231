from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class Rating:
    person: str
    thing: str
    score: float


@dataclass(frozen=True)
class SimilarPerson:
    person: str
    distance: float
    shared: int


class Recommender(Protocol):
    """Capability contract shared by recommenders over a ratings dataset."""

    def distance(self, person_a: str, person_b: str) -> float:
        ...

    def closest_person(self, person: str) -> Optional[str]:
        ...

    def recommend(self, person: str) -> Optional[str]:
        ...
