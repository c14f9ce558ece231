from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from .model import Rating, SimilarPerson


logger = logging.getLogger(__name__)


class ThingsRecommender:
    """Nearest-neighbour recommender over an immutable collection of ratings.

    Every query re-scans the ratings snapshot taken at construction; there is no
    index or cache. Persons and things are enumerated in lexicographic order so
    that ties in the neighbour search and in the final pick are reproducible.
    """

    def __init__(self, ratings: Iterable[Rating]) -> None:
        snapshot = tuple(ratings)
        for r in snapshot:
            if not isinstance(r, Rating):
                raise TypeError(f"expected Rating, got {type(r).__name__}")
        self._ratings: tuple[Rating, ...] = snapshot

        logger.info(
            "ThingsRecommender loaded: persons=%d things=%d ratings=%d",
            len({r.person for r in snapshot}),
            len({r.thing for r in snapshot}),
            len(snapshot),
        )

    def __len__(self) -> int:
        return len(self._ratings)

    # ----- read-only queries -----

    def persons(self) -> list[str]:
        return sorted({r.person for r in self._ratings})

    def has_person(self, person: str) -> bool:
        return any(r.person == person for r in self._ratings)

    def ratings_of(self, person: Optional[str]) -> list[Rating]:
        return [r for r in self._ratings if r.person == person]

    def things(self, person: Optional[str]) -> set[str]:
        return {r.thing for r in self._ratings if r.person == person}

    def score(self, person: str, thing: str) -> Optional[float]:
        """Score `person` gave `thing`; the first match wins for duplicated pairs."""
        for r in self._ratings:
            if r.person == person and r.thing == thing:
                return float(r.score)
        return None

    # ----- similarity -----

    def _shared_things(self, person_a: str, person_b: str) -> list[str]:
        return sorted(self.things(person_a) & self.things(person_b))

    def distance(self, person_a: str, person_b: str) -> float:
        """Euclidean distance between two people over the things both rated.

        People with nothing in common (including unknown people) are at distance
        0.0, the same as identical tastes.
        """
        shared = self._shared_things(person_a, person_b)
        if not shared:
            return 0.0

        a = np.asarray([self.score(person_a, t) for t in shared], dtype=np.float64)
        b = np.asarray([self.score(person_b, t) for t in shared], dtype=np.float64)
        return float(np.sqrt(np.sum(np.square(a - b))))

    def closest_person(self, person: str) -> Optional[str]:
        closest: Optional[str] = None
        best = 0.0
        for other in self.persons():
            if other == person:
                continue
            d = self.distance(person, other)
            # Strictly smaller: ties keep the earlier (lexicographically smaller) person.
            if closest is None or d < best:
                closest, best = other, d

        if closest is None:
            logger.debug("No other person to compare %r with", person)
        else:
            logger.debug("Closest person to %r is %r (distance=%.4f)", person, closest, best)
        return closest

    def similar_persons(self, person: str, *, top_n: int = 10) -> list[SimilarPerson]:
        """Other people ranked by ascending distance to `person`.

        Ties are ordered by person id, so the head of the list is always the
        result of `closest_person`.
        """
        if int(top_n) < 1:
            raise ValueError(f"top_n must be >= 1, got {top_n}")

        mine = self.things(person)
        out: list[SimilarPerson] = []
        for other in self.persons():
            if other == person:
                continue
            out.append(
                SimilarPerson(
                    person=other,
                    distance=self.distance(person, other),
                    shared=len(mine & self.things(other)),
                )
            )
        out.sort(key=lambda s: (s.distance, s.person))
        return out[: int(top_n)]

    # ----- recommendation -----

    def recommend(self, person: str) -> Optional[str]:
        """Best-scored thing of the closest person that `person` has not rated.

        Returns None when there is no other person, or when the neighbour has
        rated nothing new. Equal scores resolve to the smallest thing id.
        """
        neighbour = self.closest_person(person)
        if neighbour is None:
            return None

        seen = self.things(person)
        candidates = sorted(
            (r for r in self.ratings_of(neighbour) if r.thing not in seen),
            key=lambda r: r.thing,
        )

        best: Optional[Rating] = None
        for r in candidates:
            if best is None or r.score > best.score:
                best = r

        if best is None:
            logger.debug("Neighbour %r has nothing new for %r", neighbour, person)
            return None

        logger.debug("Recommending %r to %r via %r (score=%.2f)", best.thing, person, neighbour, best.score)
        return best.thing
