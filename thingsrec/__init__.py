"""Similarity-based "things" recommendations from (person, thing, score) ratings.

Core idea:
- Measure how alike two people are by Euclidean distance over the things both rated
- Pick the closest other person as the neighbour
- Recommend the neighbour's best-scored thing the target has not rated yet
"""
from __future__ import annotations

from .model import Rating, Recommender, SimilarPerson
from .recommender import ThingsRecommender

__all__ = ["Rating", "Recommender", "SimilarPerson", "ThingsRecommender"]
