from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import thingsrec` works without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from thingsrec.model import Rating  # noqa: E402


@pytest.fixture()
def alice_bob() -> list[Rating]:
    return [
        Rating("Alice", "Pizza", 5.0),
        Rating("Alice", "Sushi", 3.0),
        Rating("Bob", "Pizza", 4.0),
        Rating("Bob", "Sushi", 5.0),
        Rating("Bob", "Tacos", 2.0),
    ]


@pytest.fixture()
def three_people(alice_bob: list[Rating]) -> list[Rating]:
    return alice_bob + [
        Rating("Carol", "Pizza", 5.0),
        Rating("Carol", "Sushi", 2.0),
        Rating("Carol", "Ramen", 4.0),
        Rating("Carol", "Tacos", 1.0),
    ]
