"""
Fixtures pytest partagees pour les tests CineStream.

Ce module contient les fixtures communes utilisees dans les tests:
- Stockage local en memoire (IKeyValueStore)
- Settings de test avec chemins temporaires
- Films et categories types
"""

from pathlib import Path
from typing import Any, Optional

import pytest

from cinestream.config import Settings
from cinestream.core.entities.movie import Category
from cinestream.core.ports.storage import IKeyValueStore
from tests.fixtures.tmdb_responses import TMDB_TRENDING_RESPONSE


class InMemoryStorage(IKeyValueStore):
    """
    Stockage clé/valeur en memoire pour les tests.

    Garde les valeurs encodees comme le ferait un vrai stockage et compte
    les ecritures pour verifier la persistance.
    """

    def __init__(self, initial: Optional[dict[str, Any]] = None) -> None:
        self.data: dict[str, Any] = dict(initial or {})
        self.save_count = 0
        self.remove_count = 0

    def load(self, key: str) -> Optional[Any]:
        return self.data.get(key)

    def save(self, key: str, value: Any) -> bool:
        self.save_count += 1
        self.data[key] = [dict(item) for item in value] if isinstance(value, list) else value
        return True

    def remove(self, key: str) -> bool:
        self.remove_count += 1
        self.data.pop(key, None)
        return True


@pytest.fixture
def storage() -> InMemoryStorage:
    """Stockage local vide."""
    return InMemoryStorage()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le stockage local et les logs
    de chaque test.
    """
    return Settings(
        tmdb_api_key="test_api_key",
        storage_dir=tmp_path / "storage",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def inception() -> dict[str, Any]:
    """Resume TMDB d'un film type."""
    return dict(TMDB_TRENDING_RESPONSE["results"][0])


@pytest.fixture
def homepage_categories() -> list[Category]:
    """Categories d'accueil avec une rangee en echec."""
    return [
        Category("trending", "Trending Now", list(TMDB_TRENDING_RESPONSE["results"])),
        Category("popular", "Popular on CineStream", [{"id": 1, "title": "Popular 1"}]),
        Category("top_rated", "Top Rated", [], error=True),
        Category("now_playing", "Now Playing", [{"id": 2, "title": "Now 1"}]),
        Category("upcoming", "Upcoming Movies", [{"id": 3, "title": "Soon 1"}]),
    ]
