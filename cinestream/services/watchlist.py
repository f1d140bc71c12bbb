"""
Service de watchlist personnelle.

La watchlist est une liste ordonnée (ordre d'insertion) de projections de films,
unique par identifiant, persistée intégralement après chaque modification.
"""

from typing import Any

from loguru import logger

from cinestream.core.entities.movie import watchlist_projection
from cinestream.core.ports.storage import IKeyValueStore
from cinestream.utils.constants import WATCHLIST_KEY


def _same_id(left: Any, right: Any) -> bool:
    """Compare deux identifiants TMDB (int ou str selon la provenance)."""
    return str(left) == str(right)


class WatchlistService:
    """
    Watchlist persistée dans le stockage local.

    Example:
        watchlist = WatchlistService(storage)
        watchlist.toggle({"id": 27205, "title": "Inception", ...})  # True (ajouté)
        watchlist.toggle({"id": 27205, "title": "Inception", ...})  # False (retiré)
    """

    def __init__(self, storage: IKeyValueStore, key: str = WATCHLIST_KEY) -> None:
        self._storage = storage
        self._key = key
        self._entries: list[dict[str, Any]] = []
        self.load()

    def load(self) -> list[dict[str, Any]]:
        """
        Lit la watchlist persistée et remplace l'état en mémoire.

        Une donnée absente, corrompue ou qui n'est pas une liste d'objets
        donne une liste vide (aucune erreur remontée).
        """
        data = self._storage.load(self._key)
        if data is None:
            data = []
        elif not isinstance(data, list):
            logger.warning(f"Watchlist illisible ({type(data).__name__}), ignorée")
            data = []
        self._entries = [entry for entry in data if isinstance(entry, dict) and "id" in entry]
        return list(self._entries)

    def _persist(self) -> None:
        self._storage.save(self._key, self._entries)

    @property
    def entries(self) -> list[dict[str, Any]]:
        """Copie des entrées dans l'ordre d'insertion."""
        return list(self._entries)

    def contains(self, movie_id: Any) -> bool:
        """Vérifie si un film est dans la watchlist."""
        return any(_same_id(entry["id"], movie_id) for entry in self._entries)

    def toggle(self, movie: dict[str, Any]) -> bool:
        """
        Ajoute le film s'il est absent, le retire sinon.

        Persiste la liste complète après la modification.

        Returns:
            True si le film a été ajouté, False s'il a été retiré
        """
        movie_id = movie["id"]
        remaining = [entry for entry in self._entries if not _same_id(entry["id"], movie_id)]
        added = len(remaining) == len(self._entries)
        if added:
            self._entries = [*self._entries, watchlist_projection(movie)]
            logger.info(f"Ajouté à la watchlist: {movie.get('title')}")
        else:
            self._entries = remaining
            logger.info(f"Retiré de la watchlist: {movie.get('title')}")
        self._persist()
        return added

    def remove(self, movie_id: Any) -> None:
        """Retire un film par identifiant et persiste."""
        self._entries = [entry for entry in self._entries if not _same_id(entry["id"], movie_id)]
        self._persist()

    def clear(self) -> None:
        """
        Vide la watchlist et supprime la clé persistée.

        La confirmation préalable relève de la couche présentation.
        """
        self._entries = []
        self._storage.remove(self._key)
        logger.info("Watchlist vidée")

    def __len__(self) -> int:
        return len(self._entries)
