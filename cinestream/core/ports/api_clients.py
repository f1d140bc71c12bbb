"""
Interfaces ports pour le client API de films.

Interface abstraite (port) définissant le contrat de l'API de métadonnées.
L'implémentation concrète (TMDBClient) vit dans adapters/api/.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from cinestream.core.entities.movie import Category


class FetchError(Exception):
    """
    Échec d'un appel à l'API externe.

    Levée pour les erreurs de transport (DNS, connexion, timeout) comme pour
    les statuts HTTP non-2xx. Les appelants décident d'isoler l'échec
    (page d'accueil) ou de le propager (fiche détaillée, recherche).

    Attributes:
        endpoint: Chemin de l'API appelé
        status_code: Statut HTTP, ou None pour une erreur de transport
    """

    def __init__(self, endpoint: str, status_code: Optional[int] = None) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        if status_code is None:
            message = f"API Error: {endpoint} unreachable"
        else:
            message = f"API Error: {status_code} on {endpoint}"
        super().__init__(message)


class IMovieAPIClient(ABC):
    """
    Interface de base pour l'API de métadonnées de films.

    Les payloads sont renvoyés tels quels (dictionnaires JSON bruts).
    """

    @abstractmethod
    async def fetch_category(self, name: str, page: int = 1) -> dict[str, Any]:
        """
        Récupère une page d'une liste de films.

        Args :
            name : Nom de catégorie (les noms inconnus retombent sur "popular")
            page : Numéro de page TMDB (1-indexé)
        """
        ...

    @abstractmethod
    async def search(self, query: str, page: int = 1) -> dict[str, Any]:
        """Recherche des films par titre (requête vide -> aucun résultat)."""
        ...

    @abstractmethod
    async def get_movie_details(self, movie_id: int | str) -> dict[str, Any]:
        """Fiche complète d'un film avec `credits` et `videos` imbriqués."""
        ...

    @abstractmethod
    async def get_homepage_movies(self, page: int = 1) -> list[Category]:
        """Catégories de la page d'accueil, chacune isolée des échecs des autres."""
        ...

    @abstractmethod
    async def get_genres(self) -> dict[str, Any]:
        """Liste des genres de films."""
        ...

    @abstractmethod
    async def get_movies_by_genre(self, genre_id: int | str, page: int = 1) -> dict[str, Any]:
        """Films d'un genre (endpoint discover)."""
        ...
