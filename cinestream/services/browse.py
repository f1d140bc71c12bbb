"""
Service de navigation de la page d'accueil.

Orchestre le démarrage (chargement des catégories), le choix du film mis en
avant dans la bannière, la pagination infinie et les actions "bande-annonce
au hasard" / "film au hasard" de la bannière.
"""

import random
from typing import Any, Optional

from loguru import logger

from cinestream.adapters.api.tmdb_client import resolve_trailer_key
from cinestream.core.entities.movie import Category
from cinestream.core.ports.api_clients import FetchError, IMovieAPIClient
from cinestream.utils.constants import RANDOM_TRAILER_CANDIDATES


class BrowseService:
    """
    État de navigation de la page d'accueil pour la session.

    Attributes:
        current_page: Dernière page chargée pour les catégories d'accueil
        is_loading: True pendant un chargement de page supplémentaire

    Example:
        browse = BrowseService(client)
        await browse.boot()
        hero = browse.hero()
        new_rows = await browse.load_more()
    """

    def __init__(self, client: IMovieAPIClient, rng: Optional[random.Random] = None) -> None:
        self._client = client
        self._rng = rng or random.Random()
        self._categories: list[Category] = []
        self.current_page = 1
        self.is_loading = False

    @property
    def categories(self) -> list[Category]:
        """Catégories chargées (toutes pages cumulées)."""
        return list(self._categories)

    @property
    def booted(self) -> bool:
        return bool(self._categories)

    async def boot(self) -> list[Category]:
        """Charge la première page des catégories d'accueil."""
        logger.info("Chargement des catégories d'accueil")
        self.current_page = 1
        self._categories = await self._client.get_homepage_movies(self.current_page)
        failed = [category.id for category in self._categories if category.error]
        if failed:
            logger.warning(f"Catégories en échec: {', '.join(failed)}")
        return self.categories

    def trending_movies(self) -> list[dict[str, Any]]:
        """Films de la catégorie "trending" (vide si absente ou en échec)."""
        for category in self._categories:
            if category.id == "trending":
                return list(category.movies)
        return []

    def hero(self) -> Optional[dict[str, Any]]:
        """Premier film tendance, mis en avant dans la bannière."""
        trending = self.trending_movies()
        return trending[0] if trending else None

    def find_movie(self, movie_id: Any) -> Optional[dict[str, Any]]:
        """Cherche un film déjà chargé dans les catégories."""
        for category in self._categories:
            for movie in category.movies:
                if str(movie.get("id")) == str(movie_id):
                    return movie
        return None

    async def load_more(self) -> list[Category]:
        """
        Charge la page suivante de toutes les catégories d'accueil.

        Les nouveaux films sont ajoutés à la suite des catégories existantes
        (les listes sont remplacées, jamais modifiées sur place).
        Un appel pendant un chargement en cours ne fait rien.

        Returns:
            Les catégories de la nouvelle page (vide si un chargement est en cours)
        """
        if self.is_loading:
            return []
        self.is_loading = True
        self.current_page += 1
        try:
            new_categories = await self._client.get_homepage_movies(self.current_page)
            by_id = {category.id: category for category in self._categories}
            for new_category in new_categories:
                existing = by_id.get(new_category.id)
                if existing is not None and new_category.movies:
                    existing.movies = [*existing.movies, *new_category.movies]
            logger.debug(f"Page {self.current_page} des catégories chargée")
            return new_categories
        finally:
            self.is_loading = False

    async def random_trailer_key(self) -> Optional[str]:
        """
        Cherche une bande-annonce parmi les premiers films tendance.

        Les films dont la fiche ne se charge pas sont ignorés.

        Returns:
            La première clé de bande-annonce trouvée, ou None
        """
        for movie in self.trending_movies()[:RANDOM_TRAILER_CANDIDATES]:
            try:
                details = await self._client.get_movie_details(movie["id"])
            except FetchError as e:
                logger.warning(f"Fiche indisponible pour {movie.get('id')}: {e}")
                continue
            key = resolve_trailer_key(details.get("videos"))
            if key:
                return key
        return None

    def random_movie_id(self) -> Optional[Any]:
        """Identifiant d'un film tendance tiré au hasard (None si aucun)."""
        trending = self.trending_movies()
        if not trending:
            return None
        return self._rng.choice(trending)["id"]
