"""
Client TMDB pour les listes, la recherche et les fiches de films.

Implémente l'interface IMovieAPIClient pour TMDB (The Movie Database).
Toutes les requêtes passent par le cache mémoire (fenêtre de 5 minutes) ;
les appels agrégés sont lancés en parallèle avec asyncio.gather.

Usage:
    cache = RequestCache()
    client = TMDBClient(api_key="your_key", cache=cache)
    categories = await client.get_homepage_movies()
    movie = await client.get_movie_details(27205)
    trailer = resolve_trailer_key(movie["videos"])
    await client.close()
"""

import asyncio
from typing import Any, Iterable, Optional

import httpx
from loguru import logger

from cinestream.adapters.api.cache import RequestCache
from cinestream.adapters.api.transport import clean_params, fetch_json
from cinestream.core.entities.movie import (
    HOMEPAGE_CATEGORIES,
    Category,
    CategorySpec,
    resolve_category,
)
from cinestream.core.ports.api_clients import FetchError, IMovieAPIClient
from cinestream.utils.constants import (
    CATEGORY_ENDPOINTS,
    DEFAULT_CATEGORY,
    DEFAULT_IMAGE_SIZE,
    PLACEHOLDER_IMAGE_URL,
    TMDB_BASE_URL,
    TMDB_IMAGE_BASE_URL,
    VIDEO_SITE,
    YOUTUBE_EMBED_URL,
)


def image_url(
    path: Optional[str],
    size: str = DEFAULT_IMAGE_SIZE,
    base_url: str = TMDB_IMAGE_BASE_URL,
) -> str:
    """
    Construit l'URL CDN d'une image TMDB.

    Args:
        path: Chemin TMDB de l'image (ex: "/abc.jpg"), ou None
        size: Taille TMDB ("w92", "w185", "w300", "w500", ...)
        base_url: Base du CDN d'images

    Returns:
        L'URL de l'image, ou l'URL de remplacement si path est absent
    """
    if not path:
        return PLACEHOLDER_IMAGE_URL
    return f"{base_url}/{size}{path}"


def youtube_embed_url(key: str) -> str:
    """URL d'intégration YouTube (iframe) pour une clé de bande-annonce."""
    return YOUTUBE_EMBED_URL.format(key=key)


def _first_video_key(videos: Iterable[dict[str, Any]], video_type: str) -> Optional[str]:
    for video in videos:
        if video.get("type") == video_type and video.get("site") == VIDEO_SITE:
            return video.get("key")
    return None


def resolve_trailer_key(videos: Any) -> Optional[str]:
    """
    Sélectionne la clé de bande-annonce d'un film.

    Priorité : premier "Trailer" YouTube, sinon premier "Teaser" YouTube.
    Un "Trailer" l'emporte même s'il apparaît après un "Teaser" dans la liste.

    Args:
        videos: Payload de l'endpoint videos ({"results": [...]}) ou liste directe

    Returns:
        La clé YouTube, ou None si aucune vidéo ne convient
    """
    if not videos:
        return None
    if isinstance(videos, dict):
        videos = videos.get("results") or []
    videos = list(videos)
    return _first_video_key(videos, "Trailer") or _first_video_key(videos, "Teaser")


class TMDBClient(IMovieAPIClient):
    """
    Client API TMDB pour la découverte de films.

    Implémente IMovieAPIClient avec:
    - Listes par catégorie, recherche, genres et découverte par genre
    - Fiche détaillée agrégée (détails + crédits + vidéos en parallèle)
    - Page d'accueil en éventail avec isolation des échecs par catégorie
    - Cache mémoire partagé (fenêtre de fraîcheur de 5 minutes)

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base du CDN d'images

    Example:
        client = TMDBClient(api_key="xxx", cache=RequestCache())

        categories = await client.get_homepage_movies()
        for category in categories:
            print(category.name, len(category.movies), category.error)

        await client.close()
    """

    TMDB_BASE_URL = TMDB_BASE_URL
    TMDB_IMAGE_BASE_URL = TMDB_IMAGE_BASE_URL

    def __init__(
        self,
        api_key: Optional[str],
        cache: RequestCache,
        base_url: str = TMDB_BASE_URL,
        image_base_url: str = TMDB_IMAGE_BASE_URL,
        language: str = "en-US",
        timeout: float = 30.0,
        homepage_limit: int = 10,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Clé API v3 ou Read Access Token v4 (None = sans authentification)
            cache: Instance RequestCache partagée
            base_url: URL de base de l'API
            image_base_url: URL de base du CDN d'images
            language: Langue demandée à l'API (paramètre "language")
            timeout: Timeout des requêtes HTTP en secondes
            homepage_limit: Nombre de films conservés par catégorie d'accueil
        """
        self._api_key = api_key
        self._cache = cache
        self._base_url = base_url
        self._image_base_url = image_base_url
        self._language = language
        self._timeout = timeout
        self._homepage_limit = homepage_limit
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le crée si nécessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caractères hex) : passée en paramètre api_key
        - Read Access Token v4 (long JWT) : passé en header Bearer

        La langue est ajoutée à toutes les requêtes.
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            params = {"language": self._language}

            if self._api_key:
                # Détecter le type de clé : v3 (32 hex) vs v4 (long JWT)
                if len(self._api_key) > 40:
                    headers["Authorization"] = f"Bearer {self._api_key}"
                else:
                    params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def _fetch(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET mis en cache par (endpoint, paramètres)."""
        params = clean_params(params)
        return await self._cache.get_or_fetch(
            endpoint,
            params,
            lambda: fetch_json(self._get_client(), endpoint, params),
        )

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    def image_url(self, path: Optional[str], size: str = DEFAULT_IMAGE_SIZE) -> str:
        """URL d'image sur le CDN configuré (voir la fonction image_url)."""
        return image_url(path, size, base_url=self._image_base_url)

    async def fetch_category(self, name: str, page: int = 1) -> dict[str, Any]:
        """
        Récupère une page d'une liste de films.

        Args:
            name: "trending", "popular", "top_rated", "now_playing" ou "upcoming"
                  (les formes topRated/nowPlaying sont acceptées). Un nom
                  inconnu retombe sur "popular".
            page: Numéro de page TMDB

        Returns:
            Payload TMDB brut ({"page", "results", "total_pages", ...})
        """
        if name not in CATEGORY_ENDPOINTS:
            logger.debug(f"Catégorie inconnue '{name}', repli sur {DEFAULT_CATEGORY}")
        return await self._fetch(resolve_category(name).endpoint, {"page": page})

    async def search(self, query: str, page: int = 1) -> dict[str, Any]:
        """
        Recherche des films par titre.

        Une requête vide ou composée uniquement d'espaces renvoie
        {"results": []} sans aucun appel réseau.
        """
        if not query or not query.strip():
            return {"results": []}
        return await self._fetch("/search/movie", {"query": query, "page": page})

    async def get_movie_details(self, movie_id: int | str) -> dict[str, Any]:
        """
        Récupère la fiche complète d'un film.

        Lance trois requêtes en parallèle (détails, crédits, vidéos) et
        attend les trois. Si une seule échoue, l'appel entier échoue :
        aucun résultat partiel n'est renvoyé.

        Returns:
            Les champs de la fiche, plus "credits" et "videos" imbriqués

        Raises:
            FetchError: Si l'une des trois requêtes échoue
        """
        details, credits, videos = await asyncio.gather(
            self._fetch(f"/movie/{movie_id}"),
            self._fetch(f"/movie/{movie_id}/credits"),
            self._fetch(f"/movie/{movie_id}/videos"),
        )
        return {**details, "credits": credits, "videos": videos}

    async def _load_category(self, spec: CategorySpec, page: int) -> Category:
        """Charge une catégorie d'accueil ; un échec donne une rangée vide marquée."""
        try:
            data = await self._fetch(spec.endpoint, {"page": page})
        except FetchError as e:
            logger.warning(f"Catégorie '{spec.id}' indisponible: {e}")
            return Category(id=spec.id, name=spec.name, movies=[], error=True)

        results = data.get("results") if isinstance(data, dict) else None
        movies = list(results or [])[: self._homepage_limit]
        return Category(id=spec.id, name=spec.name, movies=movies, error=False)

    async def get_homepage_movies(self, page: int = 1) -> list[Category]:
        """
        Récupère toutes les catégories de la page d'accueil en parallèle.

        L'échec d'une catégorie est isolé : elle revient avec une liste vide
        et error=True, les autres gardent leurs films. Cet appel ne lève jamais.
        Chaque liste est tronquée aux premiers films (10 par défaut), quelle
        que soit la page demandée.

        Returns:
            Les catégories dans l'ordre d'affichage fixe
        """
        categories = await asyncio.gather(
            *(self._load_category(spec, page) for spec in HOMEPAGE_CATEGORIES)
        )
        return list(categories)

    async def get_genres(self) -> dict[str, Any]:
        """Liste des genres de films ({"genres": [{"id", "name"}, ...]})."""
        return await self._fetch("/genre/movie/list")

    async def get_movies_by_genre(self, genre_id: int | str, page: int = 1) -> dict[str, Any]:
        """Films d'un genre via l'endpoint discover."""
        return await self._fetch("/discover/movie", {"with_genres": genre_id, "page": page})

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit être appelé à la fin de l'utilisation pour libérer
        les ressources réseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
