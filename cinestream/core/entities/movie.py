"""
Entités films et catégories.

Les films eux-mêmes (résumés et fiches détaillées) restent des dictionnaires
bruts tels que renvoyés par TMDB : ils ne sont ni validés ni normalisés.
Seules les catégories de la page d'accueil ont une structure propre.
"""

from dataclasses import dataclass, field
from typing import Any

from cinestream.utils.constants import CATEGORY_ENDPOINTS, DEFAULT_CATEGORY


# Champs conservés lorsqu'un film entre dans la watchlist
WATCHLIST_FIELDS = ("id", "title", "poster_path", "vote_average", "release_date")


@dataclass(frozen=True)
class CategorySpec:
    """
    Définition statique d'une catégorie de la page d'accueil.

    Attributes:
        id: Identifiant de la catégorie (ex: "trending")
        name: Libellé affiché en tête de rangée
        endpoint: Chemin TMDB de la liste
    """

    id: str
    name: str
    endpoint: str


# Ordre d'affichage des rangées de la page d'accueil
HOMEPAGE_CATEGORIES: tuple[CategorySpec, ...] = (
    CategorySpec("trending", "Trending Now", "/trending/movie/week"),
    CategorySpec("popular", "Popular on CineStream", "/movie/popular"),
    CategorySpec("top_rated", "Top Rated", "/movie/top_rated"),
    CategorySpec("now_playing", "Now Playing", "/movie/now_playing"),
    CategorySpec("upcoming", "Upcoming Movies", "/movie/upcoming"),
)


@dataclass
class Category:
    """
    Rangée de films de la page d'accueil.

    Attributes:
        id: Identifiant de la catégorie
        name: Libellé affiché
        movies: Résumés de films dans l'ordre TMDB (bornés par page)
        error: True si la récupération de cette catégorie a échoué
    """

    id: str
    name: str
    movies: list[dict[str, Any]] = field(default_factory=list)
    error: bool = False


def watchlist_projection(movie: dict[str, Any]) -> dict[str, Any]:
    """Réduit un film aux champs persistés dans la watchlist."""
    return {key: movie.get(key) for key in WATCHLIST_FIELDS}


def resolve_category(name: str) -> CategorySpec:
    """
    Retrouve la catégorie désignée par un nom (ou un alias camelCase).

    Un nom inconnu désigne la catégorie "popular".
    """
    endpoint = CATEGORY_ENDPOINTS.get(name, CATEGORY_ENDPOINTS[DEFAULT_CATEGORY])
    return next(spec for spec in HOMEPAGE_CATEGORIES if spec.endpoint == endpoint)
