"""
Construction des vues de l'interface.

Fonctions pures : elles reçoivent les payloads TMDB, les catégories et l'état
de la watchlist, et renvoient des descriptions de vue (dataclasses) prêtes à
être rendues par les templates Jinja2. Aucune I/O ici ; la coquille web
(web/routes) se contente d'appeler ces fonctions et de rendre le résultat.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from cinestream.adapters.api.tmdb_client import image_url, resolve_trailer_key, youtube_embed_url
from cinestream.core.entities.movie import Category
from cinestream.utils.constants import (
    CAST_LIMIT,
    EMPTY_WATCHLIST_MESSAGE,
    HERO_FALLBACK_TITLE,
    NO_DESCRIPTION,
    NO_OVERVIEW,
    NO_RESULTS_MESSAGE,
    NO_TRAILER_LABEL,
    PLACEHOLDER_PROFILE_URL,
    SEARCH_RESULTS_LIMIT,
    TOP_RATED_THRESHOLD,
    TRENDING_BADGE_COUNT,
)
from cinestream.utils.helpers import (
    format_date,
    format_number,
    format_rating,
    format_runtime,
    truncate_text,
    year_from_date,
)


@dataclass(frozen=True)
class MovieCardView:
    """Carte d'un film dans une rangée."""

    id: Any
    title: str
    poster_url: str
    rating: str
    overview: str
    top_rated: bool = False
    trending_rank: Optional[int] = None
    in_watchlist: bool = False


@dataclass(frozen=True)
class CategoryRowView:
    """Rangée horizontale de cartes."""

    id: str
    name: str
    cards: tuple[MovieCardView, ...] = ()


@dataclass(frozen=True)
class SearchResultView:
    """Ligne de la liste déroulante de recherche."""

    id: Any
    title: str
    poster_url: str
    year: str
    rating: str


@dataclass(frozen=True)
class SearchResultsView:
    items: tuple[SearchResultView, ...] = ()
    message: Optional[str] = None


@dataclass(frozen=True)
class CastMemberView:
    name: str
    character: str
    profile_url: str


@dataclass(frozen=True)
class MovieModalView:
    """Modale de fiche détaillée."""

    id: Any
    title: str
    poster_url: str
    rating: str
    release: str
    runtime: str
    genres: str
    overview: str
    votes: str = ""
    cast: tuple[CastMemberView, ...] = ()
    trailer_url: Optional[str] = None
    trailer_label: str = "Play Trailer"
    in_watchlist: bool = False
    watchlist_label: str = "Add to Watchlist"


@dataclass(frozen=True)
class WatchlistCardView:
    id: Any
    title: str
    poster_url: str
    rating: str


@dataclass(frozen=True)
class WatchlistView:
    cards: tuple[WatchlistCardView, ...] = ()
    message: Optional[str] = None


@dataclass(frozen=True)
class HeroView:
    """Bannière d'accueil."""

    movie_id: Any
    title: str
    backdrop_url: str
    overview: str


@dataclass(frozen=True)
class HomeView:
    hero: Optional[HeroView]
    rows: tuple[CategoryRowView, ...]
    watchlist: WatchlistView
    theme: str
    next_page: int
    errors: tuple[str, ...] = field(default_factory=tuple)


def build_movie_card(
    movie: dict[str, Any],
    category_id: str = "",
    index: int = 0,
    in_watchlist: bool = False,
) -> MovieCardView:
    """
    Construit la carte d'un film.

    Les trois premiers films tendance portent un badge de rang, les films
    notés 8 ou plus un badge "TOP RATED".
    """
    vote_average = movie.get("vote_average") or 0
    trending_rank = index + 1 if category_id == "trending" and index < TRENDING_BADGE_COUNT else None
    return MovieCardView(
        id=movie.get("id"),
        title=movie.get("title") or "Untitled",
        poster_url=image_url(movie.get("poster_path")),
        rating=format_rating(vote_average),
        overview=truncate_text(movie.get("overview") or NO_DESCRIPTION, 120),
        top_rated=vote_average >= TOP_RATED_THRESHOLD,
        trending_rank=trending_rank,
        in_watchlist=in_watchlist,
    )


def build_category_row(
    category: Category,
    watchlist_ids: Iterable[Any] = (),
    offset: int = 0,
) -> CategoryRowView:
    """
    Construit une rangée.

    Args:
        category: Catégorie à afficher
        watchlist_ids: Identifiants présents dans la watchlist
        offset: Position du premier film dans la rangée complète (pagination)
    """
    ids = {str(movie_id) for movie_id in watchlist_ids}
    cards = tuple(
        build_movie_card(movie, category.id, offset + index, str(movie.get("id")) in ids)
        for index, movie in enumerate(category.movies)
    )
    return CategoryRowView(id=category.id, name=category.name, cards=cards)


def build_category_rows(
    categories: Iterable[Category],
    watchlist_ids: Iterable[Any] = (),
) -> tuple[CategoryRowView, ...]:
    """Construit les rangées ; les catégories sans film ne sont pas affichées."""
    ids = list(watchlist_ids)
    return tuple(
        build_category_row(category, ids) for category in categories if category.movies
    )


def filter_rows(rows: Iterable[CategoryRowView], selected: str = "all") -> tuple[CategoryRowView, ...]:
    """Filtre les rangées par identifiant de catégorie ("all" garde tout)."""
    if selected == "all":
        return tuple(rows)
    return tuple(row for row in rows if row.id == selected)


def build_search_results(movies: Optional[list[dict[str, Any]]]) -> SearchResultsView:
    """Dix premiers résultats de recherche, ou un message si aucun."""
    if not movies:
        return SearchResultsView(message=NO_RESULTS_MESSAGE)
    items = tuple(
        SearchResultView(
            id=movie.get("id"),
            title=movie.get("title") or "Untitled",
            poster_url=image_url(movie.get("poster_path"), "w92"),
            year=str(year_from_date(movie.get("release_date")) or "N/A"),
            rating=format_rating(movie.get("vote_average")),
        )
        for movie in movies[:SEARCH_RESULTS_LIMIT]
    )
    return SearchResultsView(items=items)


def build_movie_modal(detail: dict[str, Any], in_watchlist: bool = False) -> MovieModalView:
    """Construit la modale d'une fiche détaillée (avec crédits et vidéos)."""
    credits = detail.get("credits") or {}
    cast = tuple(
        CastMemberView(
            name=truncate_text(person.get("name"), 15),
            character=truncate_text(person.get("character"), 20),
            profile_url=(
                image_url(person["profile_path"], "w185")
                if person.get("profile_path")
                else PLACEHOLDER_PROFILE_URL
            ),
        )
        for person in (credits.get("cast") or [])[:CAST_LIMIT]
    )
    trailer_key = resolve_trailer_key(detail.get("videos"))
    return MovieModalView(
        id=detail.get("id"),
        title=detail.get("title") or "Untitled",
        poster_url=image_url(detail.get("poster_path")),
        rating=format_rating(detail.get("vote_average")),
        release=format_date(detail.get("release_date")),
        runtime=format_runtime(detail.get("runtime")),
        genres=", ".join(genre.get("name", "") for genre in detail.get("genres") or []),
        overview=detail.get("overview") or NO_OVERVIEW,
        votes=f"{format_number(detail['vote_count'])} votes" if detail.get("vote_count") else "",
        cast=cast,
        trailer_url=youtube_embed_url(trailer_key) if trailer_key else None,
        trailer_label="Play Trailer" if trailer_key else NO_TRAILER_LABEL,
        in_watchlist=in_watchlist,
        watchlist_label="Remove from Watchlist" if in_watchlist else "Add to Watchlist",
    )


def build_watchlist(entries: Iterable[dict[str, Any]]) -> WatchlistView:
    """Cartes de la watchlist, ou le message de liste vide."""
    cards = tuple(
        WatchlistCardView(
            id=entry.get("id"),
            title=truncate_text(entry.get("title") or "Untitled", 20),
            poster_url=image_url(entry.get("poster_path"), "w300"),
            rating=format_rating(entry.get("vote_average")),
        )
        for entry in entries
    )
    if not cards:
        return WatchlistView(message=EMPTY_WATCHLIST_MESSAGE)
    return WatchlistView(cards=cards)


def build_hero(movie: Optional[dict[str, Any]]) -> Optional[HeroView]:
    """Bannière pour le film mis en avant (None si aucun film tendance)."""
    if movie is None:
        return None
    return HeroView(
        movie_id=movie.get("id"),
        title=movie.get("title") or HERO_FALLBACK_TITLE,
        backdrop_url=image_url(movie.get("backdrop_path") or movie.get("poster_path"), "original"),
        overview=truncate_text(movie.get("overview") or "", 200),
    )


def build_home(
    categories: list[Category],
    hero_movie: Optional[dict[str, Any]],
    watchlist_entries: list[dict[str, Any]],
    theme: str,
    current_page: int = 1,
) -> HomeView:
    """Assemble la page d'accueil complète."""
    watchlist_ids = [entry.get("id") for entry in watchlist_entries]
    return HomeView(
        hero=build_hero(hero_movie),
        rows=build_category_rows(categories, watchlist_ids),
        watchlist=build_watchlist(watchlist_entries),
        theme=theme,
        next_page=current_page + 1,
        errors=tuple(category.name for category in categories if category.error),
    )


def watchlist_notification(added: Optional[bool]) -> str:
    """Message de notification après une action sur la watchlist (None = vidée)."""
    if added is None:
        return "Watchlist cleared!"
    return "Added to watchlist!" if added else "Removed from watchlist!"
