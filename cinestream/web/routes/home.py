"""
Routes de la page d'accueil.

Affiche la bannière, les rangées de catégories et la watchlist ; fournit les
fragments HTMX de pagination infinie, de rangée par catégorie ou par genre,
et la bascule de thème.
"""

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, Response

from ...core.entities.movie import Category, resolve_category
from ...core.ports.api_clients import FetchError
from ...presentation.views import build_category_row, build_home
from ...utils.helpers import capitalize
from ..deps import get_container, templates

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Page d'accueil : charge les catégories au premier affichage."""
    container = get_container(request)
    browse = container.browse_service()
    if not browse.booted:
        await browse.boot()

    watchlist = container.watchlist_service()
    view = build_home(
        browse.categories,
        browse.hero(),
        watchlist.entries,
        container.theme_service().current(),
        browse.current_page,
    )
    return templates.TemplateResponse(request, "home.html", {"view": view, "theme": view.theme})


@router.get("/more", response_class=HTMLResponse)
async def load_more(request: Request):
    """Page suivante des catégories (déclenché par le défilement)."""
    container = get_container(request)
    browse = container.browse_service()
    watchlist_ids = [entry["id"] for entry in container.watchlist_service().entries]

    new_categories = await browse.load_more()
    lengths = {category.id: len(category.movies) for category in browse.categories}
    rows = [
        build_category_row(
            category,
            watchlist_ids,
            offset=lengths.get(category.id, 0) - len(category.movies),
        )
        for category in new_categories
        if category.movies
    ]
    return templates.TemplateResponse(
        request,
        "partials/more.html",
        {"rows": rows, "next_page": browse.current_page + 1, "loading": browse.is_loading},
    )


@router.get("/category/{name}", response_class=HTMLResponse)
async def category_row(request: Request, name: str, page: int = Query(1, ge=1)):
    """Une rangée pour une catégorie, titrée d'après la catégorie réellement chargée."""
    container = get_container(request)
    client = container.tmdb_client()
    try:
        data = await client.fetch_category(name, page)
    except FetchError as e:
        logger.warning("Catégorie %s indisponible: %s", name, e)
        return templates.TemplateResponse(
            request,
            "partials/error.html",
            {"message": "Failed to load movies. Please check your connection and try again."},
        )

    spec = resolve_category(name)
    category = Category(id=spec.id, name=spec.name, movies=data.get("results") or [])
    watchlist_ids = [entry["id"] for entry in container.watchlist_service().entries]
    return templates.TemplateResponse(
        request,
        "partials/row.html",
        {"row": build_category_row(category, watchlist_ids)},
    )


@router.get("/genres", response_class=HTMLResponse)
async def genres(request: Request):
    """Liste des genres pour le filtre de l'en-tête."""
    client = get_container(request).tmdb_client()
    try:
        data = await client.get_genres()
    except FetchError as e:
        logger.warning("Genres indisponibles: %s", e)
        return templates.TemplateResponse(
            request, "partials/error.html", {"message": "Failed to load genres."}
        )
    return templates.TemplateResponse(
        request, "partials/genres.html", {"genres": data.get("genres") or []}
    )


@router.get("/genre/{genre_id}", response_class=HTMLResponse)
async def genre_row(
    request: Request,
    genre_id: int,
    name: str = Query("Genre"),
    page: int = Query(1, ge=1),
):
    """Une rangée de films d'un genre."""
    container = get_container(request)
    try:
        data = await container.tmdb_client().get_movies_by_genre(genre_id, page)
    except FetchError as e:
        logger.warning("Genre %s indisponible: %s", genre_id, e)
        return templates.TemplateResponse(
            request, "partials/error.html", {"message": "Failed to load movies."}
        )

    category = Category(id=f"genre-{genre_id}", name=capitalize(name), movies=data.get("results") or [])
    watchlist_ids = [entry["id"] for entry in container.watchlist_service().entries]
    return templates.TemplateResponse(
        request,
        "partials/row.html",
        {"row": build_category_row(category, watchlist_ids)},
    )


@router.post("/theme/toggle")
async def toggle_theme(request: Request):
    """Bascule le thème et demande à HTMX de recharger la page."""
    theme = get_container(request).theme_service().toggle()
    logger.info("Thème: %s", theme)
    return Response(headers={"HX-Refresh": "true"})
