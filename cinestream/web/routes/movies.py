"""
Routes des films : recherche, fiche détaillée et bandes-annonces.

Chaque route renvoie un fragment HTMX. Les échecs de l'API sont rendus comme
des messages non bloquants : la page reste utilisable.
"""

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse

from ...adapters.api.tmdb_client import resolve_trailer_key, youtube_embed_url
from ...core.ports.api_clients import FetchError
from ...presentation.views import SearchResultsView, build_movie_modal, build_search_results
from ...utils.constants import SEARCH_ERROR_MESSAGE
from ..deps import get_container, templates

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(request: Request, message: str) -> HTMLResponse:
    return templates.TemplateResponse(request, "partials/error.html", {"message": message})


@router.get("/search", response_class=HTMLResponse)
async def search(request: Request, q: str = Query(""), page: int = Query(1, ge=1)):
    """Résultats de recherche (liste déroulante sous le champ)."""
    query = q.strip()
    if not query:
        return HTMLResponse("")

    client = get_container(request).tmdb_client()
    try:
        data = await client.search(query, page)
    except FetchError as e:
        logger.warning("Recherche '%s' en échec: %s", query, e)
        view = SearchResultsView(message=SEARCH_ERROR_MESSAGE)
    else:
        view = build_search_results(data.get("results"))
    return templates.TemplateResponse(request, "partials/search_results.html", {"view": view})


@router.get("/movie/random", response_class=HTMLResponse)
async def random_movie(request: Request):
    """Fiche d'un film tendance tiré au hasard (bouton "More Info")."""
    container = get_container(request)
    movie_id = container.browse_service().random_movie_id()
    if movie_id is None:
        return _error(request, "No movies available.")
    return await movie_detail(request, movie_id)


@router.get("/movie/{movie_id}", response_class=HTMLResponse)
async def movie_detail(request: Request, movie_id: int):
    """Modale de fiche détaillée (détails, distribution, bande-annonce)."""
    container = get_container(request)
    try:
        detail = await container.tmdb_client().get_movie_details(movie_id)
    except FetchError as e:
        logger.warning("Fiche %s indisponible: %s", movie_id, e)
        return _error(request, "Failed to load movie details. Please try again.")

    in_watchlist = container.watchlist_service().contains(movie_id)
    view = build_movie_modal(detail, in_watchlist)
    return templates.TemplateResponse(request, "partials/movie_modal.html", {"view": view})


@router.get("/trailer/random", response_class=HTMLResponse)
async def random_trailer(request: Request):
    """Bande-annonce du premier film tendance qui en possède une."""
    browse = get_container(request).browse_service()
    if not browse.trending_movies():
        return _error(request, "No movies available to play trailer.")
    key = await browse.random_trailer_key()
    if key is None:
        return _error(request, "No trailers available at the moment.")
    return templates.TemplateResponse(
        request, "partials/trailer.html", {"embed_url": youtube_embed_url(key)}
    )


@router.get("/trailer/{movie_id}", response_class=HTMLResponse)
async def movie_trailer(request: Request, movie_id: int):
    """Bande-annonce d'un film donné."""
    client = get_container(request).tmdb_client()
    try:
        detail = await client.get_movie_details(movie_id)
    except FetchError as e:
        logger.warning("Bande-annonce %s indisponible: %s", movie_id, e)
        return _error(request, "Failed to load trailer.")

    key = resolve_trailer_key(detail.get("videos"))
    if key is None:
        return _error(request, "No trailer available for this movie.")
    return templates.TemplateResponse(
        request, "partials/trailer.html", {"embed_url": youtube_embed_url(key)}
    )
