"""
Routes de la watchlist.

Ajout/retrait (bascule), suppression d'une entrée et vidage complet.
Chaque action renvoie le fragment de la watchlist accompagné d'une
notification. La confirmation du vidage est portée par hx-confirm.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...core.ports.api_clients import FetchError
from ...presentation.views import build_watchlist, watchlist_notification
from ..deps import get_container, templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/watchlist")


def _render(request: Request, notification: Optional[str] = None) -> HTMLResponse:
    watchlist = get_container(request).watchlist_service()
    return templates.TemplateResponse(
        request,
        "partials/watchlist.html",
        {"watchlist": build_watchlist(watchlist.entries), "notification": notification},
    )


@router.get("", response_class=HTMLResponse)
async def watchlist_panel(request: Request):
    """Fragment de la watchlist."""
    return _render(request)


@router.post("/toggle/{movie_id}", response_class=HTMLResponse)
async def toggle(request: Request, movie_id: int):
    """
    Ajoute ou retire un film.

    Le film est repris des catégories déjà chargées ; à défaut, sa fiche
    est récupérée (généralement depuis le cache).
    """
    container = get_container(request)
    movie = container.browse_service().find_movie(movie_id)
    if movie is None:
        try:
            movie = await container.tmdb_client().get_movie_details(movie_id)
        except FetchError as e:
            logger.warning("Film %s introuvable pour la watchlist: %s", movie_id, e)
            return templates.TemplateResponse(
                request,
                "partials/error.html",
                {"message": "Failed to update watchlist. Please try again."},
            )

    added = container.watchlist_service().toggle(movie)
    return _render(request, watchlist_notification(added))


@router.post("/remove/{movie_id}", response_class=HTMLResponse)
async def remove(request: Request, movie_id: int):
    """Retire un film de la watchlist."""
    get_container(request).watchlist_service().remove(movie_id)
    return _render(request, watchlist_notification(False))


@router.post("/clear", response_class=HTMLResponse)
async def clear(request: Request):
    """Vide la watchlist (après confirmation côté navigateur)."""
    get_container(request).watchlist_service().clear()
    return _render(request, watchlist_notification(None))
