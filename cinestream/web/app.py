"""
Application FastAPI de CineStream.

Initialise l'application web avec le Container DI, configure les fichiers
statiques et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from .routes.home import router as home_router
from .routes.movies import router as movies_router
from .routes.watchlist import router as watchlist_router

_WEB_DIR = Path(__file__).parent


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI à utiliser (un nouveau est créé si None)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Attache le Container au démarrage et libère les ressources à l'arrêt."""
        app.state.container = container or Container()
        logger.info("Démarrage de l'interface web CineStream")
        yield
        await app.state.container.tmdb_client().close()

    app = FastAPI(title="CineStream", lifespan=lifespan)

    # Fichiers statiques
    app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

    # Routes
    app.include_router(home_router)
    app.include_router(movies_router)
    app.include_router(watchlist_router)
    return app


app = create_app()
