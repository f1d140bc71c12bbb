"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et l'interface Web.
Le cache et la watchlist sont des singletons dont la duree de vie est celle
du processus : le cache reste en memoire, la watchlist est persistee.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import RequestCache
from .adapters.api.tmdb_client import TMDBClient
from .adapters.storage.local_storage import DiskLocalStorage
from .config import Settings
from .services.browse import BrowseService
from .services.theme import ThemeService
from .services.watchlist import WatchlistService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.tmdb_client()
        watchlist = container.watchlist_service()

    Pour les tests, surcharger un provider :
        container.tmdb_client.override(providers.Object(fake_client))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Stockage local (watchlist, theme)
    local_storage = providers.Singleton(
        DiskLocalStorage,
        directory=config.provided.storage_dir,
    )

    # Cache memoire des reponses - Singleton pour partage entre appels
    request_cache = providers.Singleton(
        RequestCache,
        ttl=config.provided.cache_ttl_seconds,
    )

    # Client API - Singleton avec api_key depuis config
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        cache=request_cache,
        base_url=config.provided.tmdb_base_url,
        image_base_url=config.provided.image_base_url,
        language=config.provided.language,
        timeout=config.provided.http_timeout,
        homepage_limit=config.provided.homepage_limit,
    )

    # Services (etat de session - Singletons)
    watchlist_service = providers.Singleton(WatchlistService, storage=local_storage)
    theme_service = providers.Singleton(ThemeService, storage=local_storage)
    browse_service = providers.Singleton(BrowseService, client=tmdb_client)
