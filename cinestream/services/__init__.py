"""
Couche application (services).

- WatchlistService : Watchlist personnelle persistée
- ThemeService : Préférence de thème clair/sombre
- BrowseService : Démarrage, bannière, pagination infinie de l'accueil
"""

from cinestream.services.browse import BrowseService
from cinestream.services.theme import ThemeService
from cinestream.services.watchlist import WatchlistService

__all__ = [
    "BrowseService",
    "ThemeService",
    "WatchlistService",
]
