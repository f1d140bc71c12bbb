"""
CineStream - Application de découverte de films.

Ce package récupère les listes de films, les résultats de recherche et les
fiches détaillées depuis l'API TMDB, les présente sous forme de rangées et
de modales dans une interface web locale, et conserve une watchlist personnelle.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports)
- services/ : Couche application (watchlist, thème, navigation)
- adapters/ : Couche infrastructure (client TMDB, cache, stockage local)
- presentation/ : Construction des vues (fonctions pures)
- web/ : Coquille web (FastAPI + HTMX)
"""

__version__ = "0.1.0"
