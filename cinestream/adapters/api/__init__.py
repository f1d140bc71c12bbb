"""
Client API externe pour les métadonnées de films.

Ce module fournit l'adaptateur pour communiquer avec TMDB (The Movie Database).

Infrastructure partagée:
- RequestCache: Cache mémoire avec fenêtre de fraîcheur de 5 minutes
- fetch_json: GET JSON qui convertit les échecs en FetchError

Le client implémente IMovieAPIClient défini dans core/ports/api_clients.py.
"""

from cinestream.adapters.api.cache import RequestCache
from cinestream.adapters.api.tmdb_client import (
    TMDBClient,
    image_url,
    resolve_trailer_key,
    youtube_embed_url,
)

__all__ = [
    "RequestCache",
    "TMDBClient",
    "image_url",
    "resolve_trailer_key",
    "youtube_embed_url",
]
