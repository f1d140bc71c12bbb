"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API :
- IMovieAPIClient : Listes, recherche et fiches détaillées de films
- FetchError : Échec réseau ou statut HTTP non-2xx

Ports stockage :
- IKeyValueStore : Stockage clé/valeur local encodé en JSON
"""

from cinestream.core.ports.api_clients import FetchError, IMovieAPIClient
from cinestream.core.ports.storage import IKeyValueStore

__all__ = [
    # Clients API
    "IMovieAPIClient",
    "FetchError",
    # Stockage
    "IKeyValueStore",
]
