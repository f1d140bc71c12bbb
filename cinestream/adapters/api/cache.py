"""
Cache mémoire des réponses de l'API avec fenêtre de fraîcheur.

Les réponses sont mémorisées par (endpoint, paramètres) pendant la durée de
vie du processus. Une entrée plus vieille que la fenêtre de fraîcheur
(5 minutes par défaut) n'est jamais renvoyée : elle est traitée comme absente
et la requête repart sur le réseau.

Aucune éviction n'est faite en dehors de ce contrôle d'âge : la mémoire croît
avec le nombre de couples (endpoint, paramètres) distincts vus pendant la session.
"""

import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable, Mapping, Optional

from loguru import logger

CacheKey = tuple[str, tuple[tuple[str, Hashable], ...]]


@dataclass(frozen=True)
class CacheEntry:
    """
    Réponse mémorisée.

    Attributes:
        payload: Réponse JSON brute (jamais modifiée sur place)
        timestamp: Instant de stockage selon l'horloge du cache
    """

    payload: Any
    timestamp: float


def make_cache_key(endpoint: str, params: Optional[Mapping[str, Any]] = None) -> CacheKey:
    """
    Construit une clé de cache déterministe.

    Les paramètres sont triés par nom : {"page": 1, "query": "x"} et
    {"query": "x", "page": 1} produisent la même clé.
    """
    items = tuple(sorted((params or {}).items()))
    return (endpoint, items)


class RequestCache:
    """
    Mémoïsation asynchrone des appels API, bornée dans le temps.

    Attributes:
        DEFAULT_TTL: Fenêtre de fraîcheur par défaut (5 minutes)

    Example:
        cache = RequestCache()
        data = await cache.get_or_fetch(
            "/movie/popular", {"page": 1}, lambda: fetch_json(client, "/movie/popular")
        )
    """

    DEFAULT_TTL = 5 * 60  # 5 minutes en secondes

    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialise un cache vide.

        Args:
            ttl: Âge maximal (secondes) d'une entrée renvoyable
            clock: Source de temps monotone (injectable pour les tests)
        """
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}

    @property
    def ttl(self) -> float:
        """Fenêtre de fraîcheur en secondes."""
        return self._ttl

    def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Any]:
        """
        Retourne le payload frais pour (endpoint, params), ou None.

        Une entrée périmée est traitée exactement comme une entrée absente.
        """
        entry = self._entries.get(make_cache_key(endpoint, params))
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self._ttl:
            return None
        return entry.payload

    def set(self, endpoint: str, params: Optional[Mapping[str, Any]], payload: Any) -> None:
        """Mémorise un payload horodaté à l'instant présent."""
        key = make_cache_key(endpoint, params)
        self._entries[key] = CacheEntry(payload=payload, timestamp=self._clock())

    async def get_or_fetch(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]],
        fetch: Callable[[], Awaitable[Any]],
    ) -> Any:
        """
        Retourne le payload en cache s'il est frais, sinon appelle fetch().

        En cas de succès, le résultat est mémorisé avant d'être renvoyé.
        En cas d'échec, rien n'est mémorisé et l'exception est propagée
        telle quelle (pas de retry, pas de backoff).

        Args:
            endpoint: Chemin de l'API
            params: Paramètres de la requête (hors clé API et langue)
            fetch: Coroutine effectuant l'appel réseau

        Returns:
            Le payload JSON brut
        """
        key = make_cache_key(endpoint, params)
        entry = self._entries.get(key)
        now = self._clock()
        if entry is not None and now - entry.timestamp < self._ttl:
            logger.debug(f"Cache hit: {endpoint} {dict(key[1])}")
            return entry.payload

        logger.debug(f"Cache miss: {endpoint} {dict(key[1])}")
        payload = await fetch()
        self._entries[key] = CacheEntry(payload=payload, timestamp=self._clock())
        return payload

    def clear(self) -> None:
        """Supprime toutes les entrées."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
