"""
Stockage local clé/valeur persistant, encodé en JSON.

Le stockage utilise diskcache pour la persistence sur disque, ce qui permet
de conserver la watchlist et le thème entre les redémarrages de l'application.
Les valeurs sont sérialisées en JSON (et non picklées) pour rester lisibles
et portables.

Aucune erreur ne remonte à l'appelant : lectures et écritures en échec sont
journalisées et traitées comme "pas de donnée".
"""

import json
import sqlite3
from pathlib import Path
from typing import Any, Optional

from diskcache import Cache
from loguru import logger

from cinestream.core.ports.storage import IKeyValueStore


class DiskLocalStorage(IKeyValueStore):
    """
    Implémentation de IKeyValueStore sur un répertoire diskcache.

    Example:
        storage = DiskLocalStorage(directory="~/.cinestream")
        storage.save("cinestream-theme", "light")
        storage.load("cinestream-theme")  # "light"
    """

    def __init__(self, directory: str | Path = ".cinestream") -> None:
        """
        Ouvre (ou crée) le répertoire de stockage.

        Args:
            directory: Chemin vers le répertoire diskcache (créé si inexistant)
        """
        self._cache = Cache(str(Path(directory).expanduser()))

    def load(self, key: str) -> Optional[Any]:
        """Lit et décode une valeur ; None si absente ou corrompue."""
        try:
            raw = self._cache.get(key)
            return json.loads(raw) if raw else None
        except (OSError, sqlite3.Error, TypeError, ValueError) as e:
            logger.error(f"Erreur de lecture du stockage local '{key}': {e}")
            return None

    def save(self, key: str, value: Any) -> bool:
        """Encode et écrit une valeur ; False en cas d'échec."""
        try:
            self._cache.set(key, json.dumps(value))
            return True
        except (OSError, sqlite3.Error, TypeError, ValueError) as e:
            logger.error(f"Erreur d'écriture du stockage local '{key}': {e}")
            return False

    def remove(self, key: str) -> bool:
        """Supprime une clé (absente = succès) ; False en cas d'échec."""
        try:
            self._cache.delete(key)
            return True
        except (OSError, sqlite3.Error) as e:
            logger.error(f"Erreur de suppression du stockage local '{key}': {e}")
            return False

    def close(self) -> None:
        """Ferme la connexion au stockage (à appeler à la fin)."""
        self._cache.close()
