"""
Interface port pour le stockage local clé/valeur.

Équivalent serveur du localStorage d'un navigateur : des valeurs JSON
rangées sous des clés préfixées. Les implémentations ne lèvent jamais :
les erreurs sont journalisées et traitées comme "pas de donnée".
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IKeyValueStore(ABC):
    """Stockage clé/valeur persistant, valeurs encodées en JSON."""

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        """
        Lit et décode la valeur d'une clé.

        Retourne :
            La valeur décodée, ou None si absente, illisible ou corrompue
        """
        ...

    @abstractmethod
    def save(self, key: str, value: Any) -> bool:
        """Encode et écrit une valeur. Retourne False en cas d'échec."""
        ...

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Supprime une clé. Retourne False en cas d'échec."""
        ...
