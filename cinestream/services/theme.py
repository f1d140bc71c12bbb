"""Préférence de thème (clair/sombre) persistée."""

from cinestream.core.ports.storage import IKeyValueStore
from cinestream.utils.constants import DEFAULT_THEME, THEME_KEY, THEMES


class ThemeService:
    """Lit et bascule le thème de l'interface ("dark" par défaut)."""

    def __init__(self, storage: IKeyValueStore, key: str = THEME_KEY) -> None:
        self._storage = storage
        self._key = key

    def current(self) -> str:
        """Thème enregistré, ou le thème par défaut si absent ou invalide."""
        theme = self._storage.load(self._key)
        return theme if theme in THEMES else DEFAULT_THEME

    def toggle(self) -> str:
        """Bascule entre clair et sombre, persiste et retourne le nouveau thème."""
        theme = "light" if self.current() == "dark" else "dark"
        self._storage.save(self._key, theme)
        return theme
