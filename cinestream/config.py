"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINESTREAM_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle - sans elle, les appels partent sans authentification
et l'API répond 401 (affiché comme une erreur non bloquante dans l'interface).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de cinestream/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINESTREAM_.
    Exemple : CINESTREAM_CACHE_TTL_SECONDS=60

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINESTREAM_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API TMDB
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    image_base_url: str = Field(default="https://image.tmdb.org/t/p")
    language: str = Field(default="en-US")
    http_timeout: float = Field(default=30.0, gt=0)

    # Cache mémoire des réponses (fenêtre de fraîcheur)
    cache_ttl_seconds: float = Field(default=5 * 60, gt=0)

    # Nombre de films conservés par catégorie sur la page d'accueil
    homepage_limit: int = Field(default=10, ge=1)

    # Stockage local (watchlist, thème)
    storage_dir: Path = Field(default=Path("~/.cinestream"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinestream.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)
    # Hits/miss du cache de requêtes dans le fichier de log
    log_cache_debug: bool = Field(default=False)

    @field_validator("storage_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)
