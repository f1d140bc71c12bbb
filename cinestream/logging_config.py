"""
Journalisation de CineStream via loguru.

Deux sorties : la console au niveau choisi dans Settings, et un fichier JSON
tournant qui reçoit tout à partir de DEBUG. Les hits/miss du cache de
requêtes sont très bavards ; ils ne sont écrits que si log_cache_debug est
activé.
"""

import sys
from pathlib import Path

from loguru import logger

CACHE_LOGGER = "cinestream.adapters.api.cache"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def _cache_filter(cache_debug: bool):
    """Filtre loguru écartant les hits/miss DEBUG du cache sauf demande explicite."""

    def keep(record) -> bool:
        if cache_debug:
            return True
        return not (record["name"] == CACHE_LOGGER and record["level"].name == "DEBUG")

    return keep


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cinestream.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    cache_debug: bool = False,
) -> None:
    """Installe les sorties console et fichier.

    Args:
        log_level: Niveau minimum affiché sur la console
        log_file: Fichier JSON (le répertoire parent est créé)
        rotation_size: Taille déclenchant la rotation (ex: "10 MB")
        retention_count: Nombre d'archives conservées
        cache_debug: Écrire aussi les hits/miss du cache de requêtes
    """
    keep = _cache_filter(cache_debug)
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, filter=keep, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        filter=keep,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Journalisation prête ({log_level}, cache_debug={cache_debug}) -> {log_file}")
