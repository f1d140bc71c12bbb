"""
Fonctions de formatage partagées dans le projet CineStream.

Ce module centralise les fonctions réutilisées par les vues :
- format_date / year_from_date : dates TMDB (YYYY-MM-DD) lisibles
- format_runtime : durée en minutes -> "2h 28m"
- format_rating : note moyenne -> "7.6" ou "N/A"
- truncate_text : troncature avec points de suspension
"""

from datetime import date
from typing import Any, Optional


def _parse_date(date_string: Optional[str]) -> Optional[date]:
    """Parse une date TMDB, None si vide ou invalide."""
    if not date_string:
        return None
    try:
        return date.fromisoformat(date_string[:10])
    except ValueError:
        return None


def format_date(date_string: Optional[str]) -> str:
    """Formate "2010-07-15" en "July 15, 2010" ("N/A" si absente ou invalide)."""
    parsed = _parse_date(date_string)
    if parsed is None:
        return "N/A"
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def year_from_date(date_string: Optional[str]) -> Optional[int]:
    """Extrait l'année d'une date TMDB."""
    parsed = _parse_date(date_string)
    return parsed.year if parsed else None


def format_runtime(minutes: Optional[int]) -> str:
    """Formate une durée en minutes : 148 -> "2h 28m", 45 -> "45m"."""
    if not minutes:
        return "N/A"
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def format_rating(vote_average: Any) -> str:
    """Note sur 10 avec une décimale, "N/A" si absente ou nulle."""
    if not vote_average:
        return "N/A"
    return f"{float(vote_average):.1f}"


def truncate_text(text: Optional[str], max_length: int) -> str:
    """Tronque un texte à max_length caractères et ajoute "..." si coupé."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def capitalize(text: str) -> str:
    """Met en majuscule la première lettre uniquement."""
    return text[:1].upper() + text[1:]


def format_number(number: int) -> str:
    """Sépare les milliers par des virgules : 27000 -> "27,000"."""
    return f"{number:,}"
