"""Entités du domaine."""

from cinestream.core.entities.movie import (
    HOMEPAGE_CATEGORIES,
    Category,
    CategorySpec,
    resolve_category,
    watchlist_projection,
)

__all__ = [
    "HOMEPAGE_CATEGORIES",
    "Category",
    "CategorySpec",
    "resolve_category",
    "watchlist_projection",
]
