"""Stockage local persistant (équivalent du localStorage navigateur)."""

from cinestream.adapters.storage.local_storage import DiskLocalStorage

__all__ = ["DiskLocalStorage"]
