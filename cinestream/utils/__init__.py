"""Utilitaires partagés (constantes, formatage)."""
