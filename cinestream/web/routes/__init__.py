"""Routes de l'interface web."""
