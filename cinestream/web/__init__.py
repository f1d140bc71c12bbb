"""Interface web (FastAPI + Jinja2 + HTMX)."""
