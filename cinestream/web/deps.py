"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 utilisées par toutes les routes et l'accès
au Container DI attaché à l'application.
"""

import tomllib
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..container import Container
from ..utils.constants import CLEAR_WATCHLIST_CONFIRM

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version dynamique lue depuis pyproject.toml, disponible dans tous les templates
with open(_PROJECT_ROOT / "pyproject.toml", "rb") as f:
    _pyproject = tomllib.load(f)
templates.env.globals["app_version"] = f"CineStream v{_pyproject['project']['version']}"
templates.env.globals["clear_watchlist_confirm"] = CLEAR_WATCHLIST_CONFIRM


def get_container(request: Request) -> Container:
    """Container DI initialisé au démarrage de l'application."""
    return request.app.state.container
