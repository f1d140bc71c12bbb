"""
Exécution des requêtes HTTP vers l'API TMDB.

Convertit les erreurs de transport httpx et les statuts non-2xx en FetchError,
l'échec unique et reconnaissable que voient les couches supérieures.
Aucune relance automatique : une requête échouée remonte immédiatement.

Usage:
    async with httpx.AsyncClient(base_url=...) as client:
        data = await fetch_json(client, "/movie/popular", params={"page": 1})
"""

from typing import Any, Mapping, Optional

import httpx
from loguru import logger

from cinestream.core.ports.api_clients import FetchError


def clean_params(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Retire les paramètres vides (None, "", 0) avant l'envoi."""
    return {key: value for key, value in (params or {}).items() if value}


async def fetch_json(
    client: httpx.AsyncClient,
    endpoint: str,
    params: Optional[Mapping[str, Any]] = None,
) -> Any:
    """
    Exécute un GET et décode la réponse JSON.

    Args:
        client: Client httpx async configuré (base_url, authentification)
        endpoint: Chemin relatif à la base de l'API
        params: Paramètres de requête supplémentaires

    Returns:
        Le corps JSON décodé

    Raises:
        FetchError: Erreur de transport, statut non-2xx ou corps non-JSON
    """
    try:
        response = await client.get(endpoint, params=clean_params(params))
    except httpx.TransportError as e:
        logger.warning(f"Erreur de transport sur {endpoint}: {e}")
        raise FetchError(endpoint) from e

    if not response.is_success:
        logger.warning(f"Statut {response.status_code} sur {endpoint}")
        raise FetchError(endpoint, response.status_code)

    try:
        return response.json()
    except ValueError as e:
        logger.warning(f"Réponse non-JSON sur {endpoint}")
        raise FetchError(endpoint, response.status_code) from e
