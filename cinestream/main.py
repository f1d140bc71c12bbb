"""
Point d'entrée CLI de CineStream.

Initialise le container DI, configure le logging et fournit les commandes CLI :
lancement du serveur web et consultation de la watchlist.
"""

from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .logging_config import configure_logging
from .utils.helpers import format_rating, year_from_date

app = typer.Typer(
    name="cinestream",
    help="Découverte de films et watchlist personnelle",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineStream")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"URL API : {config.tmdb_base_url}")
    typer.echo(f"Langue : {config.language}")
    typer.echo(f"Cache : {config.cache_ttl_seconds:g} s")
    typer.echo(f"Stockage local : {config.storage_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineStream v{__version__}")


@app.command()
def watchlist() -> None:
    """Affiche la watchlist enregistrée."""
    entries = container.watchlist_service().entries
    if not entries:
        typer.echo("Watchlist vide")
        return

    table = Table(title=f"Watchlist ({len(entries)})")
    table.add_column("ID", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Année")
    table.add_column("Note", justify="right")
    for entry in entries:
        table.add_row(
            str(entry.get("id")),
            entry.get("title") or "",
            str(year_from_date(entry.get("release_date")) or "N/A"),
            format_rating(entry.get("vote_average")),
        )
    console.print(table)


@app.command(name="watchlist-clear")
def watchlist_clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Ne pas demander de confirmation")] = False,
) -> None:
    """Vide la watchlist."""
    if not yes and not typer.confirm("Vider toute la watchlist ?"):
        raise typer.Abort()
    container.watchlist_service().clear()
    typer.echo("Watchlist vidée")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web CineStream."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("cinestream.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        cache_debug=settings.log_cache_debug,
    )
    if not settings.tmdb_enabled:
        logger.warning("Clé API TMDB absente (CINESTREAM_TMDB_API_KEY)")

    logger.info("Démarrage de CineStream", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
