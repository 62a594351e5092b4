"""
Point d'entree de Controle Series.

Configure le logging, initialise la base de donnees et lance le serveur web.
"""

from typing import Annotated

import typer
from loguru import logger

from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="controle-series",
    help="Gestion de series TV et des episodes vus",
)
container = Container()

VERSION = "0.1.0"


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"Cache des saisons : {config.season_cache_ttl:g} s ({config.season_cache_maxsize} entrees max)")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Controle Series v{VERSION}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("controle_series.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de Controle Series", version=VERSION)

    app()


if __name__ == "__main__":
    main()
