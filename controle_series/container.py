"""
Container d'injection de dependances via dependency-injector.

Fournit les dependances de niveau application : configuration, base de
donnees et cache des saisons. Les sessions et repositories sont propres a
chaque requete et fournis par les dependances FastAPI de web/deps.py.
"""

from dependency_injector import containers, providers

from .adapters.cache import ReadThroughCache
from .config import Settings
from .infrastructure.persistence.database import init_db


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        cache = container.season_cache()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Cache des saisons - Singleton partage entre toutes les requetes
    season_cache = providers.Singleton(
        ReadThroughCache,
        default_ttl=config.provided.season_cache_ttl,
        maxsize=config.provided.season_cache_maxsize,
    )
