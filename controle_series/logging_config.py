"""
Configuration du logging de Controle Series via loguru.

Deux sorties :
- console : colorée, au niveau demandé, pour suivre le serveur
- fichier JSON (optionnel) : toujours en DEBUG, limité aux enregistrements
  du paquet controle_series (hits/miss du cache des saisons, créations,
  renommages, suppressions, marquages "vu")
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Seuls les enregistrements émis par ce paquet vont dans le fichier
CATALOG_LOGGER = "controle_series"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/controle_series.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    enqueue: bool = True,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG affiche les hits/miss du cache)
        log_file : Fichier JSON rotatif, ou None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
        enqueue : Écriture du fichier via une file ; les routes synchrones
            s'exécutent dans le pool de threads d'uvicorn
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        filter=CATALOG_LOGGER,
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=enqueue,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
