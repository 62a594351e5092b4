"""
Exceptions du domaine catalogue.

Les erreurs "non trouvé" sont transformées en réponse 404 par la couche web.
"""


class CatalogError(Exception):
    """Erreur de base du catalogue de séries."""


class CatalogNotFoundError(CatalogError):
    """Entité du catalogue introuvable."""

    entity_type = "entité"

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity_type} {entity_id} introuvable")


class SeriesNotFoundError(CatalogNotFoundError):
    """Série introuvable."""

    entity_type = "série"


class SeasonNotFoundError(CatalogNotFoundError):
    """Saison introuvable."""

    entity_type = "saison"
