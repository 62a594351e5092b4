"""
Formulaires de saisie des séries.

Les règles de validation sont portées par des modèles pydantic ; les erreurs
sont converties en messages par champ pour être réaffichées dans le formulaire.
"""

from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

SERIES_NAME_MIN_LENGTH = 5

F = TypeVar("F", bound=BaseModel)

_MESSAGES = {
    "missing": "Ce champ est obligatoire",
    "string_too_short": "Doit contenir au moins {min_length} caractères",
    "string_too_long": "Doit contenir au plus {max_length} caractères",
    "int_parsing": "Valeur numérique attendue",
    "int_from_float": "Nombre entier attendu",
    "greater_than_equal": "Doit être supérieur ou égal à {ge}",
    "less_than_equal": "Doit être inférieur ou égal à {le}",
}


class SeriesEditForm(BaseModel):
    """Formulaire d'édition : seul le nom est modifiable."""

    model_config = ConfigDict(str_strip_whitespace=True)

    series_name: str = Field(min_length=SERIES_NAME_MIN_LENGTH, max_length=255)


class SeriesCreateForm(SeriesEditForm):
    """Formulaire de création : nom, nombre de saisons et d'épisodes par saison."""

    seasons_quantity: int = Field(ge=1, le=100)
    episodes_per_season: int = Field(ge=1, le=500)


def validate_form(
    form_class: type[F], data: dict[str, Any]
) -> tuple[Optional[F], dict[str, str]]:
    """
    Valide les données d'un formulaire.

    Returns:
        (formulaire validé, {}) ou (None, {champ: message})
    """
    try:
        return form_class.model_validate(data), {}
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__all__"
            template = _MESSAGES.get(error["type"])
            message = template.format(**error.get("ctx", {})) if template else error["msg"]
            errors.setdefault(field, message)
        return None, errors
