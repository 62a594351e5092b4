"""
Modeles SQLModel pour la base de donnees Controle Series.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/) ;
la conversion se fait dans les repositories.

Tables:
- series: Series TV
- seasons: Saisons, rattachees a une serie
- episodes: Episodes, rattaches a une saison, avec l'etat "vu"

Les suppressions sont propagees en cascade : une serie emporte ses saisons,
une saison emporte ses episodes. Un enfant retire de la collection de son
parent est supprime (delete-orphan).
"""

from typing import Optional

from sqlmodel import Field, Relationship, SQLModel

_CHILDREN = {"cascade": "all, delete-orphan"}


class SeriesModel(SQLModel, table=True):
    """Modele representant une serie TV."""

    __tablename__ = "series"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)

    seasons: list["SeasonModel"] = Relationship(
        back_populates="series",
        sa_relationship_kwargs={**_CHILDREN, "order_by": "SeasonModel.number"},
    )


class SeasonModel(SQLModel, table=True):
    """Modele representant une saison, liee a une serie via series_id."""

    __tablename__ = "seasons"

    id: Optional[int] = Field(default=None, primary_key=True)
    number: int
    series_id: Optional[int] = Field(
        default=None, foreign_key="series.id", ondelete="CASCADE", index=True
    )

    series: Optional["SeriesModel"] = Relationship(back_populates="seasons")
    episodes: list["EpisodeModel"] = Relationship(
        back_populates="season",
        sa_relationship_kwargs={**_CHILDREN, "order_by": "EpisodeModel.number"},
    )


class EpisodeModel(SQLModel, table=True):
    """Modele representant un episode, lie a une saison via season_id."""

    __tablename__ = "episodes"

    id: Optional[int] = Field(default=None, primary_key=True)
    number: int
    watched: bool = Field(default=False)
    season_id: Optional[int] = Field(
        default=None, foreign_key="seasons.id", ondelete="CASCADE", index=True
    )

    season: Optional["SeasonModel"] = Relationship(back_populates="episodes")
