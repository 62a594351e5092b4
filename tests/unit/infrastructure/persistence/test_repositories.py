"""
Tests des repositories SQLModel sur une base SQLite en memoire.

Verifie la persistance en cascade, la suppression en cascade,
la synchronisation des enfants en mise a jour et l'etat "vu".
"""

import pytest
from sqlalchemy import func
from sqlmodel import Session, select

from controle_series.core.entities.catalog import Episode, Season
from controle_series.core.exceptions import SeriesNotFoundError
from controle_series.infrastructure.persistence.models import (
    EpisodeModel,
    SeasonModel,
    SeriesModel,
)
from controle_series.infrastructure.persistence.repositories import (
    SQLModelSeasonRepository,
    SQLModelSeriesRepository,
)
from controle_series.services.catalog import build_series


def _count(session: Session, model) -> int:
    return session.exec(select(func.count()).select_from(model)).one()


class TestSeriesRepositorySave:
    """Tests de SQLModelSeriesRepository.save."""

    def test_creation_flow_persists_whole_tree(self, session):
        """2 saisons x 3 episodes donnent 2 saisons et 6 episodes bien rattaches."""
        repo = SQLModelSeriesRepository(session)

        saved = repo.save(build_series("Foo", 2, 3), flush=True)

        assert saved.id is not None
        assert _count(session, SeasonModel) == 2
        assert _count(session, EpisodeModel) == 6
        for season_model in session.exec(select(SeasonModel)).all():
            assert season_model.series_id == saved.id
            assert len(season_model.episodes) == 3
            assert all(ep.season_id == season_model.id for ep in season_model.episodes)

    def test_returned_entity_has_ids_and_back_references(self, session):
        repo = SQLModelSeriesRepository(session)

        saved = repo.save(build_series("Foo", 2, 3), flush=True)

        assert [season.number for season in saved.seasons] == [1, 2]
        for season in saved.seasons:
            assert season.id is not None
            assert season.series is saved
            for episode in season.episodes:
                assert episode.id is not None
                assert episode.season is season

    def test_save_without_flush_is_not_committed(self, engine):
        with Session(engine) as session:
            repo = SQLModelSeriesRepository(session)
            saved = repo.save(build_series("Pending", 1, 1))
            assert saved.id is not None
            session.rollback()

        with Session(engine) as session:
            assert _count(session, SeriesModel) == 0

    def test_flush_commits_pending_save(self, engine):
        with Session(engine) as session:
            repo = SQLModelSeriesRepository(session)
            repo.save(build_series("Pending", 1, 1))
            repo.flush()

        with Session(engine) as session:
            assert _count(session, SeriesModel) == 1

    def test_rename_existing_series(self, session):
        repo = SQLModelSeriesRepository(session)
        saved = repo.save(build_series("Ancien nom", 1, 2), flush=True)

        saved.name = "Nouveau nom"
        repo.save(saved, flush=True)

        assert repo.get_name(saved.id) == "Nouveau nom"
        assert _count(session, EpisodeModel) == 2

    def test_rename_keeps_watched_committed_elsewhere(self, engine):
        """Un renommage ne reecrit pas les etats "vu" confirmes par une autre session."""
        with Session(engine) as session:
            saved = SQLModelSeriesRepository(session).save(
                build_series("Breaking", 1, 2), flush=True
            )
        season_id = saved.seasons[0].id

        with Session(engine) as edit_session:
            edit_repo = SQLModelSeriesRepository(edit_session)
            assert edit_repo.get_by_id(saved.id) is not None

            with Session(engine) as watch_session:
                watch_repo = SQLModelSeasonRepository(watch_session)
                season = watch_repo.get_by_id(season_id)
                for episode in season.episodes:
                    episode.watched = True
                watch_repo.save_episodes(season.episodes, flush=True)

            previous = edit_repo.rename(saved.id, "Breaking Bad", flush=True)

        assert previous == "Breaking"
        with Session(engine) as session:
            season = SQLModelSeasonRepository(session).get_by_id(season_id)
            assert season.series.name == "Breaking Bad"
            assert [ep.watched for ep in season.episodes] == [True, True]

    def test_rename_unknown_raises(self, session):
        with pytest.raises(SeriesNotFoundError):
            SQLModelSeriesRepository(session).rename(999, "Fantome")

    def test_update_syncs_children(self, session):
        """Les enfants ajoutes sont inseres, les enfants retires sont supprimes."""
        repo = SQLModelSeriesRepository(session)
        saved = repo.save(build_series("Foo Bar", 2, 2), flush=True)

        first, second = saved.seasons
        saved.remove_season(second)
        first.remove_episode(first.episodes[0])
        first.add_episode(Episode(number=3))
        first.episodes[0].watched = True
        saved.add_season(Season(number=5))
        updated = repo.save(saved, flush=True)

        assert [season.number for season in updated.seasons] == [1, 5]
        assert [ep.number for ep in updated.seasons[0].episodes] == [2, 3]
        assert updated.seasons[0].episodes[0].watched is True
        assert _count(session, SeasonModel) == 2
        assert _count(session, EpisodeModel) == 2

    def test_save_unknown_id_raises(self, session):
        repo = SQLModelSeriesRepository(session)
        series = build_series("Fantome", 1, 1)
        series.id = 404

        with pytest.raises(SeriesNotFoundError):
            repo.save(series)


class TestSeriesRepositoryRead:
    """Tests de lecture des series."""

    def test_find_all_sorted_by_name(self, session):
        repo = SQLModelSeriesRepository(session)
        repo.save(build_series("Zorro", 1, 1), flush=True)
        repo.save(build_series("Arrow", 2, 1), flush=True)

        result = repo.find_all()

        assert [series.name for series in result] == ["Arrow", "Zorro"]
        assert len(result[0].seasons) == 2

    def test_find_all_empty(self, session):
        assert SQLModelSeriesRepository(session).find_all() == []

    def test_get_by_id(self, session):
        repo = SQLModelSeriesRepository(session)
        saved = repo.save(build_series("Breaking Bad", 1, 3), flush=True)

        found = repo.get_by_id(saved.id)

        assert found.name == "Breaking Bad"
        assert found.episode_count == 3
        assert repo.get_by_id(999) is None

    def test_get_name(self, session):
        repo = SQLModelSeriesRepository(session)
        saved = repo.save(build_series("Breaking Bad", 1, 1), flush=True)

        assert repo.get_name(saved.id) == "Breaking Bad"
        assert repo.get_name(999) is None


class TestSeriesRepositoryRemove:
    """Tests de la suppression en cascade."""

    def test_remove_cascades_to_seasons_and_episodes(self, session):
        repo = SQLModelSeriesRepository(session)
        doomed = repo.save(build_series("A supprimer", 2, 3), flush=True)
        kept = repo.save(build_series("A garder", 1, 2), flush=True)

        repo.remove_by_id(doomed.id)

        assert _count(session, SeriesModel) == 1
        assert _count(session, SeasonModel) == 1
        assert _count(session, EpisodeModel) == 2
        orphans = session.exec(
            select(SeasonModel).where(SeasonModel.series_id == doomed.id)
        ).all()
        assert orphans == []
        assert repo.get_by_id(kept.id) is not None

    def test_remove_unknown_raises_not_found(self, session):
        with pytest.raises(SeriesNotFoundError) as exc_info:
            SQLModelSeriesRepository(session).remove_by_id(42)

        assert exc_info.value.entity_id == 42


class TestSeasonRepository:
    """Tests de SQLModelSeasonRepository."""

    @pytest.fixture
    def saved(self, session):
        return SQLModelSeriesRepository(session).save(build_series("Foo Bar", 2, 3), flush=True)

    def test_get_by_id_links_full_series(self, session, saved):
        repo = SQLModelSeasonRepository(session)
        season_id = saved.seasons[1].id

        season = repo.get_by_id(season_id)

        assert season.number == 2
        assert season.series.name == "Foo Bar"
        assert any(s is season for s in season.series.seasons)
        assert [ep.number for ep in season.episodes] == [1, 2, 3]

    def test_get_by_id_unknown(self, session):
        assert SQLModelSeasonRepository(session).get_by_id(999) is None

    def test_list_by_series_ordered(self, session, saved):
        seasons = SQLModelSeasonRepository(session).list_by_series(saved.id)

        assert isinstance(seasons, list)
        assert [season.number for season in seasons] == [1, 2]

    def test_list_by_unknown_series_is_empty(self, session):
        assert SQLModelSeasonRepository(session).list_by_series(999) == []

    def test_listed_seasons_usable_after_session_close(self, engine):
        """Les saisons retournees ne dependent plus de la session."""
        with Session(engine) as session:
            series_id = SQLModelSeriesRepository(session).save(
                build_series("Foo Bar", 1, 2), flush=True
            ).id
        with Session(engine) as session:
            seasons = SQLModelSeasonRepository(session).list_by_series(series_id)

        assert [ep.number for ep in seasons[0].episodes] == [1, 2]
        assert seasons[0].series.name == "Foo Bar"

    def test_save_episodes_persists_watched(self, engine, saved):
        with Session(engine) as session:
            repo = SQLModelSeasonRepository(session)
            season = repo.get_by_id(saved.seasons[0].id)
            season.episodes[1].watched = True
            repo.save_episodes(season.episodes, flush=True)

        with Session(engine) as session:
            season = SQLModelSeasonRepository(session).get_by_id(saved.seasons[0].id)
            assert [ep.watched for ep in season.episodes] == [False, True, False]

    def test_save_episodes_skips_transient(self, session, saved):
        repo = SQLModelSeasonRepository(session)

        repo.save_episodes([Episode(number=9, watched=True)], flush=True)

        assert _count(session, EpisodeModel) == 6
