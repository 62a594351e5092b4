"""Tests du rapprochement de l'etat "vu" des episodes."""

import pytest

from controle_series.core.entities.catalog import Episode, Season
from controle_series.services.watch import parse_watched_form, reconcile_watched


def _episodes(*ids: int, watched: bool = False) -> list[Episode]:
    season = Season(number=1, id=1)
    for episode_id in ids:
        season.add_episode(Episode(number=episode_id, id=episode_id, watched=watched))
    return season.episodes


def _watched(episodes: list[Episode]) -> dict[int, bool]:
    return {episode.id: episode.watched for episode in episodes}


class TestReconcileWatched:
    """Tests de reconcile_watched."""

    def test_submitted_ids_become_watched_others_unwatched(self):
        episodes = _episodes(1, 2, 3, 4, watched=True)

        reconcile_watched({2, 3}, episodes)

        assert _watched(episodes) == {1: False, 2: True, 3: True, 4: False}

    def test_idempotent(self):
        episodes = _episodes(1, 2, 3, 4)

        reconcile_watched({2, 3}, episodes)
        first = _watched(episodes)
        reconcile_watched({2, 3}, episodes)

        assert _watched(episodes) == first == {1: False, 2: True, 3: True, 4: False}

    def test_empty_submission_clears_all(self):
        episodes = _episodes(1, 2, 3, watched=True)

        reconcile_watched(set(), episodes)

        assert _watched(episodes) == {1: False, 2: False, 3: False}

    def test_order_independent(self):
        forward = _episodes(1, 2, 3)
        backward = list(reversed(_episodes(1, 2, 3)))

        reconcile_watched([3, 1], forward)
        reconcile_watched([1, 3], backward)

        assert _watched(forward) == _watched(backward)

    def test_ids_outside_season_are_ignored(self):
        episodes = _episodes(1, 2)

        reconcile_watched({2, 99}, episodes)

        assert _watched(episodes) == {1: False, 2: True}


class TestParseWatchedForm:
    """Tests de l'extraction des IDs depuis le formulaire."""

    def test_only_keys_are_consulted(self):
        form = {"episodes[12]": "on", "episodes[15]": "off", "episodes[7]": ""}

        assert parse_watched_form(form) == {12, 15, 7}

    @pytest.mark.parametrize(
        "key",
        ["episodes[abc]", "episodes[]", "episode[3]", "_token", "episodes[3]x"],
    )
    def test_malformed_keys_are_ignored(self, key):
        assert parse_watched_form([key]) == set()

    def test_empty_form(self):
        assert parse_watched_form({}) == set()
