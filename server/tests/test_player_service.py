"""Tests for player, score and asteroid persistence services."""

import pytest

from api.errors import AsteroidNotFoundError, PlayerAlreadyExistsError, PlayerNotFoundError
from models.schemas import AsteroidCreate
from services.asteroid_service import AsteroidService
from services.player_service import DatabaseScoreBoard, PlayerService


def test_add_player_trims_and_rejects_case_folded_duplicates(db_session):
    service = PlayerService(db_session)

    player = service.add_player("  Ann ")
    assert player.name == "Ann"

    with pytest.raises(PlayerAlreadyExistsError):
        service.add_player("ANN")


def test_lookup_ignores_case(db_session):
    service = PlayerService(db_session)
    service.add_player("Ann")

    assert service.get_player("aNN").name == "Ann"
    with pytest.raises(PlayerNotFoundError):
        service.get_player("bob")


def test_add_score_creates_missing_player(db_session):
    service = PlayerService(db_session)

    service.add_score("Zed", 14)
    service.add_score("zed", 20)

    assert [p.name for p in service.list_players()] == ["Zed"]
    assert sorted(s.score for s in service.get_scores("ZED")) == [14, 20]


def test_top_scores_ranks_best_score_per_player(db_session):
    service = PlayerService(db_session)
    service.add_player("Idle")
    for name, score in [("a", 5), ("b", 30), ("a", 50), ("c", 10), ("d", 1), ("e", 2), ("f", 3)]:
        service.add_score(name, score)

    top = service.top_scores()

    assert len(top) == 5
    assert top[0] == {"name": "a", "high_score": 50}
    assert [t["high_score"] for t in top] == [50, 30, 10, 3, 2]
    assert "Idle" not in [t["name"] for t in top]


def test_players_without_scores_rank_at_zero(db_session):
    service = PlayerService(db_session)
    service.add_player("Idle")
    assert service.top_scores() == [{"name": "Idle", "high_score": 0}]


def test_rename_and_delete(db_session):
    service = PlayerService(db_session)
    service.add_player("Ann")
    service.add_player("Bob")
    service.add_score("Ann", 3)

    with pytest.raises(PlayerAlreadyExistsError):
        service.rename_player("ann", "BOB")
    with pytest.raises(PlayerNotFoundError):
        service.rename_player("nobody", "Someone")

    renamed = service.rename_player("ann", "Annie")
    assert renamed.name == "Annie"
    assert [s.score for s in service.get_scores("annie")] == [3]

    assert service.delete_player("ANNIE") == 1
    assert service.delete_player("annie") == 0
    assert [p.name for p in service.list_players()] == ["Bob"]


def test_scoreboard_uses_its_own_sessions(database):
    scoreboard = DatabaseScoreBoard(database.session_factory)
    assert scoreboard.fetch_high_score() == 0

    scoreboard.submit_score("ann", 12)
    scoreboard.submit_score("bob", 40)

    assert scoreboard.fetch_high_score() == 40
    assert [s["name"] for s in scoreboard.fetch_top_scores()] == ["bob", "ann"]


def test_asteroid_catalog_crud(db_session):
    service = AsteroidService(db_session)
    created = service.add_asteroid(
        AsteroidCreate(size="Large", speed=7, material="Iron", type="Boss", spawn_rate=5)
    )

    assert service.get_asteroid(created.id).material == "Iron"
    assert [a.id for a in service.list_asteroids()] == [created.id]

    assert service.delete_asteroid(created.id) is True
    assert service.delete_asteroid(created.id) is False
    with pytest.raises(AsteroidNotFoundError):
        service.get_asteroid(created.id)


def test_racing_insert_of_same_name_is_a_conflict(db_session, monkeypatch):
    service = PlayerService(db_session)
    service.add_player("Ann")
    # The other request's row lands after our existence check
    monkeypatch.setattr(service, "find_player", lambda name: None)

    with pytest.raises(PlayerAlreadyExistsError):
        service.add_player("ann")


def test_racing_first_score_keeps_the_score(db_session, monkeypatch):
    service = PlayerService(db_session)
    service.add_player("Ann")
    real_find = service.find_player
    lookups = []

    def stale_then_real(name):
        lookups.append(name)
        return None if len(lookups) == 1 else real_find(name)

    monkeypatch.setattr(service, "find_player", stale_then_real)
    service.add_score("ann", 5)
    monkeypatch.undo()

    assert [p.name for p in service.list_players()] == ["Ann"]
    assert [s.score for s in service.get_scores("Ann")] == [5]
