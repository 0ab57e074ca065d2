"""Tests for the walker session service."""

import pytest

from pathwalker.core.exceptions import NoStartError, WalkerCompletedError
from pathwalker.core.grid import Position, to_grid
from pathwalker.services.session_service import SessionService


TINY_MAP = ["@-A-x"]


class TestSessionService:
    """Tests for in-memory walker sessions."""

    def test_create_session(self, session_service):
        session = session_service.create_session(to_grid(TINY_MAP), map_name="tiny")

        assert session.id.startswith("sess_")
        assert session.map_name == "tiny"
        assert session.status == "active"
        assert session.state.path == "@"
        assert session_service.get_session(session.id) is session

    def test_custom_session_id(self, session_service):
        session = session_service.create_session(to_grid(TINY_MAP), session_id="mine")
        assert session_service.get_session("mine") is session

    def test_create_session_without_start(self, session_service):
        with pytest.raises(NoStartError):
            session_service.create_session(to_grid(["--x"]))
        assert len(session_service) == 0

    def test_get_unknown_session(self, session_service):
        assert session_service.get_session("sess_missing") is None

    def test_move_and_wrong_moves(self, session_service):
        session = session_service.create_session(to_grid(TINY_MAP))

        assert session_service.move(session.id, "up").accepted is False
        assert session_service.move(session.id, "right").status == "moved"
        assert session.wrong_moves == 1
        assert session.state.position == Position(1, 0)

    def test_move_to_completion(self, session_service):
        session = session_service.create_session(to_grid(TINY_MAP))

        results = [session_service.move(session.id, "right") for _ in range(4)]

        assert results[-1].status == "completed"
        assert session.status == "completed"
        assert session.completed_at is not None
        assert session.state.letters == "A"

        with pytest.raises(WalkerCompletedError):
            session_service.move(session.id, "right")

    def test_move_unknown_session(self, session_service):
        with pytest.raises(KeyError):
            session_service.move("sess_missing", "right")

    def test_end_session(self, session_service):
        session = session_service.create_session(to_grid(TINY_MAP))

        assert session_service.end_session(session.id) is True
        assert session_service.get_session(session.id) is None
        assert session_service.end_session(session.id) is False

    def test_oldest_session_evicted(self):
        service = SessionService(max_sessions=2)
        first = service.create_session(to_grid(TINY_MAP))
        second = service.create_session(to_grid(TINY_MAP))
        third = service.create_session(to_grid(TINY_MAP))

        assert len(service) == 2
        assert service.get_session(first.id) is None
        assert service.get_session(second.id) is second
        assert service.get_session(third.id) is third
