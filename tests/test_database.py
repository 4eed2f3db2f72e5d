"""Tests for the transaction scope and session helpers."""

import pytest
from unittest.mock import MagicMock

from userstore.domain.models.user import Account
from userstore.infrastructure.database import transaction


class TestTransaction:
    def test_commits_and_closes_on_success(self):
        session = MagicMock()

        with transaction(lambda: session) as db:
            assert db is session

        session.commit.assert_called_once()
        session.rollback.assert_not_called()
        session.close.assert_called_once()

    def test_rolls_back_and_reraises_on_error(self):
        session = MagicMock()

        with pytest.raises(ValueError):
            with transaction(lambda: session):
                raise ValueError("boom")

        session.commit.assert_not_called()
        session.rollback.assert_called_once()
        session.close.assert_called_once()

    def test_rolled_back_rows_are_not_persisted(self, session_factory):
        with pytest.raises(RuntimeError):
            with transaction(session_factory) as db:
                db.add(Account(email="ghost@example.com", password_hash="x"))
                db.flush()
                raise RuntimeError("abort")

        db = session_factory()
        try:
            assert db.query(Account).count() == 0
        finally:
            db.close()

    def test_committed_rows_get_default_role(self, session_factory):
        with transaction(session_factory) as db:
            db.add(Account(email="kept@example.com", password_hash="x"))

        db = session_factory()
        try:
            assert db.query(Account).one().role == "USER"
        finally:
            db.close()

