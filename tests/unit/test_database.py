"""Unit tests for the request session dependency."""

import pytest
from sqlalchemy.orm import Session

from catalog_filters.config import settings
from catalog_filters.db import database


@pytest.mark.unit
class TestGetSession:
    def test_yields_session_on_sync_engine(self):
        sessions = database.get_session()
        session = next(sessions)

        assert isinstance(session, Session)
        assert session.get_bind() is database.sync_engine
        sessions.close()

    def test_module_exposes_only_request_helpers(self):
        assert not hasattr(database, "init_db_sync")
        assert not hasattr(settings, "opensearch_url")
