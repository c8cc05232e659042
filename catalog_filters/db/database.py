"""Database engine and session setup."""

from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from catalog_filters.config import settings

sync_engine = create_engine(settings.postgres_url_sync, pool_pre_ping=True)

SessionLocal = sessionmaker(bind=sync_engine, expire_on_commit=False)


def get_session() -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    with SessionLocal() as session:
        yield session
