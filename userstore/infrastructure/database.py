"""
Database engine, session factory and transaction scope.
"""

from contextlib import contextmanager
from typing import Callable, Iterator

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from userstore.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)

# pool_pre_ping avoids handing out connections dropped by the server while idle
engine = create_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

Base = declarative_base()


@contextmanager
def transaction(session_factory: Callable[[], Session] = SessionLocal) -> Iterator[Session]:
    """One unit of work: commit on normal exit, roll back on any exception."""
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Engine = engine) -> None:
    """Create all tables. Development bootstrap; production schemas come from migrations."""
    # Import all models so SQLAlchemy knows about them
    from userstore.domain.models.user import Account  # noqa: F401
    from userstore.domain.models.profile import Profile  # noqa: F401
    from userstore.domain.models.profile_picture import ProfilePicture  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created/verified", tables=sorted(Base.metadata.tables))
