"""
Database handle, session management, and base model.

Every model inherits from Base. The Database object owns the
engine and the session factory; it is opened when the
application starts and disposed when it stops. Every request
gets a session from get_db().
"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase


class Base(DeclarativeBase):
    pass


class Database:
    """Engine plus session factory for one database URL."""

    def __init__(self, url: str):
        connect_args = {}
        if url.startswith("sqlite"):
            # Requests are served from a thread pool
            connect_args = {"check_same_thread": False}

        # pool_pre_ping tests connections before using them, which
        # handles a restarted database or a stale connection.
        self.engine = create_engine(
            url,
            connect_args=connect_args,
            pool_pre_ping=True,
        )

        # autocommit=False: the API layer decides when to commit,
        # so multi-statement operations are all-or-nothing.
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
        )

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


# --- Dependency for FastAPI ---
def get_db(request: Request):
    """
    Provide a database session for a single request.

    The session comes from the Database attached to the app at
    startup, and is always closed when the request finishes,
    even if an error occurs.
    """
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
