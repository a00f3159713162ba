# devconnect/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """Engine + session factory for one process. Created once by create_app."""

    def __init__(self, url: str, echo: bool = False):
        parsed = make_url(url)

        connect_args = {}
        engine_kwargs = {}
        # Required for SQLite when used with FastAPI/threads
        if parsed.drivername.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            # in-memory DBs live per connection; share one across the pool
            if parsed.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool

        self.url = url
        self.engine = create_engine(
            url,
            echo=echo,
            connect_args=connect_args,
            pool_pre_ping=True,  # avoid stale connections on resume
            **engine_kwargs,
        )
        self.SessionLocal = sessionmaker(autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        # side-effect import registers the tables on Base.metadata
        from devconnect import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """Yield a session from the app's Database and ensure it closes."""
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
