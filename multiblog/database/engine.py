from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, SQLModel, Session
from typing import Generator

from multiblog.core.config import settings

DATABASE_URL = settings.database_url


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are enabled per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        new_engine = create_engine(
            url,
            echo=settings.SQL_ECHO,
            connect_args={"check_same_thread": False},
        )
    else:
        new_engine = create_engine(
            url,
            echo=settings.SQL_ECHO,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600
        )
    enable_sqlite_foreign_keys(new_engine)
    return new_engine


engine = build_engine(DATABASE_URL)


def create_db_and_tables():
    # Register table models on SQLModel.metadata
    from multiblog.models import blog  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
