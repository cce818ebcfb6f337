"""SQLite database handle, schema and unit of work."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    event,
)
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from fitness_tracker.domain.errors import StorageError
from fitness_tracker.domain.profile import DEFAULT_PROFILE, PROFILE_ID

logger = logging.getLogger(__name__)

metadata = MetaData()

workouts_table = Table(
    "workouts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=False),
    Column("date", Text, nullable=False),
    Column("duration", Integer),
    Column("calories", Integer),
    sqlite_autoincrement=True,
)

exercises_table = Table(
    "exercises",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("workout_id", Integer, ForeignKey("workouts.id"), nullable=False),
    Column("name", Text, nullable=False),
    Column("sets", Integer),
    Column("reps", Integer),
    Column("weight", Float),
    sqlite_autoincrement=True,
)

user_profile_table = Table(
    "user_profile",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", Text, server_default="User"),
    Column("weight", Float),
    Column("height", Float),
    Column("goal", Text),
    CheckConstraint(f"id = {PROFILE_ID}", name="single_profile"),
)


def create_sqlite_engine(url: str) -> Engine:
    """Create an engine for a SQLite URL with foreign keys enforced."""
    kwargs: dict[str, object] = {"connect_args": {"check_same_thread": False}}
    if make_url(url).database in {None, "", ":memory:"}:
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    event.listen(engine, "connect", _enable_foreign_keys)
    return engine


def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@dataclass
class SqliteDatabase:
    """Owns the process-wide engine and hands out scoped connections."""

    engine: Engine

    @classmethod
    def create(cls, url: str) -> "SqliteDatabase":
        """Create a database handle for the given URL."""
        return cls(engine=create_sqlite_engine(url))

    def initialize(self) -> None:
        """Create tables if absent and seed the default profile once."""
        with self.transaction() as connection:
            metadata.create_all(connection)
            connection.execute(
                sqlite_insert(user_profile_table)
                .values(
                    id=PROFILE_ID,
                    name=DEFAULT_PROFILE.name,
                    weight=DEFAULT_PROFILE.weight,
                    height=DEFAULT_PROFILE.height,
                    goal=DEFAULT_PROFILE.goal,
                )
                .on_conflict_do_nothing(index_elements=["id"])
            )
        logger.info("Database initialized", extra={"url": str(self.engine.url)})

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction, rolled back on any error."""
        try:
            with self.engine.begin() as connection:
                yield connection
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Yield a connection for read-only queries."""
        try:
            with self.engine.connect() as connection:
                yield connection
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def close(self) -> None:
        """Dispose of pooled connections."""
        self.engine.dispose()
