"""SQLite engines and read-only sessions for paging through a database file."""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session


def get_engine(sqlite_path: str, read_only: bool = False) -> Engine:
    """
    Create an engine for a SQLite file.

    A read-only engine opens the file with SQLite's URI mode=ro, so a missing
    file is an error instead of a new empty database.
    """
    if read_only:
        return create_engine(f"sqlite:///file:{sqlite_path}?mode=ro&uri=true", future=True)
    return create_engine(f"sqlite:///{sqlite_path}", future=True)


@contextmanager
def read_session(sqlite_path: str) -> Generator[Session, None, None]:
    """
    Open a session on a read-only engine for the length of the block.

    Nothing is committed; the engine is disposed on exit.
    """
    engine = get_engine(sqlite_path, read_only=True)
    session = Session(engine, autoflush=False)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
