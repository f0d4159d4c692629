"""Pytest configuration and fixtures."""

from typing import Dict, List

import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


class Person(Base):
    __tablename__ = "persons"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    age = Column(Integer)
    iq = Column(Integer)


TEST_DATA: List[Dict] = [
    {"id": 1, "name": "Don Jr", "age": 46, "iq": 1},
    {"id": 2, "name": "Potranka", "age": 44, "iq": 80},
    {"id": 3, "name": "Test Dude", "age": 7, "iq": 200},
    {"id": 4, "name": "Meh", "age": 77, "iq": 120},
    {"id": 5, "name": "Blah", "age": 3, "iq": 100},
    {"id": 6, "name": "Holliams", "age": 99, "iq": 50},
    {"id": 7, "name": "Smart Guy", "age": 44, "iq": 30},
]

EXAMPLE_DATA: List[Dict] = [
    {"id": 1, "name": "Bob Smith", "age": 48, "iq": None},
    {"id": 2, "name": "Joan Of Arc", "age": 312, "iq": None},
    {"id": 3, "name": "Morihei Ueshiba", "age": 69, "iq": None},
    {"id": 4, "name": "John Doe", "age": 19, "iq": None},
    {"id": 5, "name": "Silvio Santos", "age": 99, "iq": None},
]


def _seeded_session(rows: List[Dict]) -> Session:
    # In-memory SQLite keeps one connection per thread, so the session sees the seeded table
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    session.add_all([Person(**row) for row in rows])
    session.commit()
    return session


@pytest.fixture
def session():
    """In-memory database session seeded with TEST_DATA."""
    session = _seeded_session(TEST_DATA)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def example_session():
    """In-memory database session seeded with EXAMPLE_DATA."""
    session = _seeded_session(EXAMPLE_DATA)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def person_model():
    return Person


@pytest.fixture
def db_path(tmp_path):
    """Path to a SQLite file seeded with TEST_DATA."""
    path = tmp_path / "people.sqlite"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all([Person(**row) for row in TEST_DATA])
        session.commit()
    engine.dispose()
    return str(path)
