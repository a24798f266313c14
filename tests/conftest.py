"""Pytest configuration and fixtures for pagination tests."""

import pytest
from sqlalchemy import Integer, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from paginatable.services.pagination import pagination


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)


USER_COUNT = 100


@pytest.fixture
def user_model():
    return User


@pytest.fixture
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    """Create a database session seeded with users 0..99."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    session.add_all([User(id=i) for i in range(USER_COUNT)])
    session.commit()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def restore_global_options():
    """Put the process-wide pagination defaults back after a test."""
    original = pagination.options
    try:
        yield pagination
    finally:
        pagination.options = original
