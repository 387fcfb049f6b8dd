"""SQLAlchemy models for the bizdash record store.

One table per entity kind. Every row carries the owning ``user_id`` and
every query filters on it, so each table holds one collection per user.
``seq`` keeps insertion order; ``id`` is the generated record identifier.
Timestamps are stored naive, in UTC.
"""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    Numeric,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def utcnow() -> datetime:
    """Current time as a naive UTC timestamp."""
    return datetime.now(UTC).replace(tzinfo=None)


class Client(Base):
    """Client model."""

    __tablename__ = "clients"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)


class Project(Base):
    """Project model."""

    __tablename__ = "projects"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    start_date = Column(DateTime, default=utcnow, nullable=False)
    end_date = Column(DateTime, nullable=True)


class Service(Base):
    """Service offering model."""

    __tablename__ = "services"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(String, nullable=True)
    end_date = Column(DateTime, nullable=True)


class Revenue(Base):
    """Revenue model."""

    __tablename__ = "revenues"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(DateTime, nullable=False)
    description = Column(String, nullable=True)


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    Writes run on a background worker thread, so SQLite connections must be
    usable from a thread other than the one that opened them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
