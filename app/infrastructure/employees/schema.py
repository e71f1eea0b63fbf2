"""
Relational schema and engine construction for the employee store.

Tables are created on startup with ``metadata.create_all``; there is no
migration tooling.
"""

import logging

from sqlalchemy import Column, Integer, MetaData, Numeric, String, Table, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

metadata = MetaData()

employees_table = Table(
    "employees",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(50), nullable=False),
    Column("last_name", String(50), nullable=False),
    Column("email", String(320), nullable=False),
    Column("department", Text, nullable=False),
    Column("salary", Numeric(12, 2), nullable=False),
)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared across the request thread pool, and an
    in-memory SQLite database is pinned to a single connection so that every
    session sees the same data.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, echo=echo, **kwargs)


def init_schema(engine: Engine) -> None:
    """Create the employees table if it does not exist yet."""
    metadata.create_all(engine)
    logger.info("Employee schema ready on %s", engine.url.render_as_string(hide_password=True))
