"""Opening the application database."""

from __future__ import annotations

import re

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import config

_MAX_PORT = 2**32 - 1
_engine: Engine | None = None


def _parse_port(port: str | int) -> int:
    text = str(port)
    if not re.fullmatch(r"[0-9]+", text):
        return 0
    return min(int(text), _MAX_PORT)


def build_dsn(host: str, port: str | int, user: str, password: str, name: str) -> str:
    """Return a libpq connection string; an unparsable port becomes 0."""
    return (
        f"host={host} port={_parse_port(port)} user={user} "
        f"password={password} dbname={name} sslmode=disable"
    )


def connect_db(url: str | None = None) -> Engine:
    """Open and check the database, remembering the engine for ``get_engine``.

    Without ``url`` the PostgreSQL settings are read from the configuration.
    """
    global _engine
    try:
        if url is None:
            dsn = build_dsn(
                config("DB_HOST"),
                config("DB_PORT"),
                config("DB_USER"),
                config("DB_PASSWORD"),
                config("DB_NAME"),
            )
            engine = create_engine("postgresql://", connect_args={"dsn": dsn})
        else:
            engine = create_engine(url)
        with engine.connect():
            pass
    except (SQLAlchemyError, ImportError) as err:
        raise RuntimeError("failed to connect database" + str(err)) from err
    _engine = engine
    print("Connection Opened to Database")
    return engine


def get_engine() -> Engine:
    """Return the engine opened by ``connect_db``."""
    if _engine is None:
        raise RuntimeError("database is not connected")
    return _engine