from __future__ import annotations

import os
import re
from contextlib import contextmanager
from typing import Iterator

import psycopg

_SCHEMA_RE = re.compile(r"^[a-z_][a-z0-9_]{0,62}$")


def get_database_url() -> str:
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set")
    return url


@contextmanager
def db_conn(schema: str | None = None) -> Iterator[psycopg.Connection]:
    """Yield a read connection to the tree database.

    - If *schema* is provided (or ``TREE_DB_SCHEMA`` is set), the
      ``search_path`` is set to that schema followed by ``public``.
    - Otherwise the server default ``search_path`` is used.
    """

    schema = schema or (os.environ.get("TREE_DB_SCHEMA") or "").strip() or None
    if schema is not None and not _SCHEMA_RE.match(schema):
        raise ValueError(f"invalid schema name: {schema!r}")

    with psycopg.connect(get_database_url()) as conn:
        if schema:
            conn.execute(f"SET search_path TO {schema}, public")
        yield conn
