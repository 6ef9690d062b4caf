"""Store client implementations for external row stores.

Each provider module exports a `Client` alias for its main client class,
along with its handle and cursor types.

Available providers:
- sqlite: SQLite via the sqlite3 driver
"""

from sqlite_fdw.providers import sqlite

__all__ = [
    "sqlite",
]
