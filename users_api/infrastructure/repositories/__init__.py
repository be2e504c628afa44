"""
Repository implementations.

- postgres/: runtime implementation over psycopg_pool
- in_memory/: thread-safe implementation for tests and local dev
"""

from .in_memory import InMemoryUserRepository
from .postgres import PostgresUserRepository

__all__ = ["InMemoryUserRepository", "PostgresUserRepository"]
