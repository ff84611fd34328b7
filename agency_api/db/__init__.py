"""Database helpers (store handle export)."""

from .session import Base, Database, build_engine

__all__ = ["Base", "Database", "build_engine"]
