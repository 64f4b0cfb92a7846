"""Database engine and session helpers."""

from .session import build_engine, build_session_factory, create_schema, drop_schema, session_scope

__all__ = ["build_engine", "build_session_factory", "create_schema", "drop_schema", "session_scope"]
