"""Alembic migration environment for the translations store."""
