"""Adapters – concrete query engines (in-memory, SQLAlchemy)."""
