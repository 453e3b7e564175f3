"""SQLAlchemy adapter – blocking and async queries over a ``Select``."""
from querypage.adapters.sqlalchemy.query import AsyncSqlAlchemyQuery, SqlAlchemyQuery

__all__ = ["AsyncSqlAlchemyQuery", "SqlAlchemyQuery"]
