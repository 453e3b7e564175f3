"""
querypage – conditional filtering, sorting and offset pagination for lazy queries.

Import path convention::

    from querypage.application.pagination import Filters, Sorts, paginate
    from querypage.adapters.memory import InMemoryQuery
    from querypage.adapters.sqlalchemy import SqlAlchemyQuery, AsyncSqlAlchemyQuery
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
