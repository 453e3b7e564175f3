"""Kernel query port."""
from querypage.kernel.query.port import Queryable

__all__ = ["Queryable"]
