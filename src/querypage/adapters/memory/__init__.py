"""In-memory adapter – LINQ-to-objects style queries over iterables."""
from querypage.adapters.memory.query import InMemoryQuery

__all__ = ["InMemoryQuery"]
