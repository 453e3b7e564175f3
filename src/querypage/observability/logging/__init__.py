"""Observability – structlog helpers."""
from querypage.observability.logging.factory import JsonLoggerFactory
from querypage.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
