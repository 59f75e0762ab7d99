"""Type definitions for UI tree path queries."""

from .models import EngineSettings, NodeSnapshot, NodeInfo, QueryResult

__all__ = [
    "EngineSettings",
    "NodeSnapshot",
    "NodeInfo",
    "QueryResult",
]
