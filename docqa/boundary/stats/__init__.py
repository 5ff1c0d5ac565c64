"""
Query statistics boundary: counter and query log stores.

Implementations live in counter_service and query_logger; this package
exports only the shared schema so provider interfaces can import it.

Dependencies: pydantic
System role: Shared counter and query log adapters
"""

from docqa.boundary.stats.schemas import QueryLogEntry

__all__ = ["QueryLogEntry"]
