"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, utc_now: Declarative base and UTC clock for column defaults
  - get_async_engine(), get_async_session_factory(), init_models(): Connection management
  - CounterModel, QueryLogModel: Stored entities
  - counter_crud, query_log_crud: CRUD operation singletons

Dependencies: sqlalchemy, docqa.configs
System role: Database adapter for the query counter and query log
"""

from docqa.boundary.db.base import Base, utc_now
from docqa.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
    init_models,
)
from docqa.boundary.db.models import CounterModel, QueryLogModel
from docqa.boundary.db.CRUD import counter_crud, query_log_crud

__all__ = [
    "Base",
    "utc_now",
    "get_async_engine",
    "get_async_session_factory",
    "init_models",
    "CounterModel",
    "QueryLogModel",
    "counter_crud",
    "query_log_crud",
]
