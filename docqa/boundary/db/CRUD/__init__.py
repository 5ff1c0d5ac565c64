"""CRUD operations for ORM models."""

from docqa.boundary.db.CRUD.base_crud import BaseCRUD
from docqa.boundary.db.CRUD.counter_crud import CounterCRUD, counter_crud
from docqa.boundary.db.CRUD.query_log_crud import QueryLogCRUD, query_log_crud

__all__ = [
    "BaseCRUD",
    "CounterCRUD",
    "QueryLogCRUD",
    "counter_crud",
    "query_log_crud",
]
