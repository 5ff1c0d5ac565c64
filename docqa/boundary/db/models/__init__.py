"""ORM models."""

from docqa.boundary.db.models.counter_model import CounterModel
from docqa.boundary.db.models.query_log_model import QueryLogModel

__all__ = ["CounterModel", "QueryLogModel"]
