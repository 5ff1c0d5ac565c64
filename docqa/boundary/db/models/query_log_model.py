"""
Query log ORM model.

One row per answered query: question, composed answer, context size and timing.

Dependencies: sqlalchemy
System role: Persistent query log storage
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from docqa.boundary.db.base import Base, CreatedAt, UUIDPrimaryKey


class QueryLogModel(Base):
    """
    Query log entry.

    Attributes:
        query: User question
        answer: Composed answer, or "Error: ..." for failed queries
        chunks_retrieved: Number of context chunks used
        duration_ms: End-to-end processing time in milliseconds
        created_at: When the entry was recorded (indexed for newest-first reads)
    """

    __tablename__ = "query_logs"

    id: Mapped[UUIDPrimaryKey]
    query: Mapped[str] = mapped_column(Text)
    answer: Mapped[str] = mapped_column(Text)
    chunks_retrieved: Mapped[int] = mapped_column(default=0)
    duration_ms: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[CreatedAt]

    def __repr__(self) -> str:
        return f"<QueryLogModel(id={self.id}, chunks_retrieved={self.chunks_retrieved})>"
