"""
Query statistics schemas.

Dependencies: pydantic
System role: Type definitions for the query log
"""

from datetime import datetime

from pydantic import BaseModel, Field


class QueryLogEntry(BaseModel):
    """One answered query as recorded by the query logger."""

    timestamp: datetime = Field(description="When the query was recorded (UTC)")
    query: str = Field(description="User question")
    answer: str = Field(description="Composed answer or error text")
    chunks_retrieved: int = Field(default=0, description="Chunks used as context")
    duration_ms: int = Field(default=0, description="End-to-end processing time")
