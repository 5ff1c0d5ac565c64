"""
Counter ORM model.

Named integer counters. Incremented only through a single
UPDATE ... RETURNING statement so concurrent writers never lose updates.

Dependencies: sqlalchemy
System role: Persistent query counter storage
"""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from docqa.boundary.db.base import Base, UpdatedAt


class CounterModel(Base):
    """Named counter row."""

    __tablename__ = "counters"
    __table_args__ = (CheckConstraint("value >= 0", name="non_negative"),)

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[int] = mapped_column(default=0)
    updated_at: Mapped[UpdatedAt]

    def __repr__(self) -> str:
        return f"<CounterModel(name={self.name}, value={self.value})>"
