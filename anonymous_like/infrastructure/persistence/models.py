"""Table mappings for the tables this service reads and writes.

The schema is owned elsewhere; these declarations only drive query building
and are never used to create or migrate tables.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class StrategyModel(Base):
    __tablename__ = "strategies"
    __table_args__ = {"schema": "public"}

    id: Mapped[str] = mapped_column(String, primary_key=True)


class AnonLikeModel(Base):
    """One row per accepted anonymous like."""

    __tablename__ = "anon_likes"
    __table_args__ = {"schema": "public"}

    strategy: Mapped[str] = mapped_column(String, primary_key=True)
    ip_addr: Mapped[str] = mapped_column(String, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), primary_key=True, server_default=func.now()
    )
