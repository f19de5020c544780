"""SQLAlchemy ORM model for the Cat entity."""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petbook.infrastructure.database.base import Base


class CatModel(Base):
    """ORM model — maps to the 'cats' collection table."""

    __tablename__ = "cats"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    beds_owned: Mapped[int] = mapped_column(Integer, nullable=False)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("beds_owned >= 0", name="beds_owned_nonneg"),
    )

    def __repr__(self) -> str:
        return f"<CatModel(id={self.id}, name='{self.name}', beds={self.beds_owned})>"
