"""SQLAlchemy ORM model for the Dog entity."""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petbook.infrastructure.database.base import Base


class DogModel(Base):
    """ORM model — maps to the 'dogs' collection table."""

    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    breed: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("age >= 0", name="age_nonneg"),
    )

    def __repr__(self) -> str:
        return f"<DogModel(id={self.id}, name='{self.name}', breed='{self.breed}')>"
