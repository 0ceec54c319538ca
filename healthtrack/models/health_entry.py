from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from healthtrack.db.base import Base
from healthtrack.utils.timezone import utc_now

METRIC_FIELDS = (
    "sleep_score",
    "nutrition_score",
    "exercise_score",
    "hydration_score",
    "mood_score",
)


class HealthEntry(Base):
    __tablename__ = "health_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)

    sleep_score = Column(Integer, nullable=False, default=0)
    nutrition_score = Column(Integer, nullable=False, default=0)
    exercise_score = Column(Integer, nullable=False, default=0)
    hydration_score = Column(Integer, nullable=False, default=0)
    mood_score = Column(Integer, nullable=False, default=0)
    # Derived: always written together with the five metrics above
    overall_score = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    user = relationship("User", back_populates="health_entries")

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_health_entries_user_date"),
        Index("idx_health_entries_user_date", "user_id", "date"),
        *[
            CheckConstraint(f"{field} BETWEEN 0 AND 100", name=f"ck_health_entries_{field}_range")
            for field in METRIC_FIELDS + ("overall_score",)
        ],
    )

    def metric_values(self) -> dict:
        return {field: getattr(self, field) for field in METRIC_FIELDS}
