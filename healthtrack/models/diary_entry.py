from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from healthtrack.db.base import Base
from healthtrack.utils.timezone import utc_now


class DiaryEntry(Base):
    __tablename__ = "diary_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=False)
    mood = Column(String(32), nullable=True)  # happy | sad | excited | calm | stressed | grateful

    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    user = relationship("User", back_populates="diary_entries")

    __table_args__ = (
        Index("idx_diary_entries_user_created", "user_id", "created_at"),
    )
