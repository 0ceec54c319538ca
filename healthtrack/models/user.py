import uuid

from sqlalchemy import Column, String, DateTime, Boolean
from sqlalchemy.orm import relationship
from healthtrack.db.base import Base
from healthtrack.utils.timezone import utc_now


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    # Owned by the authentication service; ids are opaque strings
    id = Column(String(64), primary_key=True, default=_new_user_id)
    email = Column(String, unique=True, index=True, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    health_entries = relationship("HealthEntry", back_populates="user", cascade="all, delete-orphan")
    diary_entries = relationship("DiaryEntry", back_populates="user", cascade="all, delete-orphan")
