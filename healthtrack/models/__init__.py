from .user import User
from .health_entry import HealthEntry
from .diary_entry import DiaryEntry

__all__ = ["User", "HealthEntry", "DiaryEntry"]
