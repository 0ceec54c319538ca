from .user import User, UserCreate, TokenPayload
from .health_entry import HealthEntry, HealthEntryCreate, HealthEntryUpdate
from .diary_entry import DiaryEntry, DiaryEntryCreate, DiaryEntryUpdate, DiaryMood
from . import insights
