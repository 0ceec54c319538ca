from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator

EntryDate = date


class DiaryMood(str, Enum):
    HAPPY = "happy"
    SAD = "sad"
    EXCITED = "excited"
    CALM = "calm"
    STRESSED = "stressed"
    GRATEFUL = "grateful"


def _require_content(value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ValueError("Diary content cannot be empty")
    return value


class DiaryEntryBase(BaseModel):
    date: EntryDate
    title: Optional[str] = Field(None, max_length=255)
    content: str
    mood: Optional[DiaryMood] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        return _require_content(v)


class DiaryEntryCreate(DiaryEntryBase):
    pass


class DiaryEntryUpdate(BaseModel):
    date: Optional[EntryDate] = None
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None
    mood: Optional[DiaryMood] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: Optional[str]) -> str:
        return _require_content(v)

    @field_validator("date")
    @classmethod
    def date_not_null(cls, v: Optional[EntryDate]) -> EntryDate:
        if v is None:
            raise ValueError("Date cannot be empty")
        return v


class DiaryEntry(DiaryEntryBase):
    id: int
    user_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
