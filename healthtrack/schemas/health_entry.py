from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field

EntryDate = date


class HealthEntryBase(BaseModel):
    date: EntryDate
    sleep_score: int = Field(ge=0, le=100, strict=True)
    nutrition_score: int = Field(ge=0, le=100, strict=True)
    exercise_score: int = Field(ge=0, le=100, strict=True)
    hydration_score: int = Field(ge=0, le=100, strict=True)
    mood_score: int = Field(ge=0, le=100, strict=True)


class HealthEntryCreate(HealthEntryBase):
    pass


class HealthEntryUpdate(BaseModel):
    """Partial update: only the supplied metrics change, the overall score is recomputed."""
    sleep_score: Optional[int] = Field(None, ge=0, le=100, strict=True)
    nutrition_score: Optional[int] = Field(None, ge=0, le=100, strict=True)
    exercise_score: Optional[int] = Field(None, ge=0, le=100, strict=True)
    hydration_score: Optional[int] = Field(None, ge=0, le=100, strict=True)
    mood_score: Optional[int] = Field(None, ge=0, le=100, strict=True)


class HealthEntry(HealthEntryBase):
    id: int
    user_id: str
    overall_score: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
