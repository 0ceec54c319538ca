from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel

from .health_entry import HealthEntry


class InsightItem(BaseModel):
    type: str
    title: str
    description: str
    color: str


class MetricSummary(BaseModel):
    metric: str
    name: str
    score: int
    measurement: str
    band: str
    message: str


class OverviewResponse(BaseModel):
    date: date
    entry: Optional[HealthEntry] = None
    overall_score: Optional[int] = None
    label: Optional[str] = None
    band: Optional[str] = None
    metrics: List[MetricSummary] = []
    insights: List[InsightItem] = []


class TrendPoint(BaseModel):
    date: date
    overall_score: Optional[int] = None
    sleep_score: Optional[int] = None
    nutrition_score: Optional[int] = None
    exercise_score: Optional[int] = None
    hydration_score: Optional[int] = None
    mood_score: Optional[int] = None


class TrendResponse(BaseModel):
    start_date: date
    end_date: date
    days_logged: int
    points: List[TrendPoint]
    averages: Dict[str, Optional[int]]
