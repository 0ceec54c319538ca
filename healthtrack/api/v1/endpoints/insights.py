from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from healthtrack import crud
from healthtrack.api import deps
from healthtrack.health_scoring.insights import build_trend, generate_insights, metric_change_message
from healthtrack.health_scoring.labels import (
    METRIC_DISPLAY_NAMES,
    metric_measurement,
    score_band,
    score_label,
)
from healthtrack.models.health_entry import METRIC_FIELDS
from healthtrack.models.user import User
from healthtrack.schemas.health_entry import HealthEntry
from healthtrack.schemas.insights import (
    InsightItem,
    MetricSummary,
    OverviewResponse,
    TrendResponse,
)
from healthtrack.utils.timezone import window_start

router = APIRouter()

# Two weeks of history: this week against last week
OVERVIEW_LOOKBACK_DAYS = 14


@router.get("/overview", response_model=OverviewResponse)
def get_overview(
    today: date = Query(..., description="The caller's current calendar date"),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    recent = crud.health_entry.list(
        db,
        user_id=current_user.id,
        start_date=window_start(today, OVERVIEW_LOOKBACK_DAYS),
        end_date=today,
    )
    todays_entry = next((e for e in recent if e.date == today), None)
    insights = [InsightItem(**i.to_dict()) for i in generate_insights(todays_entry, recent)]

    if todays_entry is None:
        return OverviewResponse(date=today, insights=insights)

    # Most recent logged day before today, for the per-metric change messages
    previous = next((e for e in recent if e.date < today), None)

    metrics = []
    for field in METRIC_FIELDS:
        score = getattr(todays_entry, field)
        metrics.append(MetricSummary(
            metric=field,
            name=METRIC_DISPLAY_NAMES[field],
            score=score,
            measurement=metric_measurement(field, score),
            band=score_band(score),
            message=metric_change_message(
                METRIC_DISPLAY_NAMES[field], score, getattr(previous, field) if previous else None
            ),
        ))

    return OverviewResponse(
        date=today,
        entry=HealthEntry.model_validate(todays_entry),
        overall_score=todays_entry.overall_score,
        label=score_label(todays_entry.overall_score),
        band=score_band(todays_entry.overall_score),
        metrics=metrics,
        insights=insights,
    )


@router.get("/trends", response_model=TrendResponse)
def get_trends(
    end_date: date = Query(...),
    days: int = Query(7, ge=1, le=366),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_active_user),
):
    entries = crud.health_entry.list(
        db,
        user_id=current_user.id,
        start_date=window_start(end_date, days),
        end_date=end_date,
    )
    return build_trend(entries, end_date, days)
