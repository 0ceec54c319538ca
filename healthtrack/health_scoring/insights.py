from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from healthtrack.models.health_entry import METRIC_FIELDS
from .engine import round_half_up
from .labels import GOOD_THRESHOLD, FAIR_THRESHOLD
from healthtrack.utils.timezone import date_window

HYDRATION_ALERT_BELOW = 70
EXERCISE_STREAK_MIN = 70
WEEK = 7


@dataclass
class Insight:
    type: str       # improvement | alert | achievement | info
    title: str
    description: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _mean(values: Sequence[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def generate_insights(todays_entry: Optional[Any], recent_entries: Sequence[Any]) -> List[Insight]:
    """Build the insight cards for the overview screen.

    ``recent_entries`` must be ordered newest first, as returned by the entry
    repository's ``list``.
    """
    insights: List[Insight] = []

    if recent_entries:
        # Sleep: this week against the week before
        this_week = _mean([e.sleep_score for e in recent_entries[:WEEK]])
        last_week = _mean([e.sleep_score for e in recent_entries[WEEK:2 * WEEK]])
        if last_week > 0 and this_week > last_week:
            improvement = round_half_up((this_week - last_week) / last_week * 100)
            insights.append(Insight(
                type="improvement",
                title="Sleep Improvement",
                description=(
                    f"Your sleep score improved by {improvement}% this week. "
                    "Keep maintaining your bedtime routine!"
                ),
                color="blue",
            ))

        if todays_entry is not None and todays_entry.hydration_score < HYDRATION_ALERT_BELOW:
            insights.append(Insight(
                type="alert",
                title="Hydration Alert",
                description="Your hydration score is below optimal. Try setting hourly reminders to drink water.",
                color="orange",
            ))

        last_seven = recent_entries[:WEEK]
        if len(last_seven) == WEEK and all(e.exercise_score >= EXERCISE_STREAK_MIN for e in last_seven):
            insights.append(Insight(
                type="achievement",
                title="Exercise Streak",
                description="Amazing! You've maintained your exercise routine for 7 days straight.",
                color="green",
            ))

    if not insights:
        insights.append(Insight(
            type="info",
            title="Get Started",
            description=(
                "Start logging your daily health metrics to receive personalized "
                "insights and recommendations."
            ),
            color="blue",
        ))

    return insights


def metric_change_message(metric: str, score: int, previous_score: Optional[int] = None) -> str:
    improvement = score - previous_score if previous_score else 0

    if improvement > 10:
        return f"Great improvement in {metric}! Keep up the good work."
    if improvement > 0:
        return f"Nice progress in {metric}. Small improvements add up!"
    if score < FAIR_THRESHOLD:
        return f"{metric} needs attention. Consider making some changes to improve."
    if score >= GOOD_THRESHOLD:
        return f"Excellent {metric}! You're doing great."
    return f"{metric} is fair. There's room for improvement."


def build_trend(entries: Sequence[Any], end_date: date, days: int) -> Dict[str, Any]:
    """One point per day in the window ending at ``end_date`` plus metric averages.

    Days without an entry get ``None`` scores; averages only count days that
    have one.
    """
    window = date_window(end_date, days)
    by_date = {e.date: e for e in entries if window[0] <= e.date <= end_date}

    points = []
    for day in window:
        entry = by_date.get(day)
        point: Dict[str, Any] = {"date": day, "overall_score": entry.overall_score if entry else None}
        for field in METRIC_FIELDS:
            point[field] = getattr(entry, field) if entry else None
        points.append(point)

    logged = list(by_date.values())
    averages: Dict[str, Optional[int]] = {}
    for field in METRIC_FIELDS + ("overall_score",):
        averages[field] = round_half_up(_mean([getattr(e, field) for e in logged])) if logged else None

    return {
        "start_date": window[0],
        "end_date": end_date,
        "days_logged": len(logged),
        "points": points,
        "averages": averages,
    }
