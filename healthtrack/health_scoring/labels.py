"""Descriptive labels for scores.

Each metric has a ten-step scale from 100 down to 10; anything below 10 uses
the metric's floor description.
"""

from typing import Dict, List, Tuple

GOOD_THRESHOLD = 85
FAIR_THRESHOLD = 61

METRIC_DISPLAY_NAMES = {
    "sleep_score": "Sleep",
    "nutrition_score": "Nutrition",
    "exercise_score": "Exercise",
    "hydration_score": "Hydration",
    "mood_score": "Mood",
}

_STEPS = (100, 90, 80, 70, 60, 50, 40, 30, 20, 10)

_MEASUREMENTS: Dict[str, Tuple[List[str], str]] = {
    "sleep_score": (
        ["9+ hours", "8-9 hours", "7-8 hours", "6-7 hours", "5-6 hours",
         "4-5 hours", "3-4 hours", "2-3 hours", "1-2 hours", "< 1 hour"],
        "No sleep",
    ),
    "nutrition_score": (
        ["5+ servings veggies/good protein", "4-5 servings veggies/good protein",
         "3-4 servings veggies/good protein", "2-3 servings veggies/good protein",
         "1-2 servings veggies/good protein", "1 serving veggies/good protein",
         "Some healthy choices", "Mostly processed foods", "Fast food mostly", "Fast food only"],
        "No food",
    ),
    "exercise_score": (
        ["60+ minutes", "45-60 minutes", "30-45 minutes", "20-30 minutes", "15-20 minutes",
         "10-15 minutes", "5-10 minutes", "2-5 minutes", "1-2 minutes", "< 1 minute"],
        "No exercise",
    ),
    "hydration_score": (
        ["10+ glasses (80+ oz)", "8-10 glasses (64-80 oz)", "6-8 glasses (48-64 oz)",
         "4-6 glasses (32-48 oz)", "3-4 glasses (24-32 oz)", "2-3 glasses (16-24 oz)",
         "1-2 glasses (8-16 oz)", "1 glass (8 oz)", "< 1 glass (4 oz)", "Few sips"],
        "No water",
    ),
    "mood_score": (
        ["Extremely grateful & happy", "Very grateful & positive", "Grateful & content",
         "Generally positive", "Neutral mood", "Slightly down", "Feeling low",
         "Quite stressed/sad", "Very stressed/sad", "Extremely low"],
        "Worst mood",
    ),
}


def score_label(score: int) -> str:
    if score == 100:
        return "Perfect"
    if score >= GOOD_THRESHOLD:
        return "Good"
    if score >= FAIR_THRESHOLD:
        return "Fair"
    return "Poor"


def score_band(score: int) -> str:
    if score >= GOOD_THRESHOLD:
        return "good"
    if score >= FAIR_THRESHOLD:
        return "fair"
    return "poor"


def metric_measurement(metric: str, score: int) -> str:
    """Human description of what a metric score means, e.g. sleep 80 -> "7-8 hours"."""
    if metric not in _MEASUREMENTS:
        return score_label(score)
    descriptions, floor = _MEASUREMENTS[metric]
    for step, description in zip(_STEPS, descriptions):
        if score >= step:
            return description
    return floor
