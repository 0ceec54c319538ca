from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, ties toward +infinity.

    Matches ``Math.round`` for the non-negative values scores take:
    60.5 -> 61, 60.4 -> 60. Done in ``Decimal`` so float representation
    can never move a tie.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_overall_score(
    sleep_score: int,
    nutrition_score: int,
    exercise_score: int,
    hydration_score: int,
    mood_score: int,
) -> int:
    """Unweighted mean of the five metric scores, rounded half-up.

    Range checks are the caller's job; out-of-range inputs still produce the
    arithmetic result.
    """
    total = Decimal(sleep_score) + Decimal(nutrition_score) + Decimal(exercise_score) \
        + Decimal(hydration_score) + Decimal(mood_score)
    return round_half_up(total / 5)


def overall_from_metrics(metrics: Mapping[str, int]) -> int:
    return calculate_overall_score(
        metrics["sleep_score"],
        metrics["nutrition_score"],
        metrics["exercise_score"],
        metrics["hydration_score"],
        metrics["mood_score"],
    )
