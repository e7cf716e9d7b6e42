"""Summary statistics over a reading window"""
from typing import Optional, Sequence

from models.schemas import Reading, Summary


def average(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def minimum(values: Sequence[float]) -> Optional[float]:
    return min(values) if values else None


def maximum(values: Sequence[float]) -> Optional[float]:
    return max(values) if values else None


def compute_summary(readings: Sequence[Reading]) -> Summary:
    """Build the summary for a newest-first sequence of readings.

    Every field is None when there are no readings.
    """
    values = [reading.value for reading in readings]
    return Summary(
        current=values[0] if values else None,
        average=average(values),
        min=minimum(values),
        max=maximum(values),
    )
