"""Render helpers that turn controller state into display values"""
import math
from typing import Optional, Sequence

from config.settings import (
    CHART_HEIGHT,
    CHART_MIN_SPAN,
    CHART_WIDTH,
    PLACEHOLDER,
    TEMPERATURE_UNIT,
)
from models.schemas import DashboardState, Reading

SPARK_LEVELS = "▁▂▃▄▅▆▇█"


def format_stat(value: Optional[float]) -> str:
    """One decimal, or the placeholder when there is no value"""
    if value is None:
        return PLACEHOLDER
    return f"{value:.1f}"


def format_history_value(value: float) -> str:
    """Whole degrees (halves round up), as shown in the history list"""
    return f"{math.floor(value + 0.5)}{TEMPERATURE_UNIT}"


def status_label(running: bool) -> str:
    return "Streaming" if running else "Paused"


def toggle_label(running: bool) -> str:
    return "Pause" if running else "Resume"


def _chart_scale(values: Sequence[float]) -> tuple[float, float]:
    """Lowest value and the span used for the y-axis (never below CHART_MIN_SPAN)"""
    low = min(values)
    span = max(max(values) - low, CHART_MIN_SPAN)
    return low, span


def chart_points(
    readings: Sequence[Reading],
    width: float = CHART_WIDTH,
    height: float = CHART_HEIGHT,
) -> list[tuple[float, float]]:
    """
    Canvas coordinates for the line chart.

    Readings come in newest first; the chart is drawn oldest to newest,
    left to right, with y growing downwards.
    """
    if not readings:
        return []

    values = [reading.value for reading in reversed(readings)]
    low, span = _chart_scale(values)
    step_x = width / (max(len(values), 2) - 1)

    return [
        (index * step_x, height - (value - low) / span * height)
        for index, value in enumerate(values)
    ]


def chart_segments(points: Sequence[tuple[float, float]]) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """Line segments between consecutive chart points"""
    return [(points[i - 1], points[i]) for i in range(1, len(points))]


def sparkline(readings: Sequence[Reading]) -> str:
    """Single-line text chart, oldest to newest"""
    if not readings:
        return ""

    values = [reading.value for reading in reversed(readings)]
    low, span = _chart_scale(values)
    top = len(SPARK_LEVELS) - 1
    return "".join(
        SPARK_LEVELS[min(int((value - low) / span * top + 0.5), top)]
        for value in values
    )


def history_rows(readings: Sequence[Reading]) -> list[tuple[str, str]]:
    """(timestamp, value) rows for the history list, newest first"""
    return [(reading.timestamp, format_history_value(reading.value)) for reading in readings]


def dashboard_view(
    state: DashboardState,
    width: float = CHART_WIDTH,
    height: float = CHART_HEIGHT,
) -> dict:
    """Render-ready dashboard payload"""
    summary = state.summary
    points = chart_points(state.readings, width, height)
    return {
        "running": state.running,
        "status": status_label(state.running),
        "toggle_label": toggle_label(state.running),
        "stats": {
            "current": format_stat(summary.current),
            "average": format_stat(summary.average),
            "min": format_stat(summary.min),
            "max": format_stat(summary.max),
            "unit": TEMPERATURE_UNIT,
        },
        "chart": [{"x": x, "y": y} for x, y in points],
        "segments": [
            {"start": {"x": x1, "y": y1}, "end": {"x": x2, "y": y2}}
            for (x1, y1), (x2, y2) in chart_segments(points)
        ],
        "history": [
            {"timestamp": timestamp, "value": value}
            for timestamp, value in history_rows(state.readings)
        ],
    }


def render_dashboard(state: DashboardState) -> str:
    """Full text screen for terminal dashboards"""
    summary = state.summary
    lines = [
        "Temperature Dashboard",
        "=" * 21,
        f"Current: {format_stat(summary.current)} {TEMPERATURE_UNIT}",
        f"Average: {format_stat(summary.average)} {TEMPERATURE_UNIT}",
        f"Min: {format_stat(summary.min)} {TEMPERATURE_UNIT}",
        f"Max: {format_stat(summary.max)} {TEMPERATURE_UNIT}",
        f"Status: {status_label(state.running)}",
        "",
    ]
    if state.readings:
        lines.append(sparkline(state.readings))
        lines.append("")

    lines.append(f"[ {toggle_label(state.running)} ]")
    lines.append("")
    lines.append("Recent Readings:")
    for timestamp, value in history_rows(state.readings):
        lines.append(f"  {timestamp}  {value:>6}")

    return "\n".join(lines)
