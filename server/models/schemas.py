"""DTOs and schemas for dashboard data"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Reading(BaseModel):
    """One timestamped temperature sample (never mutated after creation)"""
    model_config = ConfigDict(frozen=True)

    timestamp: str
    value: float


class Summary(BaseModel):
    """Statistics derived from the current window"""
    model_config = ConfigDict(frozen=True)

    current: Optional[float] = None
    average: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None


class DashboardState(BaseModel):
    """Snapshot of the controller published to dashboards"""
    model_config = ConfigDict(frozen=True)

    running: bool
    readings: tuple[Reading, ...]
    summary: Summary


class RunStateResponse(BaseModel):
    """Schema for the run state"""
    running: bool


class ReadingsResponse(BaseModel):
    """Schema for the current window"""
    count: int
    data: list[Reading]


class StatsView(BaseModel):
    """Summary stats formatted for display"""
    current: str
    average: str
    min: str
    max: str
    unit: str


class ChartPoint(BaseModel):
    x: float
    y: float


class ChartSegment(BaseModel):
    start: ChartPoint
    end: ChartPoint


class HistoryRow(BaseModel):
    timestamp: str
    value: str


class DashboardResponse(BaseModel):
    """Schema for the render-ready dashboard"""
    running: bool
    status: str
    toggle_label: str
    stats: StatsView
    chart: list[ChartPoint]
    segments: list[ChartSegment]
    history: list[HistoryRow]


class HealthResponse(BaseModel):
    """Schema for health check"""
    status: str
    timestamp: str
    running: bool
    window_size: int
    active_connections: int


class ApiInfoResponse(BaseModel):
    """Schema for API info"""
    message: str
    websocket: str
    dashboard: str
    status: str
