"""API routes"""
from datetime import datetime

from config.settings import CHART_HEIGHT, CHART_WIDTH
from fastapi import APIRouter, Depends, Query, Request
from models.schemas import (
    ApiInfoResponse,
    DashboardResponse,
    HealthResponse,
    ReadingsResponse,
    RunStateResponse,
    Summary,
)
from services.render import dashboard_view
from services.stream_controller import ReadingStreamController
from services.websocket_manager import get_connection_count

router = APIRouter()


def get_controller(request: Request) -> ReadingStreamController:
    """Controller owned by the application lifespan"""
    return request.app.state.controller


@router.get("/", response_model=ApiInfoResponse)
async def home():
    """API info endpoint"""
    return {
        "message": "Temperature Dashboard Server",
        "websocket": "/ws-dashboard",
        "dashboard": "/dashboard",
        "status": "running"
    }


@router.get("/health", response_model=HealthResponse)
async def health(controller: ReadingStreamController = Depends(get_controller)):
    """Health check endpoint"""
    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
        "running": controller.running,
        "window_size": len(controller.window),
        "active_connections": get_connection_count()
    }


@router.get("/readings", response_model=ReadingsResponse)
async def get_readings(controller: ReadingStreamController = Depends(get_controller)):
    """Current window, newest first"""
    readings = controller.readings
    return {
        "count": len(readings),
        "data": list(readings)
    }


@router.get("/summary", response_model=Summary)
async def get_summary(controller: ReadingStreamController = Depends(get_controller)):
    """Current/average/min/max over the window (null when empty)"""
    return controller.current_summary()


@router.get("/state", response_model=RunStateResponse)
async def get_state(controller: ReadingStreamController = Depends(get_controller)):
    return {"running": controller.running}


@router.post("/state/toggle", response_model=RunStateResponse)
async def toggle_state(controller: ReadingStreamController = Depends(get_controller)):
    """Pause or resume the reading stream"""
    return {"running": controller.toggle_run_state()}


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    width: float = Query(CHART_WIDTH, gt=0),
    height: float = Query(CHART_HEIGHT, gt=0),
    controller: ReadingStreamController = Depends(get_controller),
):
    """Render-ready dashboard: formatted stats, chart points and history rows"""
    return dashboard_view(controller.snapshot(), width, height)
