"""WebSocket connection manager"""
import json
from typing import Set

from fastapi import WebSocket

from models.schemas import DashboardState

# Set of active WebSocket connections (dashboards)
active_connections: Set[WebSocket] = set()


def add_connection(websocket: WebSocket):
    """Add a WebSocket connection (dashboard)"""
    active_connections.add(websocket)


def remove_connection(websocket: WebSocket):
    """Remove a WebSocket connection (dashboard)"""
    active_connections.discard(websocket)


def get_connection_count() -> int:
    """Get number of active connections"""
    return len(active_connections)


def state_message(state: DashboardState) -> str:
    """Serialize a controller snapshot for dashboards"""
    return json.dumps({"type": "state", **state.model_dump(mode="json")})


def error_message(message: str) -> str:
    return json.dumps({"type": "error", "message": message})


async def send_state(websocket: WebSocket, state: DashboardState):
    """Send one snapshot to a dashboard"""
    await websocket.send_text(state_message(state))
