"""WebSocket routes"""
import asyncio
import json

from config.logger import logger
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from services.stream_controller import ReadingStreamController
from services.websocket_manager import (
    add_connection,
    error_message,
    get_connection_count,
    remove_connection,
    send_state,
)

router = APIRouter()


async def handle_dashboard_message(
    websocket: WebSocket,
    controller: ReadingStreamController,
    data: str,
):
    """Apply a command sent by a dashboard"""
    try:
        msg = json.loads(data)
    except json.JSONDecodeError:
        logger.warning(f"Invalid JSON from dashboard: {data[:100]}")
        await websocket.send_text(error_message("Invalid JSON"))
        return

    msg_type = msg.get("type") if isinstance(msg, dict) else None
    if msg_type == "toggle":
        controller.toggle_run_state()
    else:
        logger.warning(f"Unknown dashboard command: {msg_type!r}")
        await websocket.send_text(error_message(f"Unknown command: {msg_type}"))


@router.websocket("/ws-dashboard")
async def websocket_dashboard(websocket: WebSocket):
    """
    WebSocket endpoint for Dashboard.
    Pushes every controller snapshot and accepts toggle commands.
    """
    client_host = websocket.client.host if websocket.client else "Unknown"
    controller: ReadingStreamController = websocket.app.state.controller
    logger.info(f"Dashboard connection attempt from {client_host}")

    await websocket.accept()
    add_connection(websocket)
    updates = controller.subscribe()
    logger.info(f"Dashboard CONNECTED from {client_host} (Total: {get_connection_count()})")

    async def forward_updates():
        """Send each published snapshot (the first one is the current state)"""
        while True:
            state = await updates.get()
            await send_state(websocket, state)

    forward_task = asyncio.create_task(forward_updates())

    try:
        while True:
            data = await websocket.receive_text()
            logger.info(f"Received from Dashboard [{client_host}]: {data}")
            await handle_dashboard_message(websocket, controller, data)

    except WebSocketDisconnect:
        logger.info(f"Dashboard DISCONNECTED from {client_host}")
    except Exception as e:
        logger.error(f"Dashboard ERROR from {client_host}: {type(e).__name__}: {e}", exc_info=True)
    finally:
        forward_task.cancel()
        try:
            await forward_task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.warning(f"Dashboard update stream for {client_host} ended: {type(e).__name__}: {e}")
        controller.unsubscribe(updates)
        remove_connection(websocket)
        logger.info(f"Active dashboards: {get_connection_count()}")
