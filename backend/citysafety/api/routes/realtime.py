"""Real-time WebSocket endpoint for live safety updates."""

import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from citysafety.core.config import get_settings
from citysafety.schemas.region import RegionRead
from citysafety.services.realtime.websocket_manager import WebSocketManager, get_websocket_manager
from citysafety.services.store.memory_store import get_region_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/realtime", tags=["Realtime"])
settings = get_settings()


@router.websocket("/safety-updates")
async def websocket_safety_updates(websocket: WebSocket):
    """
    WebSocket endpoint for live region scores.

    When a client connects:
    1. Sends the current regions snapshot
    2. Receives a regions update after every refresh tick, plus new alerts
    3. Gets heartbeat messages periodically
    """
    if not settings.realtime_enabled:
        await websocket.close(code=1003, reason="Real-time updates disabled")
        return

    websocket_manager = get_websocket_manager()
    client_id = await websocket_manager.connect(websocket)

    try:
        await websocket_manager.send_personal_message(
            {
                "type": "regions_update",
                "data": {
                    "regions": [
                        RegionRead.from_region(r).model_dump(mode="json")
                        for r in get_region_store().list()
                    ],
                },
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
            client_id,
        )

        heartbeat_task = asyncio.create_task(
            _heartbeat_loop(websocket_manager, client_id, settings.websocket_heartbeat_interval)
        )
        try:
            while True:
                data = await websocket.receive_text()
                logger.debug(f"Received message from client {client_id}: {data}")
        except WebSocketDisconnect:
            logger.info(f"Client {client_id} disconnected")
        finally:
            heartbeat_task.cancel()
            try:
                await heartbeat_task
            except asyncio.CancelledError:
                pass

    except Exception as e:
        logger.error(f"WebSocket error for client {client_id}: {str(e)}", exc_info=True)
        await websocket_manager.send_error(client_id, f"Server error: {str(e)}")
    finally:
        await websocket_manager.disconnect(client_id)


async def _heartbeat_loop(websocket_manager: WebSocketManager, client_id: str, interval: int):
    """Send periodic heartbeat messages to a client."""
    try:
        while True:
            await asyncio.sleep(interval)
            await websocket_manager.send_heartbeat(client_id)
    except asyncio.CancelledError:
        logger.debug(f"Heartbeat loop cancelled for client {client_id}")
        raise
