"""WebSocket connection manager for live safety updates."""

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import WebSocket

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class WebSocketManager:
    """Tracks connected map clients and fans out region and alert updates."""

    def __init__(self):
        """Initialize an empty connection registry."""
        self.active_connections: Dict[str, WebSocket] = {}
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket, client_id: Optional[str] = None) -> str:
        """
        Accept a new map client.

        Args:
            websocket: WebSocket connection
            client_id: Optional client ID (generated if not provided)

        Returns:
            Client ID
        """
        await websocket.accept()
        client_id = client_id or str(uuid.uuid4())

        async with self._lock:
            self.active_connections[client_id] = websocket

        logger.info(f"WebSocket client connected: {client_id}")
        return client_id

    async def disconnect(self, client_id: str):
        """
        Forget a client. Unknown IDs are ignored.

        Args:
            client_id: Client ID to disconnect
        """
        async with self._lock:
            self.active_connections.pop(client_id, None)

        logger.info(f"WebSocket client disconnected: {client_id}")

    async def send_personal_message(self, message: dict, client_id: str):
        """
        Send a message to one client, dropping it if the send fails.

        Args:
            message: Message dictionary to send
            client_id: Target client ID
        """
        websocket = self.active_connections.get(client_id)
        if websocket is None:
            logger.warning(f"Client {client_id} not found in active connections")
            return

        try:
            await websocket.send_json(message)
        except Exception as e:
            logger.error(f"Error sending message to client {client_id}: {str(e)}")
            await self.disconnect(client_id)

    async def broadcast(self, message: dict):
        """
        Send a message to every connected client.

        Clients whose send fails are dropped.

        Args:
            message: Message dictionary to broadcast
        """
        async with self._lock:
            clients = list(self.active_connections.items())

        disconnected = []
        for client_id, websocket in clients:
            try:
                await websocket.send_json(message)
            except Exception as e:
                logger.error(f"Error broadcasting to client {client_id}: {str(e)}")
                disconnected.append(client_id)

        for client_id in disconnected:
            await self.disconnect(client_id)

    async def broadcast_regions_update(self, regions_data: dict):
        """
        Broadcast the current region snapshot as a ``regions_update`` message.

        Args:
            regions_data: Serialized regions and snapshot timestamp
        """
        await self.broadcast({"type": "regions_update", "data": regions_data, "timestamp": _now_iso()})
        logger.debug(f"Broadcasted regions update to {len(self.active_connections)} clients")

    async def broadcast_alert(self, alert_data: dict):
        """
        Broadcast a newly emitted alert as an ``alert`` message.

        Args:
            alert_data: Serialized alert
        """
        await self.broadcast({"type": "alert", "data": alert_data, "timestamp": _now_iso()})

    async def send_heartbeat(self, client_id: str):
        """
        Send a heartbeat message to a client.

        Args:
            client_id: Client ID
        """
        await self.send_personal_message({"type": "heartbeat", "timestamp": _now_iso()}, client_id)

    async def send_error(self, client_id: str, error_message: str):
        """
        Send an error message to a client.

        Args:
            client_id: Client ID
            error_message: Error message
        """
        await self.send_personal_message(
            {"type": "error", "data": {"message": error_message}, "timestamp": _now_iso()},
            client_id,
        )


# Singleton instance
_manager: Optional[WebSocketManager] = None


def get_websocket_manager() -> WebSocketManager:
    """
    Get the singleton WebSocket manager instance.

    Returns:
        WebSocketManager instance
    """
    global _manager
    if _manager is None:
        _manager = WebSocketManager()
    return _manager
