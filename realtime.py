"""WebSocket real-time broadcasting utilities.

In-process only: every board and every socket lives in this one process. For
multi-process scale-out, replace the registry snapshot and direct sends with
Redis pub/sub.
"""
from __future__ import annotations
from typing import Any, List
from fastapi import Depends, WebSocket
import asyncio
import logging

from schemas.board import BoardEvent
from services.game.errors import DeliveryFailure
from services.game.registry import SessionRegistry, get_registry

logger = logging.getLogger(__name__)

class SocketChannel:
    """Outbound side of one WebSocket.

    Broadcasts triggered by other connections write to this socket from their
    own tasks, so writes are serialized per socket.
    """

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket
        self._lock = asyncio.Lock()

    async def send_json(self, data: Any) -> None:
        async with self._lock:
            await self.websocket.send_json(data)

class Dispatcher:
    def __init__(self, registry: SessionRegistry) -> None:
        self.registry = registry

    async def deliver(self, board_id: str, event: BoardEvent) -> None:
        # Snapshot under the registry lock, send without holding it
        targets = await self.registry.recipients(board_id)
        if targets is None:
            logger.warning("board %s vacant, dropping %s", board_id, event.cmd)
            return
        message = event.payload()
        failed: List[str] = []
        for player in targets:
            try:
                await player.channel.send_json(message)
            except Exception as exc:
                logger.warning("send %s to %s on board %s failed: %s", event.cmd, player.id, board_id, exc)
                failed.append(player.id)
        if failed:
            raise DeliveryFailure(board_id, failed)

def get_dispatcher(registry: SessionRegistry = Depends(get_registry)) -> Dispatcher:
    return Dispatcher(registry)
