from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from typing import Optional
import logging

from config import settings
from realtime import Dispatcher, SocketChannel, get_dispatcher
from schemas.board import BoardEvent
from services.game.errors import BoardFull, DeliveryFailure, MalformedFrame, UnknownBoard
from services.game.identity import resolve_player_id
from services.game.protocol import FrameKind, parse_frame
from services.game.registry import SessionRegistry, get_registry

router = APIRouter()
logger = logging.getLogger(__name__)


async def _deliver(dispatcher: Dispatcher, board_id: str, event: BoardEvent) -> None:
    # A peer's dead socket must not end this connection
    try:
        await dispatcher.deliver(board_id, event)
    except DeliveryFailure as exc:
        logger.warning("%s: %s", exc.code, exc)


@router.websocket("/{board_id}")
async def board_ws(
    websocket: WebSocket,
    board_id: str,
    client_id: Optional[str] = None,
    registry: SessionRegistry = Depends(get_registry),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    await websocket.accept()
    channel = SocketChannel(websocket)
    player_id = resolve_player_id(client_id)

    try:
        joined = await registry.join(board_id, player_id, channel)
    except BoardFull as exc:
        logger.info("%s rejected: %s", player_id, exc)
        await channel.send_json(BoardEvent.complete().payload())
        await websocket.close(code=status.WS_1000_NORMAL_CLOSURE)
        return

    left = False
    try:
        await channel.send_json(BoardEvent.init(joined.label.value, joined.cells, player_id).payload())
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", status.WS_1000_NORMAL_CLOSURE))
            text = message.get("text")
            if text is None:
                logger.warning("binary frame on board %s from %s ignored", board_id, player_id)
                continue
            frame = parse_frame(text)
            if frame.kind == FrameKind.PLAY:
                cells = await registry.move(board_id, frame.label, frame.index)
                await _deliver(dispatcher, board_id, BoardEvent.state(cells))
            elif frame.kind == FrameKind.RESET:
                cells = await registry.reset(board_id)
                await _deliver(dispatcher, board_id, BoardEvent.reset(cells))
            elif frame.kind == FrameKind.LEAVE:
                cells = await registry.leave(board_id, player_id)
                left = True
                await _deliver(dispatcher, board_id, BoardEvent.leave(cells))
                await websocket.close(code=status.WS_1000_NORMAL_CLOSURE)
                return
            else:
                logger.warning("invalid message on board %s from %s: %r", board_id, player_id, frame.raw)
    except WebSocketDisconnect:
        pass
    except MalformedFrame as exc:
        logger.warning("closing %s on board %s: %s", player_id, board_id, exc)
        await websocket.close(code=status.WS_1007_INVALID_FRAME_PAYLOAD_DATA)
    except UnknownBoard as exc:
        logger.error("closing %s: %s", player_id, exc)
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
    finally:
        if settings.LEAVE_ON_DISCONNECT and not left:
            await _leave_dropped(registry, dispatcher, board_id, player_id, channel)


async def _leave_dropped(registry, dispatcher, board_id, player_id, channel) -> None:
    targets = await registry.recipients(board_id)
    if not targets or not any(p.channel is channel for p in targets):
        # Seat already rebound to a newer connection
        return
    try:
        cells = await registry.leave(board_id, player_id, channel=channel)
    except UnknownBoard:
        return
    await _deliver(dispatcher, board_id, BoardEvent.leave(cells))
