"""In-memory registry of active boards.

Every board lives in one dict guarded by a single asyncio.Lock. All operations,
including pure lookups, take that lock, so work on any two boards is serialized.
That is the throughput ceiling of the service; it is fine for a handful of
casual games. For finer granularity, move to a lock per board.

Boards are created on first join and never removed.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Dict, List, Optional
import asyncio
import logging

from .errors import BoardFull, MalformedFrame, UnknownBoard
from .types import BOARD_SIZE, Board, BoardView, Channel, JoinResult, Label, Player, empty_cells

logger = logging.getLogger(__name__)

class SessionRegistry:
    def __init__(self) -> None:
        # Insertion order is the scan order of find_waiting_board
        self._boards: Dict[str, Board] = {}
        self._lock = asyncio.Lock()

    def _get(self, board_id: str) -> Board:
        board = self._boards.get(board_id)
        if board is None:
            raise UnknownBoard(board_id)
        return board

    async def join(self, board_id: str, player_id: str, channel: Channel) -> JoinResult:
        async with self._lock:
            board = self._boards.get(board_id)
            if board is None:
                board = Board(id=board_id)
                board.players.append(Player(id=player_id, channel=channel, label=Label.X))
                self._boards[board_id] = board
                logger.info("board %s created, %s seated as X", board_id, player_id)
                return JoinResult(Label.X, list(board.cells))

            seat = board.seat_of(player_id)
            if seat is not None:
                # Reconnect: newest connection receives broadcasts from now on
                seat.channel = channel
                logger.info("%s rejoined board %s as %s", player_id, board_id, seat.label.value)
                return JoinResult(seat.label, list(board.cells))

            if len(board.players) >= 2:
                raise BoardFull(board_id)

            label = board.free_label()
            board.players.append(Player(id=player_id, channel=channel, label=label))
            logger.info("%s seated on board %s as %s", player_id, board_id, label.value)
            return JoinResult(label, list(board.cells))

    async def move(self, board_id: str, label: Label, cell_index: int) -> List[str]:
        if not 0 <= cell_index < BOARD_SIZE:
            raise MalformedFrame(f"cell index out of range: {cell_index}")
        async with self._lock:
            board = self._get(board_id)
            # No turn or occupancy check; clients own the game rules
            board.cells[cell_index] = Label(label).value
            return list(board.cells)

    async def reset(self, board_id: str) -> List[str]:
        async with self._lock:
            board = self._get(board_id)
            board.cells = empty_cells()
            return list(board.cells)

    async def leave(self, board_id: str, player_id: str, channel: Optional[Channel] = None) -> List[str]:
        """Unseat ``player_id``.

        With ``channel`` set, the seat is only freed while it is still bound to
        that channel, so a dropped socket cannot unseat a newer reconnect.
        """
        async with self._lock:
            board = self._get(board_id)
            kept = [
                p for p in board.players
                if p.id != player_id or (channel is not None and p.channel is not channel)
            ]
            if len(kept) != len(board.players):
                logger.info("%s left board %s", player_id, board_id)
            board.players = kept
            return list(board.cells)

    async def find_waiting_board(self) -> Optional[str]:
        async with self._lock:
            for board_id, board in self._boards.items():
                if len(board.players) == 1:
                    return board_id
            return None

    async def recipients(self, board_id: str) -> Optional[List[Player]]:
        """Snapshot of the seated players, or None for an unknown board."""
        async with self._lock:
            board = self._boards.get(board_id)
            if board is None:
                return None
            return [replace(p) for p in board.players]

    async def describe(self, board_id: str) -> Optional[BoardView]:
        async with self._lock:
            board = self._boards.get(board_id)
            if board is None:
                return None
            return BoardView(
                id=board.id,
                cells=list(board.cells),
                seats=[(p.id, p.label) for p in board.players],
            )

registry = SessionRegistry()

def get_registry() -> SessionRegistry:
    return registry
