from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Protocol, Tuple

BOARD_SIZE = 9

class Label(str, Enum):
    X = "X"
    O = "O"

class Channel(Protocol):
    """Outbound handle of one connection."""
    async def send_json(self, data: Any) -> None: ...

def empty_cells() -> List[str]:
    return [""] * BOARD_SIZE

@dataclass
class Player:
    id: str
    channel: Channel
    label: Label

@dataclass
class Board:
    id: str
    cells: List[str] = field(default_factory=empty_cells)
    players: List[Player] = field(default_factory=list)  # seat order, at most 2

    def seat_of(self, player_id: str) -> Optional[Player]:
        for p in self.players:
            if p.id == player_id:
                return p
        return None

    def free_label(self) -> Label:
        taken = {p.label for p in self.players}
        return Label.O if Label.X in taken else Label.X

@dataclass
class JoinResult:
    label: Label
    cells: List[str]

@dataclass
class BoardView:
    """Read-only copy of a board, safe to use outside the registry lock."""
    id: str
    cells: List[str]
    seats: List[Tuple[str, Label]]  # (player_id, label) in seat order

    @property
    def seat_count(self) -> int:
        return len(self.seats)
