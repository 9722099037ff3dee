from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

class EventCmd(str, Enum):
    INIT = "INIT"
    STATE = "STATE"
    RESET = "RESET"
    LEAVE = "LEAVE"
    COMPLETE = "COMPLETE"

class BoardEvent(BaseModel):
    """Outbound JSON frame. Unset fields are left out of the payload."""
    cmd: EventCmd
    player: Optional[str] = None
    play_book: Optional[List[str]] = None
    client_id: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)

    def payload(self) -> dict:
        return self.model_dump(exclude_none=True)

    @classmethod
    def init(cls, player: str, play_book: List[str], client_id: str) -> "BoardEvent":
        return cls(cmd=EventCmd.INIT, player=player, play_book=play_book, client_id=client_id)

    @classmethod
    def state(cls, play_book: List[str]) -> "BoardEvent":
        return cls(cmd=EventCmd.STATE, play_book=play_book)

    @classmethod
    def reset(cls, play_book: List[str]) -> "BoardEvent":
        return cls(cmd=EventCmd.RESET, play_book=play_book)

    @classmethod
    def leave(cls, play_book: List[str]) -> "BoardEvent":
        return cls(cmd=EventCmd.LEAVE, play_book=play_book)

    @classmethod
    def complete(cls) -> "BoardEvent":
        return cls(cmd=EventCmd.COMPLETE)

class BoardNameOut(BaseModel):
    board_name: str

class BoardStateOut(BaseModel):
    board_name: str
    play_book: List[str]
    players: List[str]  # seated labels in seat order
