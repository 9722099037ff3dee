from __future__ import annotations
from typing import List

# Exceptions for unified error mapping at the connection boundary
class GameError(Exception):
    code = "game_error"

class BoardFull(GameError):
    code = "board_full"

    def __init__(self, board_id: str):
        super().__init__(f"board {board_id} already has two players")
        self.board_id = board_id

class UnknownBoard(GameError):
    code = "unknown_board"

    def __init__(self, board_id: str):
        super().__init__(f"board {board_id} does not exist")
        self.board_id = board_id

class MalformedFrame(GameError):
    code = "malformed_frame"

class DeliveryFailure(GameError):
    code = "delivery_failure"

    def __init__(self, board_id: str, failed: List[str]):
        super().__init__(f"delivery on board {board_id} failed for {', '.join(failed)}")
        self.board_id = board_id
        self.failed = failed
