from fastapi import APIRouter, Depends, HTTPException
import logging
import petname

from config import settings
from schemas.board import BoardNameOut, BoardStateOut
from services.game.registry import SessionRegistry, get_registry

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/new", response_model=BoardNameOut)
async def new_board_name():
    """Human-readable name for a fresh board, e.g. ``crisp-walrus``.

    The board itself only exists once someone connects to it.
    """
    name = petname.generate(words=settings.BOARD_NAME_WORDS, separator=settings.BOARD_NAME_SEPARATOR)
    return BoardNameOut(board_name=name)


@router.post("/random", response_model=BoardNameOut)
async def random_board(registry: SessionRegistry = Depends(get_registry)):
    """Board with exactly one seated player, or an empty name when none waits."""
    board_id = await registry.find_waiting_board()
    logger.info("board_name : %s", board_id or "")
    return BoardNameOut(board_name=board_id or "")


@router.get("/boards/{board_id}", response_model=BoardStateOut)
async def board_state(board_id: str, registry: SessionRegistry = Depends(get_registry)):
    # Player ids stay private; only the seated labels are exposed
    view = await registry.describe(board_id)
    if view is None:
        raise HTTPException(status_code=404, detail="Board not found")
    return BoardStateOut(
        board_name=view.id,
        play_book=view.cells,
        players=[label.value for _, label in view.seats],
    )
