from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
import os

from config import settings

router = APIRouter()


def _page(name: str) -> FileResponse:
    path = os.path.join(settings.PUBLIC_DIR, name)
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail=f"{name} not found")
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def index():
    return _page("index.html")


@router.get("/{board_id}", include_in_schema=False)
async def game_page(board_id: str):
    return _page("game.html")
