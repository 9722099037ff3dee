from fastapi import APIRouter
from endpoints.boards import router as boards_router
from endpoints.board_ws import router as board_ws_router
from endpoints.pages import router as pages_router

api_router = APIRouter()
api_router.include_router(boards_router, tags=["boards"])
api_router.include_router(board_ws_router, tags=["realtime"])
# Catch-all GET /{board_id} goes last
api_router.include_router(pages_router, tags=["pages"])
