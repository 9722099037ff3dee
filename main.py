from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from routers import api_router
from config import settings
import os
import logging

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.PROJECT_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mounted before the routers so /public/* never reaches the GET /{board_id} page route
if os.path.isdir(settings.PUBLIC_DIR):
    app.mount("/public", StaticFiles(directory=settings.PUBLIC_DIR), name="public")
else:
    logging.getLogger(__name__).warning(
        "Static directory %s not found; pages and assets will return 404", settings.PUBLIC_DIR
    )

app.include_router(api_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
