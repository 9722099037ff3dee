from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Application Settings
    PROJECT_NAME: str = "Tic-Tac-Toe Boards"
    DEBUG: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Static pages and assets (index.html, game.html, js/)
    PUBLIC_DIR: str = "public"

    CORS_ORIGINS: List[str] = [
        "http://localhost:8080",
        "http://127.0.0.1:8080",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Board name generator: "<word>-<word>"
    BOARD_NAME_WORDS: int = 2
    BOARD_NAME_SEPARATOR: str = "-"

    # Free the seat when a socket drops without sending LEAVE
    LEAVE_ON_DISCONNECT: bool = False

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def _post_init(self):
        if self.BOARD_NAME_WORDS < 1:
            raise ValueError("BOARD_NAME_WORDS must be at least 1")
        if not 0 < self.PORT < 65536:
            raise ValueError(f"PORT out of range: {self.PORT}")
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if self.LOG_LEVEL not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown LOG_LEVEL {self.LOG_LEVEL!r}")

settings = Settings()
settings._post_init()
