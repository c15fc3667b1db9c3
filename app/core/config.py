import os
from dotenv import load_dotenv


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    def __init__(self) -> None:
        # Load variables from .env into environment
        load_dotenv()
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./app.db")
        self.SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO"))
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "changeme")
        # Session cookie set by the auth frontend
        self.SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "session_token")
        self.SESSION_TTL_HOURS: int = int(os.getenv("SESSION_TTL_HOURS", "720"))
        # Frontend base URL (used in CORS); unset means local dev origins only
        self.FRONTEND_BASE_URL: str = os.getenv("FRONTEND_BASE_URL", "")
        # Optional comma-separated list of additional allowed origins for CORS
        self.ALLOWED_ORIGINS: list[str] = [
            o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()
        ]


settings = Settings()
