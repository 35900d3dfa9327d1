# account_api/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Account API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend (cookies need explicit origins, not "*")
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Session cookies
    session_max_age_days: int = int(os.getenv("SESSION_MAX_AGE_DAYS", "15"))
    cookie_secure: bool = os.getenv("COOKIE_SECURE", "false").lower() in ("true", "1", "yes")
    cookie_samesite: str = os.getenv("COOKIE_SAMESITE", "lax")

    @property
    def session_max_age(self) -> int:
        """Cookie Max-Age in seconds."""
        return self.session_max_age_days * 86400

settings = Settings()  # Instantiate configuration
