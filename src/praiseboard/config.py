"""Configuration for the Praise Board server."""

from typing import Dict, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Praise Board configuration settings."""

    # Session token signing (HS256)
    JWT_SECRET: str = "supersecretkey"
    SESSION_COOKIE_NAME: str = "token"
    COOKIE_SECURE: bool = True

    # Tokens carry no expiry unless this is set
    SESSION_TTL_MINUTES: Optional[int] = None

    # Static credential table: username -> plaintext password
    USERS: Dict[str, str] = {
        "nic": "praisecage!",
        "travolta": "thedevil666",
    }

    # Listening address
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    class Config:
        env_file = ".env"
        env_prefix = "PRAISEBOARD_"


# Global settings instance
settings = Settings()
