"""
CompoundWatch Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

# Render sets RENDER=true automatically
_ON_RENDER = os.getenv("RENDER", "").lower() == "true"
_DEFAULT_STORAGE_PATH = (
    "/data/compoundwatch_annotations.db" if _ON_RENDER else "compoundwatch_annotations.db"
)


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    ENGINE_VERSION: str = "1.0.0"
    API_VERSION: str = "1"

    # --- Co-occurrence tracking ---
    # A topic counts as active if seen within the last N cycles
    WINDOW_CYCLES: int = int(os.getenv("COMPOUNDWATCH_WINDOW_CYCLES", "3"))
    # Consecutive cycles a topic must persist before it can activate a pattern
    MIN_STREAK: int = int(os.getenv("COMPOUNDWATCH_MIN_STREAK", "1"))
    # In-window mentions a topic needs before it can activate a pattern
    MIN_TOPIC_MENTIONS: int = int(os.getenv("COMPOUNDWATCH_MIN_TOPIC_MENTIONS", "1"))
    # Topics idle this many cycles are evicted from the tracker
    RETENTION_CYCLES: int = int(os.getenv("COMPOUNDWATCH_RETENTION_CYCLES", "6"))

    # --- Scoring ---
    MAX_SCORE: float = float(os.getenv("COMPOUNDWATCH_MAX_SCORE", "10.0"))

    # --- Localization ---
    DEFAULT_LOCALE: str = os.getenv("COMPOUNDWATCH_DEFAULT_LOCALE", "en")

    # --- Manual annotations ---
    STORAGE_BACKEND: str = os.getenv("COMPOUNDWATCH_STORAGE", "sqlite")
    STORAGE_PATH: str = os.getenv("COMPOUNDWATCH_STORAGE_PATH", _DEFAULT_STORAGE_PATH)
    STORAGE_KEY: str = os.getenv(
        "COMPOUNDWATCH_STORAGE_KEY", "compoundwatch.manual_annotations"
    )

    # --- Server ---
    HOST: str = os.getenv("COMPOUNDWATCH_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("COMPOUNDWATCH_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("COMPOUNDWATCH_CORS_ORIGINS", "*")


settings = Settings()
