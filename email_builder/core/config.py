"""
Configuration du moteur — lue depuis l'environnement (EMAIL_BUILDER_*).
"""
import os
from typing import Optional

from pydantic import BaseModel, Field

_PREFIX = "EMAIL_BUILDER_"


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(_PREFIX + name, "").strip()
    return float(raw) if raw else None


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(_PREFIX + name, "").strip()
    return int(raw) if raw else None


class BuilderSettings(BaseModel):
    feed_timeout: float = Field(default=10.0, gt=0, description="Timeout HTTP des flux (s)")
    user_agent: str = "email-builder/0.1.0"
    build_timeout: Optional[float] = Field(default=None, gt=0, description="Timeout global d'un document (s)")
    max_feed_items: Optional[int] = Field(default=None, ge=0, description="Plafond global d'items par flux")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BuilderSettings":
        """Construit les settings depuis l'environnement (valeurs par défaut sinon)."""
        values: dict = {}
        if (timeout := _env_float("FEED_TIMEOUT")) is not None:
            values["feed_timeout"] = timeout
        if ua := os.getenv(_PREFIX + "USER_AGENT"):
            values["user_agent"] = ua
        if (build_timeout := _env_float("BUILD_TIMEOUT")) is not None:
            values["build_timeout"] = build_timeout
        if (max_items := _env_int("MAX_FEED_ITEMS")) is not None:
            values["max_feed_items"] = max_items
        if level := os.getenv(_PREFIX + "LOG_LEVEL"):
            values["log_level"] = level.upper()
        return cls(**values)
