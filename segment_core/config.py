"""
Environment configuration for the segment composer.

Values are read once at startup from the process environment (and a local
.env file, if present).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_WEBHOOK_URL = "https://webhook.site/"


@dataclass(frozen=True)
class Settings:
    webhook_url: str = DEFAULT_WEBHOOK_URL
    catalog_path: Optional[str] = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Empty values fall back to defaults.
    """
    webhook_url = os.getenv("SEGMENT_WEBHOOK_URL") or DEFAULT_WEBHOOK_URL
    catalog_path = os.getenv("SEGMENT_CATALOG_PATH") or None
    log_level = (os.getenv("SEGMENT_LOG_LEVEL") or "INFO").upper()
    return Settings(
        webhook_url=webhook_url,
        catalog_path=catalog_path,
        log_level=log_level,
    )
