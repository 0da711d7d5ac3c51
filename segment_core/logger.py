"""Logging setup shared by the core and the Streamlit app.

    from segment_core.logger import get_logger
    logger = get_logger(__name__)

The level comes from Settings.log_level unless one is passed explicitly.
"""
import logging
from typing import Optional

from segment_core.config import load_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Install the root handler once and apply the level on every call.
    """
    level_name = (level or load_settings().log_level).upper()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level_name, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
