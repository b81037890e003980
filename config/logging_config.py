"""Logging setup for the dashboard process."""

import logging
import os
from typing import Optional

from config.defaults import LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR


def configure_logging(level: Optional[str] = None) -> int:
    """Configure root logging once and return the effective level.

    Streamlit reruns the script on every interaction, so repeated calls
    must not stack handlers; ``basicConfig`` is a no-op once the root
    logger has a handler.
    """
    name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
    return numeric
