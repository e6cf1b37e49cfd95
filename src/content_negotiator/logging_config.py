"""Process-wide logging setup."""

import logging
import sys
from typing import Optional

# Global flag to track if logging has been set up
_LOGGING_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with a single stdout handler.

    Runs once per process; later calls are ignored.

    :param level: Logging level name, defaults to ``settings.log_level``
    :type level: Optional[str]
    :return: None
    :rtype: None
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    if level is None:
        from .config import settings

        level = settings.log_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )

    _LOGGING_CONFIGURED = True
