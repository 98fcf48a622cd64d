"""
Process-wide logging setup.
"""
import logging

from .settings import get_settings

_LOGGING_CONFIGURED = False


def configure_logging(level: str = None) -> None:
    """Configure root logging once, using the settings log level by default."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
