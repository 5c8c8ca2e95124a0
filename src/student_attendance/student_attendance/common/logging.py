from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by configure_logging(); other root handlers are left alone.
_installed_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> logging.Handler:
    """Configure the root logger; safe to call once per create_app()."""
    global _installed_handler

    log_level = getattr(logging, str(level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if _installed_handler is not None:
        root_logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    _installed_handler = handler

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return handler
