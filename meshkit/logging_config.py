"""
Logging setup for command-line use. The library itself only creates
module loggers under the ``meshkit`` namespace and never configures them.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from . import config

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# handlers installed here carry this marker so a second call can replace them
_OWNED = "_meshkit_cli"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send ``meshkit.*`` records to stderr, and also to ``log_file`` when
    given. Calling again replaces what the previous call installed; other
    handlers on the ``meshkit`` logger are left alone.
    """
    logger = logging.getLogger("meshkit")
    for h in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(h)
        h.close()

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding=config.ENCODING))

    fmt = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    for h in handlers:
        setattr(h, _OWNED, True)
        h.setFormatter(fmt)
        logger.addHandler(h)
    logger.setLevel(level)
    return logger
