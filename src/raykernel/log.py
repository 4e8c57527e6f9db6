from __future__ import annotations

import logging

_HANDLER_NAME = "raykernel-console"


def configure_logging(level_name: str = "WARNING") -> logging.Logger:
    """Attach a console handler to the ``raykernel`` logger.

    Calling it again only updates the level.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    logger = logging.getLogger("raykernel")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
