import logging
import os

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def setup_logging() -> logging.Logger:
    """Library-friendly: do NOT touch root.

    Ensure the 'staffsnap' logger exists with a NullHandler so importing the
    package never prints "no handler" warnings; the app factory decides where
    records go.
    """
    logger = logging.getLogger("staffsnap")
    logger.setLevel(getattr(logging, _DEFAULT_LEVEL, logging.INFO))
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.propagate = True
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger("staffsnap")
    return base.getChild(name) if name else base


def attach_console_handler(level: str) -> None:
    logger = get_logger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, "_staffsnap_console", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    handler._staffsnap_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


logger = setup_logging()
