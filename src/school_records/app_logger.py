import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DEFAULT_LEVEL = os.getenv("SCHOOL_RECORDS_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str | None = None) -> logging.Logger:
    resolved = getattr(logging, (level or _DEFAULT_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

    logger = logging.getLogger("school_records")
    logger.setLevel(resolved)

    # Avoid duplicate console handlers when the app factory runs twice
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        ch.setLevel(resolved)
        logger.addHandler(ch)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger("school_records")
    if not name:
        return base
    if name.startswith("school_records."):
        name = name[len("school_records."):]
    return base.getChild(name)
