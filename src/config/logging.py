"""Logging setup shared by the API server and the CLI."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stream handler."""
    lvl = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(lvl)
    logger.handlers.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    sh = logging.StreamHandler()
    sh.setLevel(lvl)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
