import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "WARNING") -> None:
    """Route loguru output to a single stderr sink at ``level``.

    Command results go to stdout, so diagnostics stay on stderr and are quiet
    unless the level is lowered.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=None,
        backtrace=False,
        diagnose=False,
        enqueue=False,
    )
