import logging

logger = logging.getLogger("searchbridge")


def warn(message: str, *args) -> None:
    logger.warning(message, *args)
