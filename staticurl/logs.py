import logging
import sys

from datetime import datetime

LEVEL_TAGS = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "ERROR",
}


class TaggedFormatter(logging.Formatter):
    """ %Y/%m/%d %H:%M:%S.%f LEVEL: message, warnings tagged WARN """

    def __init__(self):
        super().__init__("%(asctime)s %(tag)s: %(message)s")

    def formatTime(self, record, datefmt=None):
        return datetime.fromtimestamp(record.created).strftime("%Y/%m/%d %H:%M:%S.%f")

    def format(self, record):
        record.tag = LEVEL_TAGS.get(record.levelno, record.levelname)
        return super().format(record)


def setup_logging(quiet: bool = False, stream=None) -> logging.Logger:
    logger = logging.getLogger("staticurl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(TaggedFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING if quiet else logging.INFO)
    return logger
