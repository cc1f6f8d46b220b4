import logging
import sys

import colorlog

STREAM_FORMAT = "%(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _own_records(record: logging.LogRecord) -> bool:
    return record.name == "root" or record.name.split(".")[0] == "bibnames"


def get_logger(level: int, debug_file: str | None = None) -> logging.Logger:
    """Sets up the root logger for the scripts: colored `level` output on stderr, everything in `debug_file`."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    if debug_file:
        file_handler = logging.FileHandler(debug_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    stream_handler = colorlog.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(colorlog.ColoredFormatter(STREAM_FORMAT))
    stream_handler.addFilter(_own_records)
    logger.addHandler(stream_handler)

    return logger
