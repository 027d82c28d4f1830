# SPDX-License-Identifier: MIT
"""
emojilookup - Look up emoji by alias or tag and detect emoji sequences in text
"""

import logging
import sys

VERSION = "0.1.0"

# Logger configuration


class LogFormatter(logging.Formatter):
    # https://stackoverflow.com/questions/384076/how-can-i-color-python-logging-output
    FORMATS = {
        logging.DEBUG: "\x1b[2m%(name)s: %(message)s\x1b[0m",
        logging.INFO: "%(message)s",
        logging.WARN: "\x1b[33;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.ERROR: "\x1b[31;20m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
        logging.CRITICAL: "\x1b[31;1m[%(asctime)s] %(levelname)s: %(message)s\x1b[0m",
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, "%(message)s")
        return logging.Formatter(log_fmt).format(record)


logger = logging.getLogger("emojilookup")
logger.addHandler(logging.NullHandler())

_HANDLER_NAME = "emojilookup_handler"


def configure_logging(verbose: bool = False) -> logging.Handler:
    """
    Attach the coloured stream handler to the package logger.

    Calling this more than once reuses the existing handler.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    for handler in logger.handlers:
        if handler.name == _HANDLER_NAME:
            handler.setLevel(level)
            handler.setStream(sys.stderr)
            return handler

    _log_stream = logging.StreamHandler(sys.stderr)
    _log_stream.setFormatter(LogFormatter())
    _log_stream.setLevel(level)
    _log_stream.name = _HANDLER_NAME

    logger.addHandler(_log_stream)
    return _log_stream
