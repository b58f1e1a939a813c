#
# PROJECT: term3d
# MODULE: term3d/logging_config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 11
# LOG_REF: 2026-10-19
#

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the 'term3d' logger to stderr, and to `log_file` when given.

    stdout stays reserved for the rendered picture. Calling this again
    replaces the handlers of the previous call.
    """
    logger = logging.getLogger("term3d")
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
