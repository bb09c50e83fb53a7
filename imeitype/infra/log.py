"""Logging setup for programs built on imeitype.

The library only emits records through module-level loggers; it never
configures handlers itself. Applications call setup_logging() once.
"""

import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """Configure a stdout handler for the whole application.

    IMEI values are masked by the library before they reach a log record.
    """
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
