from __future__ import annotations

from collections.abc import Iterable
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Framework loggers that drown out the app at INFO.
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def configure_logging(debug: bool = False, *, quiet: Iterable[str] = NOISY_LOGGERS) -> None:
    level = logging.DEBUG if debug else logging.INFO
    root = logging.getLogger()

    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)

    if not debug:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)
