"""Shared logging helpers."""

from __future__ import annotations

import logging
import sys

# logs every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger on stderr.

    Standard output stays reserved for merged documents. HTTP client loggers are
    only as verbose as ``level`` when it is DEBUG, WARNING otherwise.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)
