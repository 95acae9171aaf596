"""Logging setup for applications embedding lastfmpy."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger with a terse format.

    The library itself only emits records through module loggers; call this from an
    application entry point. ``force=True`` replaces handlers installed earlier, which
    tests use to reconfigure between runs.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs every request at INFO; keep it quiet unless debugging.
    if level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
