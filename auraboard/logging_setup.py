from __future__ import annotations

import logging
import sys


class _ThirdPartyNoiseFilter(logging.Filter):
    """
    Keep every auraboard record, but only let other libraries through at
    WARNING and above (uvicorn access logs, sqlalchemy echo, etc.).
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "auraboard" or record.name.startswith("auraboard."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this once from the application entry point. Calling it again replaces
    the handler instead of stacking duplicates.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        if getattr(h, "_auraboard", False):
            root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyNoiseFilter())
    ch._auraboard = True
    root.addHandler(ch)

    logging.captureWarnings(True)
