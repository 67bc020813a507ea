import logging
import sys

from flashq.settings import settings

TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    """Configure the root logger based on settings.

    Call once at startup. ``flash_log_level`` tunes the ``flashq`` loggers on
    their own, e.g. DEBUG to trace queue pushes and drains without turning on
    debug output for everything else.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)

    if settings.log_json:
        from pythonjsonlogger.json import JsonFormatter

        handler.setFormatter(
            JsonFormatter(
                fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"asctime": "timestamp", "levelname": "level"},
            )
        )
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # NOTSET defers to the root level
    flash_level = getattr(logging, settings.flash_log_level.upper(), logging.NOTSET)
    logging.getLogger("flashq").setLevel(flash_level)
