import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Modules log through logging.getLogger(__name__), so these cover every logger
PACKAGE_LOGGERS = ("api", "core", "patterns", "verticals")

_handler: logging.Handler | None = None


def setup_logging(level: str | int = logging.INFO) -> logging.Handler:
    """Attach one stream handler to the package loggers and set their level.

    Safe to call more than once (dev reload, tests): the handler is created
    once and never attached twice, while the level always follows the
    latest call.
    """
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate handlers in dev reload
        if _handler not in logger.handlers:
            logger.addHandler(_handler)

    return _handler
