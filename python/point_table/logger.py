import logging

LOGGER_NAME = "point_table"

logger = logging.getLogger(LOGGER_NAME)

# Library stays silent until an application attaches a handler.
logger.addHandler(logging.NullHandler())


def attach_console_handler() -> logging.Handler:
    """Attach handler which writes to stderr, once.

    Returns:
        Attached handler, or the one attached beforehand.
    """
    for handler in logger.handlers:
        if getattr(handler, "name", None) == LOGGER_NAME:
            return handler

    handler = logging.StreamHandler()
    handler.set_name(LOGGER_NAME)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    return handler


def set_debug(enabled: bool) -> None:
    attach_console_handler()
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
