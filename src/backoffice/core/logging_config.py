import logging
import sys
from typing import Iterable, Optional

APP_LOGGER_NAME = "backoffice"


class NamespaceFilter(logging.Filter):
    def __init__(self, allowed_namespaces=None):
        super().__init__()
        self.allowed_namespaces = allowed_namespaces if allowed_namespaces is not None else []

    def filter(self, record):
        if not self.allowed_namespaces:
            return True # If no namespaces are specified, allow all records
        # Allow record if its name starts with any of the allowed namespaces
        return any(record.name.startswith(ns) for ns in self.allowed_namespaces)


log_formatter = logging.Formatter(
    fmt="%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def configure_logging(
    level: str = "INFO",
    allowed_namespaces: Optional[Iterable[str]] = None,
) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just adjust the level and the namespace filter.

    Modules log through `logging.getLogger(__name__)`, so loggers such as
    "backoffice.sales.features.orders.service" inherit from "backoffice".
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level.upper())

    console_handler = next(
        (h for h in app_logger.handlers if getattr(h, "_backoffice_console", False)),
        None,
    )
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(log_formatter)
        console_handler._backoffice_console = True
        app_logger.addHandler(console_handler)

    for existing in list(console_handler.filters):
        if isinstance(existing, NamespaceFilter):
            console_handler.removeFilter(existing)
    if allowed_namespaces:
        console_handler.addFilter(NamespaceFilter(list(allowed_namespaces)))

    # SQL chatter from the ORM stays quiet unless explicitly turned up.
    logging.getLogger("tortoise").setLevel(logging.WARNING)

    return app_logger
