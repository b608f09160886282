import logging
import sys

from .config import LOG_LEVEL, LOG_NAMESPACES

APP_LOGGER_NAME = "transaction_reports"


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


def configure_logging(level: str = LOG_LEVEL, allowed_namespaces=None) -> logging.Logger:
    """
    Attaches a stdout handler to the application logger.

    Modules log through ``logging.getLogger(__name__)`` and inherit the level
    set here, e.g. "transaction_reports.features.reports.service".
    Calling this more than once replaces the handler instead of stacking them.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)

    namespaces = LOG_NAMESPACES if allowed_namespaces is None else allowed_namespaces
    if namespaces:
        console_handler.addFilter(NamespaceFilter(namespaces))

    app_logger.handlers = [console_handler]
    return app_logger

