import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: int = logging.INFO, stream=None):
    """
    Configures structured JSON logging for the application.

    Installs a single JSON stream handler on the root logger (stdout unless
    ``stream`` is given), replacing any handlers already attached. Library
    modules only call ``logging.getLogger(__name__)``; entry points call
    this once.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    # httpx logs every request line at INFO, URLs may carry an API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger
