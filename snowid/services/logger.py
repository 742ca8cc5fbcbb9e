import logging

from snowid.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logger():
    app_logger = logging.getLogger("snowid")

    # Called from every module, only the first call installs the handler
    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)
        app_logger.setLevel(settings.LOG_LEVEL)
        # Records are written once, by our handler, not again by the host's root handlers
        app_logger.propagate = False

    return app_logger
