import logging
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    fmt = logging.Formatter(LOG_FORMAT)

    # drops Flask's default handler and any left by an earlier app
    app.logger.handlers.clear()
    stream = logging.StreamHandler()
    stream.setLevel(level)
    stream.setFormatter(fmt)
    app.logger.addHandler(stream)

    log_file = app.config.get("LOG_FILE")
    if log_file:
        handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=5, encoding="utf-8")
        handler.setLevel(level)
        handler.setFormatter(fmt)
        app.logger.addHandler(handler)

    app.logger.setLevel(level)
