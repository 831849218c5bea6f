import logging
import logging.config


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging with single-line JSON records on the console.

    Safe to call more than once; each call replaces the previous handlers.
    """
    level_name = str(level or "INFO").upper().strip()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "root": {"level": level_name, "handlers": ["console"]},
        }
    )
