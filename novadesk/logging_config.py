# novadesk/logging_config.py
import logging
import logging.config
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_logging_config(log_dir: str) -> dict:
    log_file = Path(log_dir) / "app.log"
    return {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
            },
            "access": {
                "format": "%(asctime)s | %(levelname)s | uvicorn.access | %(message)s",
            },
        },

        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": "INFO",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": str(log_file),
                "maxBytes": 5 * 1024 * 1024,  # 5 MB
                "backupCount": 5,
                "encoding": "utf-8",
                "level": "INFO",
            },
            "access_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "access",
                "filename": str(log_file),
                "maxBytes": 5 * 1024 * 1024,
                "backupCount": 5,
                "encoding": "utf-8",
                "level": "INFO",
            },
        },

        "loggers": {
            "uvicorn": {
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["access_file"],
                "level": "INFO",
                "propagate": False,
            },
            "novadesk": {
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": False,
            },
        },

        "root": {
            "handlers": ["console", "file"],
            "level": "INFO",
        },
    }


def setup_logging(log_dir: str) -> dict:
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    config = build_logging_config(log_dir)
    logging.config.dictConfig(config)
    logging.getLogger("novadesk").info("Logging initialized (%s)", log_dir)
    return config
