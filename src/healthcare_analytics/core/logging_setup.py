from __future__ import annotations
import logging
import logging.handlers
from pathlib import Path
from healthcare_analytics.core.config import LOGS_DIR, LOG_LEVEL

DEFAULT_FMT = "%(asctime)s - %(levelname)-5s - %(name)s - %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"

def setup_logging(level: str = LOG_LEVEL, file_name: str = "pipeline.log", logs_dir: str | Path = LOGS_DIR) -> None:
    if getattr(setup_logging, "_configured", False):
        return  # prevent double-config
    Path(logs_dir).mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level.upper())
    formatter = logging.Formatter(DEFAULT_FMT, datefmt=DATE_FMT)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    root.addHandler(ch)

    # Rotating file
    fh = logging.handlers.RotatingFileHandler(
        Path(logs_dir) / file_name, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
    )
    fh.setFormatter(formatter)
    root.addHandler(fh)

    # keep SQLAlchemy quiet unless asked
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    setup_logging._configured = True
