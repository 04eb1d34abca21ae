import logging
import logging.handlers
from pathlib import Path
from typing import Dict, Any

DEFAULT_FORMAT = '%(asctime)s - %(name)s - [%(levelname)s] - %(message)s'
DEFAULT_LOG_FILE = 'logs/trdp_config.log'


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Route all service logs to a rotating file and the console.

    Reads the `logging` section of the service config: level, file,
    max_size (MB), backup_count and format. Missing keys fall back to
    INFO, logs/trdp_config.log, 10 MB, 5 backups and DEFAULT_FORMAT.
    """
    level = getattr(logging, str(config.get('level', 'INFO')).upper(), logging.INFO)
    log_file = Path(config.get('file', DEFAULT_LOG_FILE))
    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(config.get('format', DEFAULT_FORMAT))

    handlers = [
        logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=config.get('max_size', 10) * 1024 * 1024,
            backupCount=config.get('backup_count', 5)
        ),
        logging.StreamHandler(),
    ]

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Replace handlers so repeated setup does not duplicate output
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
