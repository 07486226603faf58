import logging
import sys
from typing import Optional
from pathlib import Path
from ..config import get_settings

def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get or create logger with consistent configuration.

    Args:
        name: Logger name (usually __name__ of calling module)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Only configure if no handlers are set
    if not logger.handlers:
        try:
            settings = get_settings()

            log_level = getattr(logging, settings.LOG_LEVEL.upper())
            formatter = logging.Formatter(settings.LOG_FORMAT)

            # Records propagate to root; a configured root already prints them
            if not logging.getLogger().handlers:
                console_handler = logging.StreamHandler(sys.stdout)
                console_handler.setFormatter(formatter)
                console_handler.setLevel(log_level)
                logger.addHandler(console_handler)

            # File logging is opt-in through LOG_FILE
            if settings.LOG_FILE:
                log_dir = Path('logs')
                log_dir.mkdir(parents=True, exist_ok=True)
                log_path = log_dir / settings.LOG_FILE

                file_handler = logging.FileHandler(str(log_path))
                file_handler.setFormatter(formatter)
                file_handler.setLevel(log_level)
                logger.addHandler(file_handler)
                logger.debug(f"Log file path: {log_path.absolute()}")

            logger.setLevel(log_level)

            logger.debug(f"Logger initialized for {name}")

        except Exception as e:
            # Fallback to basic console logging if configuration fails
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            logger.addHandler(console_handler)
            logger.setLevel(logging.INFO)
            logger.error(f"Error configuring logger: {str(e)}")

    return logger
