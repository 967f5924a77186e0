# logging_config.py
import logging
from config import load_config

config = load_config()
LOG_LEVEL = config["LOG_LEVEL"]

# Configure logging once for the entire application.
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.WARNING),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger with the given name.
    """
    return logging.getLogger(name)
