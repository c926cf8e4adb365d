import logging
import sys
from .handlers import CustomRotatingFileHandler
from .formatters import JSONFormatter, ConsoleFormatter

def setup_logger(
    name: str,
    log_file: str,
    level: int = logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Set up a logger with file and console handlers"""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Handlers are attached once per logger name
    if logger.handlers:
        return logger
    
    # File handler
    file_handler = CustomRotatingFileHandler(log_file, max_bytes=max_bytes, backup_count=backup_count)
    file_handler.setFormatter(JSONFormatter())
    logger.addHandler(file_handler)
    
    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(console_handler)
    
    return logger
