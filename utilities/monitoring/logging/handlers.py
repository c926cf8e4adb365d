import os
from logging.handlers import RotatingFileHandler
from typing import Optional


def ensure_log_dir(filename: str) -> None:
    """Create the directory holding ``filename``; a bare file name needs none."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)


class CustomRotatingFileHandler(RotatingFileHandler):
    """Size-rotated log file, 10MB and five backups unless told otherwise."""

    def __init__(
        self,
        filename: str,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        encoding: Optional[str] = "utf-8",
    ):
        ensure_log_dir(filename)
        super().__init__(filename, maxBytes=max_bytes, backupCount=backup_count, encoding=encoding, delay=True)
