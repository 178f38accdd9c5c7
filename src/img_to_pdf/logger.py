"""
Logger for the image to PDF converter
"""

from datetime import datetime
from typing import List, Tuple


class Logger:
    """Simple logging with timestamp.

    Every message is also kept in ``records`` so callers can inspect what
    was skipped without capturing stdout.
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.verbose = verbose
        self.quiet = quiet
        self.records: List[Tuple[str, str]] = []

    def log(self, message: str, level: str = "INFO"):
        """Log a message with timestamp"""
        self.records.append((level, message))
        if self.quiet or (level == "DEBUG" and not self.verbose):
            return
        timestamp = datetime.now().strftime("%H:%M:%S")
        print(f"[{timestamp}] {level}: {message}")

    def info(self, message: str):
        """Log info message"""
        self.log(message, "INFO")

    def error(self, message: str):
        """Log error message"""
        self.log(message, "ERROR")

    def debug(self, message: str):
        """Log debug message"""
        self.log(message, "DEBUG")

    def warning(self, message: str):
        """Log warning message"""
        self.log(message, "WARNING")

    @property
    def warnings(self) -> List[str]:
        return [message for level, message in self.records if level == "WARNING"]
