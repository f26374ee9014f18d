"""
Logging helpers for the Text Metrics Engine
===========================================

Colored console logging and lightweight timing for the service layer.
IMPORTANT: No emojis in console output (Windows encoding issues).
"""

import logging
import time
from typing import Dict, Optional

from colorama import Fore, Style, init

# Initialize colorama for Windows
init(autoreset=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVEL_COLORS = {
    logging.DEBUG: Fore.WHITE + Style.DIM,
    logging.INFO: Fore.GREEN,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}

# Third-party loggers that clutter request logs
_NOISY_LOGGERS = [
    "uvicorn.access",
    "httpx",
    "httpcore",
]


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of each record."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{Style.RESET_ALL}"


def setup_logging(level: str = "INFO", colored: bool = True) -> None:
    """
    Configure root logging once for the service or CLI.

    Args:
        level: Log level name ("DEBUG", "INFO", ...); unknown names fall back to INFO
        colored: Use colorama colors on the console handler
    """
    handler = logging.StreamHandler()
    formatter_cls = ColoredFormatter if colored else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT))

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


class TimingTracker:
    """Track timing for named operations"""

    def __init__(self):
        self._timings: Dict[str, float] = {}
        self._start_times: Dict[str, float] = {}

    def start(self, key: str):
        """Start timing for a key"""
        self._start_times[key] = time.perf_counter()

    def end(self, key: str) -> float:
        """End timing and return elapsed seconds"""
        if key not in self._start_times:
            return 0.0
        elapsed = time.perf_counter() - self._start_times.pop(key)
        self._timings[key] = elapsed
        return elapsed

    def elapsed_ms(self, key: str) -> float:
        """End timing and return elapsed milliseconds"""
        return self.end(key) * 1000

    def get(self, key: str) -> Optional[float]:
        """Get recorded timing for a key"""
        return self._timings.get(key)

    def get_all(self) -> Dict[str, float]:
        """Get all recorded timings"""
        return dict(self._timings)
