"""Status logging: loguru feeding a bounded buffer that the picker's log panel reads."""

import sys
from collections import deque
from threading import Lock

from loguru import logger

STATUS_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"

logger.remove()


class LogCapture:
    """Keeps the newest status lines; older ones fall off once max_logs is reached."""

    def __init__(self, max_logs=100):
        self.logs = deque(maxlen=max_logs)
        self.lock = Lock()

    def write(self, message):
        with self.lock:
            self.logs.append(message.rstrip())

    def get_logs(self):
        with self.lock:
            return list(self.logs)

    def clear(self):
        with self.lock:
            self.logs.clear()

    def resize(self, max_logs: int):
        """Change the history ceiling, keeping the newest entries."""
        with self.lock:
            self.logs = deque(self.logs, maxlen=max_logs)


log_capture = LogCapture()
logger.add(log_capture.write, format=STATUS_FORMAT, level="INFO")


def enable_console_logging():
    """Mirror status messages to stderr; only for modes where textual does not own the terminal."""
    logger.add(sys.stderr, format="{time:HH:mm:ss} | {level} | {message}", level="INFO")


__all__ = ['logger', 'log_capture', 'enable_console_logging']
