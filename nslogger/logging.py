import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional, TextIO


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def format_events(self) -> List[str]:
        lines = []
        for event in self.get_events():
            details = " ".join(f"{k}={v}" for k, v in event["details"].items())
            lines.append(f"{event['level']} {event['event']} {details}".rstrip())
        return lines


def create_logger(
    name: str,
    ring_size: int,
    level: str | int = logging.INFO,
    stream: Optional[TextIO] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if stream is not None:
        stream_handler = logging.StreamHandler(stream)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    logger.propagate = False
    return logger


def get_ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
