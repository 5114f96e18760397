"""In-memory capture of log records for post-run inspection.

Nothing may be printed while the animation owns the screen, so log records
go into a ring buffer that can be exported to a file once the terminal has
been restored.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from syoryouma.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    level: str
    name: str
    message: str
    timestamp: float


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


def _truncate(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"
    return message


class DebugLogHandler(logging.Handler):
    """Logging handler that captures records to the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_buffer.append(
                LogEntry(
                    level=record.levelname,
                    name=record.name,
                    message=_truncate(self.format(record)),
                    timestamp=record.created,
                )
            )
        except Exception:
            self.handleError(record)


_handler: DebugLogHandler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> DebugLogHandler:
    """Attach the capture handler to the root logger.

    Idempotent: later calls only adjust the level.
    """
    global _handler

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _handler is None:
        _handler = DebugLogHandler()
        _handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(_handler)
        logging.getLogger(__name__).debug("Debug logging initialized")
    return _handler


def clear_log_buffer() -> None:
    log_buffer.clear()


def export_logs_to_file(file_path: str | Path) -> int:
    """Export all captured entries to a file.

    Returns:
        Number of log entries written
    """
    output_path = Path(file_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        f.write("# syo-ryo-uma debug log\n")
        f.write(f"# Total entries: {len(log_buffer)}\n\n")
        for entry in log_buffer:
            ts = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            f.write(f"{ts} [{entry.level}] {entry.name}: {entry.message}\n")

    return len(log_buffer)
