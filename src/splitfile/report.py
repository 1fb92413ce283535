import logging
import sys
import threading
from datetime import datetime

from splitfile.structs import OperationStatus


def get_logger(name: str = "splitfile") -> logging.Logger:
    """
    Get a configured logger for splitfile.

    Args:
        name: Name of the logger to retrieve.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


class OperationReport:
    """
    Live progress tracker and final summary for a split or merge.

    Copy tasks running on worker threads call :meth:`record_part`, so every
    counter update goes through an internal lock.
    """

    def __init__(self, operation: str = "split", parts_total: int = 0) -> None:
        self.operation = operation
        self.status = OperationStatus.PENDING
        self.parts_total = parts_total
        self.parts_done = 0
        self.bytes_copied = 0
        self.exception: Exception | None = None
        self.start_time: datetime | None = None
        self.end_time: datetime | None = None
        self._lock = threading.Lock()
        self._finished_event = threading.Event()

    @property
    def duration(self) -> float:
        """Total execution time in seconds."""
        start = self.start_time
        if not start:
            return 0.0
        end = self.end_time or datetime.now()
        return (end - start).total_seconds()

    @property
    def bytes_per_second(self) -> float:
        duration = self.duration
        if duration == 0:
            return 0.0
        return self.bytes_copied / duration

    @property
    def is_finished(self) -> bool:
        return self._finished_event.is_set()

    @property
    def has_error(self) -> bool:
        return self.exception is not None

    def wait(self, timeout: float | None = None) -> bool:
        """
        Wait for the operation to finish.

        Returns:
            True if the operation finished, False if it timed out.
        """
        return self._finished_event.wait(timeout)

    def record_part(self, bytes_written: int) -> None:
        with self._lock:
            self.parts_done += 1
            self.bytes_copied += bytes_written

    def _mark_running(self, parts_total: int | None = None) -> None:
        if parts_total is not None:
            self.parts_total = parts_total
        self.status = OperationStatus.RUNNING
        self.start_time = datetime.now()

    def _mark_completed(self) -> None:
        self.status = OperationStatus.COMPLETED
        self.end_time = datetime.now()
        self._finished_event.set()

    def _mark_failed(self, exception: Exception) -> None:
        self.status = OperationStatus.FAILED
        self.exception = exception
        self.end_time = datetime.now()
        self._finished_event.set()

    def __repr__(self) -> str:
        return (
            f"<OperationReport operation={self.operation} "
            f"status={self.status.value} "
            f"parts={self.parts_done}/{self.parts_total} "
            f"bytes={self.bytes_copied} "
            f"duration={self.duration:.2f}s>"
        )
