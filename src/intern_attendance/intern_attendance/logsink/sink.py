from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from ..common.datetime_utils import utc_timestamp
from ..core.exceptions import LogSinkClosedError

logger = logging.getLogger(__name__)


def format_line(message: str, timestamp: Optional[str] = None) -> str:
    return f"{timestamp or utc_timestamp()} - {message}\n"


class LogSink:
    """Append-only, timestamped line writer to one shared file.

    Built once at start-up and handed to whatever needs it. ``write`` does not
    block the caller: the append runs on a background thread and the returned
    future may be ignored. I/O failures are reported on the ``logging`` channel
    and dropped. There is no rotation and no size bound.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._executor is not None

    def open(self) -> "LogSink":
        if self._executor is None:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error("Error preparing log directory %s: %s", self._path.parent, e)
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="log-sink")
        return self

    def close(self) -> None:
        """Wait for pending appends, then stop the writer thread."""
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)

    def __enter__(self) -> "LogSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write(self, message: str) -> Future:
        executor = self._executor
        if executor is None:
            raise LogSinkClosedError(f"log sink {self._path} is not open")
        try:
            return executor.submit(self._append, format_line(message))
        except RuntimeError:
            # close() shut the executor down after we read it
            raise LogSinkClosedError(f"log sink {self._path} is not open") from None

    def _append(self, line: str) -> bool:
        try:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line)
        except OSError as e:
            logger.error("Error writing log: %s", e)
            return False
        return True


class LogSinkHandler(logging.Handler):
    """Forward stdlib log records into a ``LogSink``."""

    def __init__(self, sink: LogSink, level: int = logging.NOTSET):
        super().__init__(level)
        self._sink = sink
        self.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        # The sink reports its own failures through logging; don't feed those back in.
        if record.name == logger.name:
            return
        try:
            self._sink.write(self.format(record))
        except Exception:
            self.handleError(record)
