"""OutputSink adapters and the non-fatal write helper used by family components."""

from __future__ import annotations

import logging
import sys
from threading import Lock
from typing import TYPE_CHECKING

from payment_families.application.ports import OutputSink

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)

GATEWAY_LOGGER_NAME = "payment_families.gateway"


class ConsoleSink(OutputSink):
    """Writes each message as a line on a text stream (stdout by default).

    The stream is looked up at write time when none is given, so
    redirected or captured stdout is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{message}\n")
        stream.flush()


class LoggingSink(OutputSink):
    """Routes messages into the standard logging tree."""

    def __init__(self, logger_name: str = GATEWAY_LOGGER_NAME, level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(logger_name)
        self._level = level

    def write(self, message: str) -> None:
        self._logger.log(self._level, message)


class CollectingSink(OutputSink):
    """Keeps messages in memory. Thread-safe."""

    def __init__(self) -> None:
        self._messages: list[str] = []
        self._lock = Lock()

    def write(self, message: str) -> None:
        with self._lock:
            self._messages.append(message)

    @property
    def messages(self) -> list[str]:
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()


def write_quietly(sink: OutputSink, message: str) -> bool:
    """Write message to sink, downgrading any failure to a warning.

    Returns:
        True if the write succeeded, False otherwise.
    """
    try:
        sink.write(message)
    except Exception:
        logger.warning("Output sink %r failed to write message", sink, exc_info=True)
        return False
    return True
