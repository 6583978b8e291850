from __future__ import annotations

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Port for human-readable side-channel output.

    Processors, loggers and the payment service write their notices here
    instead of to a fixed global stream, so callers choose where text
    ends up (console, logging, an in-memory buffer in tests).

    Contract:
    - write() emits one complete line; callers do not append newlines
    - write() MAY raise; callers treat a failed write as non-fatal
    """

    @abstractmethod
    def write(self, message: str) -> None:
        """Emit message as one line."""
