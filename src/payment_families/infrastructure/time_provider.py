from datetime import UTC, datetime, timedelta

from payment_families.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Time provider backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Time provider frozen at a chosen UTC instant, for log-format tests.

    Note: advance() is NOT thread-safe; share one instance across threads
    only while the time is not being changed.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._require_utc(fixed_time)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def advance(self, delta: timedelta) -> None:
        """Move the frozen clock by delta (may be negative)."""
        self._fixed_time = self._fixed_time + delta

    def _require_utc(self, dt: datetime) -> None:
        if dt.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={dt.tzinfo}")
