"""Time keeping for build codes.

Elapsed seconds are measured from a fixed zero instant so codes stay
comparable from one build to the next.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from utils import get_logger

logger = get_logger(__name__)

ZERO_INSTANT = datetime(2000, 1, 1, tzinfo=timezone.utc)

_ONE_SECOND = timedelta(seconds=1)


class ClockError(Exception):
    """Raised when the clock cannot be read or is before the zero instant."""

    pass


def _system_clock() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TimeReading:
    """A single clock reading and its distance from the zero instant."""

    instant: datetime
    elapsed_seconds: int


class TimeKeeper:
    """Reads the clock and measures whole seconds since the zero instant.

    Args:
        zero_instant: Timezone-aware reference instant
        clock: Optional callable returning the current aware datetime
    """

    def __init__(
        self,
        zero_instant: datetime = ZERO_INSTANT,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if zero_instant.tzinfo is None or zero_instant.utcoffset() is None:
            raise ValueError("zero_instant must be timezone-aware")
        self.zero_instant = zero_instant
        self._clock = clock if clock is not None else _system_clock
        logger.debug(f"TimeKeeper initialized with zero instant {zero_instant.isoformat()}")

    def read(self) -> TimeReading:
        """Read the clock once.

        Returns:
            TimeReading holding the instant and the whole seconds elapsed
            since the zero instant, truncated toward zero

        Raises:
            ClockError: If the clock fails, returns something other than an
                aware datetime, or reads earlier than the zero instant
        """
        try:
            now = self._clock()
        except Exception as e:
            raise ClockError(f"Failed to read clock: {e}") from e

        if not isinstance(now, datetime):
            raise ClockError(f"Clock returned {type(now).__name__}, expected datetime")
        if now.tzinfo is None or now.utcoffset() is None:
            raise ClockError(f"Clock returned a naive datetime: {now.isoformat()}")

        delta = now - self.zero_instant
        if delta < timedelta(0):
            raise ClockError(
                f"Clock reads {now.isoformat()}, which is before the zero instant "
                f"{self.zero_instant.isoformat()}"
            )

        # Floor division equals truncation for non-negative durations.
        elapsed = delta // _ONE_SECOND
        logger.debug(f"Clock read: {now.isoformat()} ({elapsed}s since zero instant)")
        return TimeReading(instant=now, elapsed_seconds=elapsed)

    def elapsed_seconds(self) -> int:
        """Return whole seconds since the zero instant."""
        return self.read().elapsed_seconds

    def instant_at(self, elapsed_seconds: int) -> datetime:
        """Return the instant lying ``elapsed_seconds`` after the zero instant."""
        return self.zero_instant + timedelta(seconds=elapsed_seconds)
