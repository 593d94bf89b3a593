# app/core/clock.py
import threading
from datetime import datetime, timedelta, timezone

_ONE_MS = timedelta(milliseconds=1)


def format_timestamp(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


# Millisecond timestamps that never repeat or go backwards
class MonotonicClock:
    def __init__(self, source=None):
        self._source = source or (lambda: datetime.now(timezone.utc))
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._source().astimezone(timezone.utc)
            current = current.replace(microsecond=(current.microsecond // 1000) * 1000)
            if self._last is not None and current <= self._last:
                current = self._last + _ONE_MS
            self._last = current
            return current

    def timestamp(self) -> str:
        return format_timestamp(self.now())


clock = MonotonicClock()

__all__ = ["MonotonicClock", "clock", "format_timestamp"]
