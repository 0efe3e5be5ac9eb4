"""Clock abstraction and local date-time formatting.

``SystemClock`` reads the host clock in a given (or the host's local)
timezone. ``FixedClock`` always returns the same instant and is meant for
tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import pendulum

LOCAL_FORMAT = "YYYY-MM-DD HH:mm:ss"


def resolve_timezone(
    name: str | None = None,
) -> pendulum.Timezone | pendulum.FixedTimezone:
    """Return the named timezone, or the host's local timezone when unset."""
    if name:
        return pendulum.timezone(name)
    return pendulum.local_timezone()


def format_local(moment: pendulum.DateTime) -> str:
    """Render a date-time as ``YYYY-MM-DD HH:mm:ss`` in its own timezone."""
    return moment.format(LOCAL_FORMAT)


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> pendulum.DateTime: ...


class SystemClock(Clock):
    def __init__(self, tz: str | None = None) -> None:
        self._tz = resolve_timezone(tz)

    def now(self) -> pendulum.DateTime:
        return pendulum.now(self._tz)


class FixedClock(Clock):
    """Clock frozen at one instant, for tests."""

    def __init__(self, instant: pendulum.DateTime) -> None:
        self._instant = instant

    def now(self) -> pendulum.DateTime:
        return self._instant
