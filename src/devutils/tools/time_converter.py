"""Timestamp and date-string normalizer.

Input is classified into exactly one of two variants:

- ``NumericInput``: the whole trimmed text is a number literal. Values
  below ``SECONDS_THRESHOLD`` are Unix seconds, values at or above it are
  Unix milliseconds. The threshold is a heuristic kept for compatibility.
  Very small millisecond values will be read as seconds.
- ``TextualInput``: anything else, decoded as a calendar date/time.

Both paths resolve to a whole number of milliseconds since the epoch,
which is then rendered four ways.
"""

from __future__ import annotations

import calendar
import datetime as dt
import logging
import math
import re
from dataclasses import dataclass

import pendulum
from dateutil import parser as dateutil_parser

from devutils.clock import Clock, SystemClock, format_local, resolve_timezone
from devutils.errors import ParseError, RangeError
from devutils.history.ledger import HistoryLedger
from devutils.models.conversion import TimePresets, TimeResult

logger = logging.getLogger(__name__)

SECONDS_THRESHOLD = 100_000_000_000

RFC3339_FORMAT = "YYYY-MM-DD[T]HH:mm:ss.SSS[Z]"

NON_POSITIVE_MESSAGE = "Timestamp must be a positive number."
INVALID_TIMESTAMP_MESSAGE = "Invalid timestamp (e.g., too large, too small, or non-integer)."
INVALID_FORMAT_MESSAGE = "Invalid date or time string format. Please check the examples below."

_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)

_DECIMAL_LITERAL = re.compile(
    r"""^[+-]?(?:
        Infinity
        | \d+\.?\d*(?:[eE][+-]?\d+)?
        | \.\d+(?:[eE][+-]?\d+)?
    )$""",
    re.VERBOSE,
)
_PREFIXED_INTEGER = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")

# Bare ISO calendar dates carry no time of day and are read as UTC.
_ISO_DATE_ONLY = re.compile(r"^\d{4}(?:-\d{2}(?:-\d{2})?)?$")

# Words that resolve against the current moment rather than naming one.
_RELATIVE_WORDS = frozenset({"now", "today", "tomorrow", "yesterday"})

_DEFAULTS = (dt.datetime(2000, 1, 1), dt.datetime(2004, 2, 2))

Zone = pendulum.Timezone | pendulum.FixedTimezone


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NumericInput:
    value: float


@dataclass(frozen=True)
class TextualInput:
    text: str


ClassifiedInput = NumericInput | TextualInput


def classify_input(text: str) -> ClassifiedInput:
    """Classify trimmed, non-empty text as a number literal or free text."""
    if _DECIMAL_LITERAL.match(text):
        return NumericInput(float(text.replace("Infinity", "inf")))
    if _PREFIXED_INTEGER.match(text):
        return NumericInput(float(int(text, 0)))
    return TextualInput(text)


# ---------------------------------------------------------------------------
# Decoding to epoch milliseconds
# ---------------------------------------------------------------------------


def _to_millis(moment: dt.datetime) -> int:
    return calendar.timegm(moment.utctimetuple()) * 1000 + moment.microsecond // 1000


def numeric_to_millis(value: float) -> int:
    """Interpret a positive number as Unix seconds or milliseconds.

    Fractional milliseconds are truncated.

    Raises:
        RangeError: if ``value`` is zero or negative.
        ParseError: if ``value`` is not finite.
    """
    if value <= 0:
        raise RangeError(NON_POSITIVE_MESSAGE)
    millis = value * 1000 if value < SECONDS_THRESHOLD else value
    if not math.isfinite(millis):
        raise ParseError(INVALID_TIMESTAMP_MESSAGE)
    return int(millis)


def text_to_millis(text: str, tz: Zone) -> int:
    """Decode a date/time string; naive values are read in ``tz``.

    The text must name a full calendar date. Times of day alone, partial
    dates and words relative to the current moment are rejected.

    Raises:
        ParseError: if the text is not a recognizable date/time.
    """
    if text.lower() in _RELATIVE_WORDS:
        raise ParseError(INVALID_FORMAT_MESSAGE)
    zone = "UTC" if _ISO_DATE_ONLY.match(text) else tz
    try:
        parsed = pendulum.parse(text, tz=zone, exact=True)
    except (ValueError, OverflowError):
        return _to_millis(_parse_free_form(text, zone))
    if isinstance(parsed, dt.datetime):
        return _to_millis(parsed)
    if isinstance(parsed, dt.date):
        return _to_millis(pendulum.datetime(parsed.year, parsed.month, parsed.day, tz=zone))
    # Times of day, durations and intervals are not instants.
    raise ParseError(INVALID_FORMAT_MESSAGE)


def _parse_free_form(text: str, zone: Zone | str) -> dt.datetime:
    """Decode a non-ISO date string that names its year, month and day.

    Any field missing from ``text`` is filled from the parser default, so
    two parses against different defaults disagree exactly when the text
    leaves part of the date unspecified.
    """
    try:
        first = dateutil_parser.parse(text, default=_DEFAULTS[0])
        second = dateutil_parser.parse(text, default=_DEFAULTS[1])
    except (ValueError, OverflowError) as exc:
        raise ParseError(INVALID_FORMAT_MESSAGE) from exc
    if first.date() != second.date():
        raise ParseError(INVALID_FORMAT_MESSAGE)
    return pendulum.instance(first, tz=zone)


def to_epoch_millis(classified: ClassifiedInput, tz: Zone) -> int:
    if isinstance(classified, NumericInput):
        return numeric_to_millis(classified.value)
    return text_to_millis(classified.text, tz)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_millis(millis: int, tz: Zone) -> TimeResult:
    """Render epoch milliseconds as local, seconds, milliseconds and RFC 3339.

    Raises:
        OverflowError: if the instant falls outside years 1..9999.
    """
    instant = pendulum.instance(_EPOCH + dt.timedelta(milliseconds=millis))
    return TimeResult(
        local_format=format_local(instant.in_timezone(tz)),
        unix_seconds=str(millis // 1000),
        unix_milliseconds=str(millis),
        rfc3339_format=instant.in_timezone("UTC").format(RFC3339_FORMAT),
    )


def convert_time(text: str, tz: Zone | None = None) -> TimeResult:
    """Convert a timestamp or date string; errors come back in ``TimeResult.error``."""
    trimmed = text.strip()
    if not trimmed:
        return TimeResult()
    zone = tz if tz is not None else resolve_timezone()
    classified = classify_input(trimmed)
    try:
        millis = to_epoch_millis(classified, zone)
        return render_millis(millis, zone)
    except (ParseError, RangeError) as exc:
        return TimeResult.failure(str(exc))
    except (OverflowError, ValueError):
        if isinstance(classified, NumericInput):
            return TimeResult.failure(INVALID_TIMESTAMP_MESSAGE)
        return TimeResult.failure(INVALID_FORMAT_MESSAGE)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class TimeConverter:
    """Time tool: convert the input, remember it on success."""

    def __init__(
        self,
        ledger: HistoryLedger,
        tz: str | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._ledger = ledger
        self._tz = resolve_timezone(tz)
        self._clock = clock or SystemClock(tz)

    @property
    def history(self) -> HistoryLedger:
        return self._ledger

    def convert(self, text: str) -> TimeResult:
        result = convert_time(text, self._tz)
        if result.error is not None:
            logger.info("Time input rejected: %s", result.error)
        elif text.strip():
            self._ledger.record(text)
        return result

    def presets(self) -> TimePresets:
        """Current moment as a local date-time, Unix seconds and Unix milliseconds."""
        now = self._clock.now()
        millis = _to_millis(now)
        return TimePresets(
            current_datetime=format_local(now.in_timezone(self._tz)),
            unix_seconds=str(millis // 1000),
            unix_milliseconds=str(millis),
        )

    def default_input(self) -> str:
        """Pre-fill value for the input field: the current local date-time."""
        return self.presets().current_datetime
