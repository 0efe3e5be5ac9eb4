"""JSON pretty-printer and minifier.

Parsing follows the standard JSON grammar strictly: the ``NaN`` and
``Infinity`` extensions that the stdlib decoder accepts by default are
rejected. Number literals too large for a float decode to ``null``.
Object key order is preserved through parse and render.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Callable

from devutils.errors import ParseError
from devutils.history.ledger import HistoryLedger
from devutils.models.common import JsonValue
from devutils.models.conversion import FormatResult

logger = logging.getLogger(__name__)

INDENT = 2

# Decoded strings hold valid pairs as one code point, so any surrogate
# left is unpaired and cannot be encoded as UTF-8.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _reject_constant(name: str) -> float:
    msg = f"Unexpected token {name}: not valid JSON"
    raise ValueError(msg)


def _parse_float(literal: str) -> float | None:
    value = float(literal)
    if math.isinf(value):
        return None
    return value


def _escape_lone_surrogates(text: str) -> str:
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def parse_json(text: str) -> JsonValue:
    """Decode JSON text.

    Raises:
        ParseError: with the decoder's diagnostic if ``text`` is not
            well-formed JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def prettify(value: JsonValue) -> str:
    """Serialize with 2-space indentation, keeping key order."""
    return _escape_lone_surrogates(json.dumps(value, indent=INDENT, ensure_ascii=False))


def minify(value: JsonValue) -> str:
    """Serialize without any insignificant whitespace."""
    return _escape_lone_surrogates(json.dumps(value, separators=(",", ":"), ensure_ascii=False))


class JsonFormatter:
    """JSON tool: parse the input, render it, remember it on success."""

    def __init__(self, ledger: HistoryLedger) -> None:
        self._ledger = ledger

    @property
    def history(self) -> HistoryLedger:
        return self._ledger

    def prettify(self, text: str) -> FormatResult:
        return self._process(text, prettify)

    def minify(self, text: str) -> FormatResult:
        return self._process(text, minify)

    def _process(self, text: str, render: Callable[[JsonValue], str]) -> FormatResult:
        if not text.strip():
            return FormatResult()
        try:
            value = parse_json(text)
        except ParseError as exc:
            logger.info("JSON input rejected: %s", exc)
            return FormatResult.failure(str(exc))
        output = render(value)
        self._ledger.record(text)
        return FormatResult(output=output)
