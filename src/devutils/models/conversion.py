"""Boundary results returned by the JSON formatter and the time converter.

Every result carries either output or an error message, never both: a
failed conversion leaves all output fields at their empty defaults.
"""

from __future__ import annotations

from pydantic import Field

from devutils.models.common import DevUtilsBase


class FormatResult(DevUtilsBase, frozen=True):
    """Outcome of a prettify/minify request."""

    output: str = ""
    error: str | None = None

    @classmethod
    def failure(cls, message: str) -> FormatResult:
        return cls(error=message)


class TimeResult(DevUtilsBase, frozen=True):
    """Canonical renderings of one instant."""

    local_format: str = ""
    unix_seconds: str = ""
    unix_milliseconds: str = ""
    rfc3339_format: str = ""
    error: str | None = None

    @classmethod
    def failure(cls, message: str) -> TimeResult:
        return cls(error=message)


class TimePresets(DevUtilsBase, frozen=True):
    """Ready-made inputs describing the current moment."""

    current_datetime: str
    unix_seconds: str
    unix_milliseconds: str


class ConversionInput(DevUtilsBase, frozen=True):
    """Raw text as entered; the tools trim it before processing."""

    input_text: str = Field(alias="input")
