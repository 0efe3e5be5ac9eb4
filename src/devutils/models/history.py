"""History ledger entry model.

The persisted blob is a JSON array of ``{"id", "input", "timestamp"}``
objects, so the fields serialize under those aliases.
"""

from pydantic import Field

from devutils.models.common import DevUtilsBase


class HistoryEntry(DevUtilsBase, frozen=True):
    """One accepted input remembered by a history ledger."""

    entry_id: str = Field(alias="id", min_length=1)
    input_text: str = Field(alias="input")
    timestamp: str = Field(description="Local creation time, YYYY-MM-DD HH:mm:ss.")


class RestoreResponse(DevUtilsBase, frozen=True):
    """Stored input text handed back to a tool's input field."""

    input_text: str = Field(alias="input")
