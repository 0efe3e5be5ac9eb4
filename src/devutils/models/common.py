"""Shared types and base model used across devutils domain models."""

from typing import Any

from pydantic import BaseModel
from uuid_extensions import uuid7

# Decoded JSON document: dict | list | str | int | float | bool | None.
JsonValue = Any


def new_entry_id() -> str:
    """Generate a new time-sortable UUID v7 as a string."""
    return str(uuid7())


class DevUtilsBase(BaseModel):
    """Base model with common configuration for all devutils Pydantic models."""

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
    }
