"""Base model for official-server payloads.

Every payload model inherits from :class:`OfficialBaseModel` which
provides:

* ``alias_generator=to_pascal`` so the backend's PascalCase keys map
  automatically to snake_case fields.  The few camelCase or oddly
  capitalised keys (``XP``, ``gamepersistentdata``) carry explicit
  aliases.
* A ``raw`` dict that captures the original payload.  Verbatim copies
  into the local profile read from ``raw`` so values the models do not
  parse still survive the carryover.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal


def parse_iso_timestamp_ms(value: Any) -> int | None:
    """Convert an ISO-8601 timestamp to epoch milliseconds.

    Naive timestamps are treated as UTC.  Returns ``None`` when the
    value is missing or unparseable.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value))
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return int(parsed.timestamp() * 1000)


class OfficialBaseModel(BaseModel):
    """Base for official-server response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_pascal,
    )

    raw: dict[str, Any] = Field(default_factory=dict, alias="raw")
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        """Stash the raw payload unless the caller passed ``raw=`` explicitly."""
        if not isinstance(values, dict):
            return values
        if "raw" in values:
            return values
        merged = dict(values)
        merged["raw"] = dict(values)
        return merged
