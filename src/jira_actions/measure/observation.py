"""Observation record emitted once per successful action execution."""

from datetime import datetime, timezone
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Scalar = Optional[Union[bool, int, float, str]]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Observation(BaseModel):
    """Immutable timing and metadata record keyed by an action-kind tag.

    Attributes:
        key: Action-kind tag (e.g. "View Issue")
        fields: Measurement fields, string keys to scalar values
        recorded_at: When the observation was built (UTC)
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    fields: dict[str, Scalar] = Field(default_factory=dict)
    recorded_at: datetime = Field(default_factory=_utcnow)

    def to_dict(self) -> dict[str, Any]:
        """Convert the observation to a JSON-friendly dictionary."""
        return {
            "key": self.key,
            "recordedAt": self.recorded_at.isoformat(),
            "observation": dict(self.fields),
        }
