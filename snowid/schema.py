from datetime import datetime, timedelta, timezone
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from snowid.core.constants import EPOCH, MAX_NODE_ID, MAX_SEQUENCE, MAX_TIMESTAMP

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_millis_to_datetime(timestamp: int) -> datetime:
    """Convert an epoch-relative millisecond count to an aware UTC datetime."""
    return UNIX_EPOCH + timedelta(milliseconds=timestamp + EPOCH)


class SnowflakeParts(BaseModel):
    """The three fields packed into a Snowflake ID.

    Args:
        timestamp (int): Milliseconds since the custom epoch.
        node_id (int): Identifier of the generating node.
        sequence (int): Per-millisecond counter.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(
        ...,
        ge=0,
        le=MAX_TIMESTAMP,
        description="Milliseconds elapsed since the custom epoch",
    )
    node_id: int = Field(
        ...,
        ge=0,
        le=MAX_NODE_ID,
        description="Caller-supplied node identifier",
    )
    sequence: int = Field(
        ...,
        ge=0,
        le=MAX_SEQUENCE,
        description="Disambiguator within one millisecond on one node",
    )

    @property
    def time(self) -> datetime:
        return epoch_millis_to_datetime(self.timestamp)


class DecodeResult(NamedTuple):
    id: int
    success: bool
