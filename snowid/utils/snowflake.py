"""
Snowflake ID Generator Module

Generates compact, time-ordered, unique 64-bit identifiers. Several independent
nodes can mint IDs at the same time without talking to each other: the only
coordination is the node id each caller supplies.

Algorithm Overview:
    Every ID packs three fields, most significant first:

    |         42 bits         |  10 bits |  12 bits  |
    |        timestamp        | node_id  | sequence  |
    | ms since EPOCH          | 0-1023   |  0-4095   |

    - Timestamp: milliseconds since EPOCH (1288834974657 ms after the Unix epoch)
    - Node ID: supplied by the caller on every call, 1024 possible nodes
    - Sequence: 4096 IDs per millisecond per generator

    IDs are signed 64-bit integers. Once the timestamp field reaches 2**41
    (around the year 2080) the top bit is set and IDs become negative, exactly
    as a fixed-width signed integer would.

Thread Safety:
    - One threading.Lock per generator guards (last_timestamp, sequence)
    - Every emission is serialized, so IDs from one generator are strictly
      increasing in the order calls return

Clock Considerations:
    - Same millisecond: the sequence is incremented
    - Sequence exhausted: the generator spins, yielding between samples, until
      the clock moves past the last timestamp. There is no timeout; callers
      needing bounded latency must apply their own deadline around the call.
    - Clock moved backwards: the last timestamp is kept as a logical clock and
      the sequence keeps counting, so no (timestamp, sequence) pair is reused
"""

import threading
import time
from datetime import datetime
from typing import Callable, Optional

from snowid.core.config import settings
from snowid.core.constants import (
    EPOCH,
    MAX_NODE_ID,
    MAX_SEQUENCE,
    MAX_TIMESTAMP,
    NODE_ID_BITS,
    NODE_ID_SHIFT,
    SEQUENCE_BITS,
    TIMESTAMP_BITS,
    TIMESTAMP_SHIFT,
)
from snowid.core.exceptions import NodeIDOutOfRangeError
from snowid.schema import SnowflakeParts, epoch_millis_to_datetime
from snowid.services.logger import setup_logger
from snowid.utils.int64 import to_signed64

__all__ = [
    "EPOCH",
    "TIMESTAMP_BITS",
    "NODE_ID_BITS",
    "SEQUENCE_BITS",
    "MAX_TIMESTAMP",
    "MAX_NODE_ID",
    "MAX_SEQUENCE",
    "NODE_ID_SHIFT",
    "TIMESTAMP_SHIFT",
    "SnowflakeIDGenerator",
    "compose",
    "decompose",
    "generate",
    "generation_time",
]

logger = setup_logger()


def _system_clock() -> int:
    return time.time_ns() // 1_000_000


def _check_node_id(node_id: int) -> None:
    if not isinstance(node_id, int) or not 0 <= node_id <= MAX_NODE_ID:
        logger.critical("Refusing to generate ID for node %r", node_id)
        raise NodeIDOutOfRangeError(node_id, MAX_NODE_ID)


def compose(timestamp: int, node_id: int, sequence: int) -> int:
    """Pack the three fields into an ID.

    Args:
        timestamp: Milliseconds since EPOCH (0 to 2**42 - 1).
        node_id: Node identifier (0-1023).
        sequence: Per-millisecond counter (0-4095).

    Returns:
        The packed ID as a signed 64-bit integer.

    Raises:
        NodeIDOutOfRangeError: If node_id is outside 0-1023.
        ValueError: If timestamp or sequence do not fit their bit widths.
    """
    _check_node_id(node_id)
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise ValueError(f"Timestamp must be between 0 and {MAX_TIMESTAMP}")
    if not 0 <= sequence <= MAX_SEQUENCE:
        raise ValueError(f"Sequence must be between 0 and {MAX_SEQUENCE}")

    return to_signed64(
        (timestamp << TIMESTAMP_SHIFT) | (node_id << NODE_ID_SHIFT) | sequence
    )


def decompose(snowflake_id: int) -> SnowflakeParts:
    """Split an ID back into its timestamp, node id and sequence fields."""
    return SnowflakeParts(
        timestamp=(snowflake_id >> TIMESTAMP_SHIFT) & MAX_TIMESTAMP,
        node_id=(snowflake_id >> NODE_ID_SHIFT) & MAX_NODE_ID,
        sequence=snowflake_id & MAX_SEQUENCE,
    )


def generation_time(snowflake_id: int) -> datetime:
    """Return the UTC time an ID was generated, with millisecond precision."""
    return epoch_millis_to_datetime((snowflake_id >> TIMESTAMP_SHIFT) & MAX_TIMESTAMP)


class SnowflakeIDGenerator:
    """A thread-safe Snowflake ID generator.

    Each instance owns its own (last_timestamp, sequence) state, so several
    generators can live in one process without interfering with each other.

    Attributes:
        clock: Callable returning the current Unix time in milliseconds.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """Initializes a generator with state (0, 0).

        Args:
            clock: Optional millisecond clock, defaults to the system clock.
        """
        self.clock = clock or _system_clock
        self._last_timestamp = 0
        self._sequence = 0
        self._lock = threading.Lock()

    @property
    def last_timestamp(self) -> int:
        return self._last_timestamp

    @property
    def sequence(self) -> int:
        return self._sequence

    def _current_timestamp(self) -> int:
        """Returns milliseconds elapsed since EPOCH."""
        return self.clock() - EPOCH

    def _wait_for_next_millis(self, last_timestamp: int) -> int:
        """Spins until the clock moves strictly past last_timestamp.

        Args:
            last_timestamp: The timestamp of the last generated ID.

        Returns:
            The first timestamp greater than last_timestamp.
        """
        timestamp = self._current_timestamp()
        while timestamp <= last_timestamp:
            time.sleep(0)
            timestamp = self._current_timestamp()
        return timestamp

    def generate_id(self, node_id: int) -> int:
        """Generates a new unique Snowflake ID for the given node.

        Args:
            node_id: Identifier of the calling node (0-1023).

        Returns:
            A 64-bit Snowflake ID.

        Raises:
            NodeIDOutOfRangeError: If node_id is outside 0-1023. This is a
                caller bug and is never handled inside the library.
        """
        _check_node_id(node_id)

        with self._lock:
            timestamp = self._current_timestamp()

            if timestamp < self._last_timestamp:
                logger.warning(
                    "Clock moved backwards by %d ms, holding timestamp at %d",
                    self._last_timestamp - timestamp,
                    self._last_timestamp,
                )
                timestamp = self._last_timestamp

            if timestamp == self._last_timestamp:
                self._sequence = (self._sequence + 1) & MAX_SEQUENCE
                if self._sequence == 0:
                    logger.debug("Sequence exhausted at %d, waiting for next ms", timestamp)
                    timestamp = self._wait_for_next_millis(self._last_timestamp)
            else:
                self._sequence = 0

            self._last_timestamp = timestamp

            return to_signed64(
                (timestamp << TIMESTAMP_SHIFT)
                | (node_id << NODE_ID_SHIFT)
                | self._sequence
            )


_default_generator = SnowflakeIDGenerator()


def generate(node_id: Optional[int] = None) -> int:
    """Generate an ID with the module-level generator.

    node_id defaults to settings.NODE_ID.
    """
    if node_id is None:
        node_id = settings.NODE_ID
    return _default_generator.generate_id(node_id)
