"""Bit layout of a Snowflake ID.

    |       42 bits        |  10 bits |  12 bits  |
    |      timestamp       | node_id  | sequence  |
    | ms since EPOCH       |  0-1023  |  0-4095   |
"""

# Milliseconds since the Unix epoch (2010-11-04T01:42:54.657Z). Not configurable.
EPOCH = 1288834974657

TIMESTAMP_BITS = 42
NODE_ID_BITS = 10
SEQUENCE_BITS = 12

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_NODE_ID = (1 << NODE_ID_BITS) - 1
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1

NODE_ID_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = NODE_ID_BITS + SEQUENCE_BITS
