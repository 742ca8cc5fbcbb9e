class SnowflakeError(Exception):
    """Base class for all snowid errors."""

    pass


class NodeIDOutOfRangeError(SnowflakeError, ValueError):
    """Raised when a node id falls outside 0-1023.

    This is a programming error on the caller's side. The library never
    catches it.
    """

    def __init__(self, node_id, max_node_id: int):
        self.node_id = node_id
        super().__init__(f"Node ID must be between 0 and {max_node_id}, got {node_id!r}")


class InvalidEncodingError(SnowflakeError, ValueError):
    """Raised when a string is not a valid 13-symbol encoded ID."""

    pass
