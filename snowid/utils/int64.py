INT64_MASK = (1 << 64) - 1
INT64_SIGN = 1 << 63


def to_signed64(value: int) -> int:
    """Wrap an arbitrary int into the signed 64-bit range, two's complement."""
    value &= INT64_MASK
    return value - (1 << 64) if value & INT64_SIGN else value
