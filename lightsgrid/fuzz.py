"""Summing of raw input bytes, as exercised by fuzz runs."""

_SCALE = 1000


def sum_values(data: bytes) -> int:
    """Return the sum of every byte in ``data`` scaled by 1000."""
    return sum(byte * _SCALE for byte in data)


def describe_input(data: bytes) -> str:
    """Return the one-line report printed for a fuzz input."""
    return f"Value sum: {sum_values(data)}, len{len(data)}"