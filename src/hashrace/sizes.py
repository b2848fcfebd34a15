"""Human-readable byte sizes ("10MB" <-> 10485760).

Units are binary multiples of 1024 written with the short decimal names,
so ``"1KB"`` is 1024 bytes.
"""

from __future__ import annotations

import re

from hashrace.errors import ConfigError

_UNITS: dict[str, int] = {
    "b": 1,
    "kb": 1 << 10,
    "mb": 1 << 20,
    "gb": 1 << 30,
    "tb": 1 << 40,
    "pb": 1 << 50,
}

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(b|kb|mb|gb|tb|pb)?\s*$", re.IGNORECASE)


def parse_size(value: str | int) -> int:
    """Parse a size such as ``"10MB"``, ``"1.5 kb"`` or ``"4096"`` into bytes.

    Fractional results are truncated to whole bytes.

    Raises:
        ConfigError: The value is negative or not a recognised size.
    """
    if isinstance(value, bool):
        raise ConfigError(f"invalid size: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConfigError(f"size must not be negative: {value}")
        return value

    match = _SIZE_RE.match(value)
    if match is None:
        raise ConfigError(f"invalid size: {value!r} (expected e.g. 10MB, 512KB, 4096)")
    number, unit = match.groups()
    return int(float(number) * _UNITS[(unit or "b").lower()])


def format_size(num_bytes: float) -> str:
    """Format a byte count with the largest fitting unit, e.g. ``"1.5MB"``."""
    magnitude = abs(num_bytes)
    unit = "b"
    for name in ("pb", "tb", "gb", "mb", "kb"):
        if magnitude >= _UNITS[name]:
            unit = name
            break
    text = f"{num_bytes / _UNITS[unit]:.2f}".rstrip("0").rstrip(".")
    return f"{text}{unit.upper()}"
