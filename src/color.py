"""
Hex color code conversion.
"""

import string

EMPTY_DAY_COLOR = "#ebedf0"


class MalformedColorError(ValueError):
    """Raised when a color is not a 6-digit hex code."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed hex color: {value!r}")


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """
    Convert a hex color code to an RGB triple.

    Args:
        value: Color code such as "#9be9a8" or "216e39" (case-insensitive)

    Returns:
        Tuple of (red, green, blue), each 0-255

    Raises:
        MalformedColorError: If fewer than 6 hex digits follow the optional "#"
    """
    hex_digits = value[1:] if value.startswith("#") else value

    if len(hex_digits) < 6:
        raise MalformedColorError(hex_digits)

    channels = []
    for start in (0, 2, 4):
        pair = hex_digits[start:start + 2]
        if not all(ch in string.hexdigits for ch in pair):
            raise MalformedColorError(pair)
        channels.append(int(pair, 16))

    return channels[0], channels[1], channels[2]


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    """Format an RGB triple as a lowercase "#rrggbb" code."""
    red, green, blue = rgb
    return f"#{red:02x}{green:02x}{blue:02x}"
