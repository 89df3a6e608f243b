"""
Color value parsing.

Turns loosely formatted CSS color text into a normalized sRGB record.
Recognized forms:
    transparent
    #rgb, #rgba, #rrggbb, #rrggbbaa
    rgb(r, g, b), rgba(r, g, b, a)

Anything else (var(...), currentColor, named colors, hsl(), calc()) is not a
color as far as the converter is concerned and yields None.
"""

import math
import re
from enum import Enum
from typing import NamedTuple, Optional, Tuple

HEX_PATTERN = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"
FUNCTIONAL_PATTERN = re.compile(
    rf"^rgba?\(\s*{_NUMBER}\s*,\s*{_NUMBER}\s*,\s*{_NUMBER}\s*(?:,\s*{_NUMBER}\s*)?\)$",
    re.IGNORECASE,
)

TRANSPARENT_KEYWORD = "transparent"


class ColorSyntax(Enum):
    """Closed set of outcomes when classifying a color value."""

    TRANSPARENT = "transparent"
    HEX = "hex"
    FUNCTIONAL = "functional"
    UNRECOGNIZED = "unrecognized"


class NormalizedColor(NamedTuple):
    """sRGB color with components and alpha in [0, 1].

    `hex` always encodes the same r, g, b as 8-bit channels and never carries alpha.
    """

    r: float
    g: float
    b: float
    a: float
    hex: str


TRANSPARENT = NormalizedColor(0, 0, 0, 0, "#000000")


def clamp01(x: float) -> float:
    """Clamp to [0, 1]."""
    return min(1.0, max(0.0, x))


def round_half_up(x: float) -> int:
    """Round .5 away from zero for non-negative input (127.5 -> 128, 0.5 -> 1)."""
    return int(math.floor(x + 0.5))


def channel_to_hex(value: float) -> str:
    """
    Encode a 0-255 channel as two uppercase hex digits.
    Out-of-range values are clamped so the hex agrees with the clamped components.
    """
    byte = min(255, max(0, round_half_up(value)))
    return f"{byte:02X}"


def classify_color(text: Optional[str]) -> Tuple[ColorSyntax, Optional[re.Match]]:
    """
    Decide which syntax a raw color value uses.

    Checks run in a fixed order: transparent keyword, hex, rgb()/rgba().
    Returns the syntax tag and the regex match for the hex/functional branches.
    """
    value = (text or "").strip()

    if value == TRANSPARENT_KEYWORD:
        return ColorSyntax.TRANSPARENT, None

    if match := HEX_PATTERN.match(value):
        return ColorSyntax.HEX, match

    if match := FUNCTIONAL_PATTERN.match(value):
        return ColorSyntax.FUNCTIONAL, match

    return ColorSyntax.UNRECOGNIZED, None


def _from_hex(digits: str) -> NormalizedColor:
    h = digits.lower()
    if len(h) in (3, 4):
        h = "".join(ch * 2 for ch in h)

    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    a = int(h[6:8], 16) / 255 if len(h) == 8 else 1

    return NormalizedColor(r / 255, g / 255, b / 255, clamp01(a), f"#{h[:6].upper()}")


def _from_functional(match: re.Match) -> NormalizedColor:
    r, g, b = (float(match.group(i)) for i in (1, 2, 3))
    alpha = match.group(4)
    a = 1 if alpha is None else float(alpha)

    return NormalizedColor(
        clamp01(r / 255),
        clamp01(g / 255),
        clamp01(b / 255),
        clamp01(a),
        f"#{channel_to_hex(r)}{channel_to_hex(g)}{channel_to_hex(b)}",
    )


def parse_color(text: Optional[str]) -> Optional[NormalizedColor]:
    """
    Parse a raw color value.

    Returns a NormalizedColor, or None when the value is not a supported color.
    E.g. "#abc" -> (0.667, 0.733, 0.8, 1, "#AABBCC"), "var(--x)" -> None
    """
    syntax, match = classify_color(text)

    if syntax is ColorSyntax.TRANSPARENT:
        return TRANSPARENT
    if syntax is ColorSyntax.HEX:
        return _from_hex(match.group(1))
    if syntax is ColorSyntax.FUNCTIONAL:
        return _from_functional(match)
    return None
