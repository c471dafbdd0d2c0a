"""
Color model: parse CSS-ish color text into normalized RGBA, blend, and print back.
Parsing is total: anything we can't read becomes a fixed neutral gray.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNC_RE = re.compile(r"^rgba?\((.*)\)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)")


@dataclass(frozen=True)
class Color:
    """RGBA color: r, g, b are 0-255 ints, a is a 0-1 float."""
    r: int
    g: int
    b: int
    a: float = 1.0

    def to_css_string(self) -> str:
        return to_css_string(self)

    def to_hex(self) -> str:
        return to_hex(self)


FALLBACK_GRAY = Color(128, 128, 128, 0.2)
WHITE = Color(255, 255, 255, 1.0)


def _channel(value: float) -> int:
    # half rounds up, not to even
    return max(0, min(255, int(math.floor(value + 0.5))))


def _alpha(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _parse_hex(digits: str) -> Color:
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return Color(r, g, b, a)


def _parse_functional(body: str) -> Color | None:
    groups = _NUMBER_RE.findall(body)
    if len(groups) < 3 or len(groups) > 4:
        return None
    values = [float(g) for g in groups]
    if not all(math.isfinite(v) for v in values):
        return None
    a = _alpha(values[3]) if len(values) == 4 else 1.0
    return Color(_channel(values[0]), _channel(values[1]), _channel(values[2]), a)


def parse(value, fallback: Color = FALLBACK_GRAY) -> Color:
    """
    Parse #RGB, #RRGGBB, #RRGGBBAA, rgb(...) or rgba(...) into a Color.
    Also accepts a Color (returned as-is) or an (r, g, b[, a]) tuple from the palette table.
    Never raises: unreadable input returns `fallback`.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        try:
            channels = [float(v) for v in value]
        except (TypeError, ValueError, OverflowError):
            channels = []
        if not channels or not all(math.isfinite(v) for v in channels):
            logger.debug("Unreadable color tuple %r — using fallback", value)
            return fallback
        a = _alpha(channels[3]) if len(channels) == 4 else 1.0
        return Color(_channel(channels[0]), _channel(channels[1]), _channel(channels[2]), a)
    if not isinstance(value, str):
        logger.debug("Unsupported color value %r — using fallback", value)
        return fallback

    text = value.strip()
    m = _HEX_RE.match(text)
    if m:
        return _parse_hex(m.group(1))
    m = _FUNC_RE.match(text)
    if m:
        color = _parse_functional(m.group(1))
        if color is not None:
            return color
    logger.debug("Unparseable color %r — using fallback", value)
    return fallback


def interpolate(a: Color, b: Color, ratio: float) -> Color:
    """Linear blend a→b. ratio is clamped to [0, 1]; RGB rounds to nearest, alpha stays float."""
    t = max(0.0, min(1.0, float(ratio)))
    return Color(
        _channel(a.r + (b.r - a.r) * t),
        _channel(a.g + (b.g - a.g) * t),
        _channel(a.b + (b.b - a.b) * t),
        a.a + (b.a - a.a) * t,
    )


def coerce_number(value, default: float, name: str = "number") -> float:
    """float(value), or `default` when that fails or isn't finite (nan/inf can't be printed)."""
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        number = math.nan
    if not math.isfinite(number):
        logger.debug("Unreadable %s %r — using %s", name, value, default)
        return default
    return number


def format_number(value: float) -> str:
    """Print a number for CSS: no trailing '.0', at most 4 decimals."""
    rounded = round(float(value), 4)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.4f}".rstrip("0").rstrip(".")


def to_css_string(color: Color) -> str:
    return f"rgba({color.r}, {color.g}, {color.b}, {format_number(color.a)})"


def to_hex(color: Color) -> str:
    """#rrggbb when opaque, #rrggbbaa otherwise."""
    out = f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    if color.a < 1.0:
        out += f"{_channel(color.a * 255):02x}"
    return out
