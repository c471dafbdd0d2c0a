"""
Stop distribution: palette + contrast profile → gradient stops.
Linear/radial stops are placed in percent along the axis; conic stops in degrees around the circle.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from .color import Color, interpolate

logger = logging.getLogger(__name__)

Contrast = Literal["ambient", "highlight", "bigContrast"]

CONTRASTS: tuple[str, ...] = ("ambient", "highlight", "bigContrast")
DEFAULT_CONTRAST: Contrast = "ambient"

# highlight: first color holds until here, the rest share the window up to 100%
HIGHLIGHT_HOLD = 60.0
HIGHLIGHT_BLEND_POSITION = 80.0
HIGHLIGHT_BLEND_RATIO = 0.3
# bigContrast: colors pack into [0, EDGE] and [100 - EDGE, 100]
BIG_CONTRAST_EDGE = 10.0


@dataclass(frozen=True)
class ColorStop:
    """Stop for linear/radial gradients: position in percent (0-100)."""
    color: Color
    position: float


@dataclass(frozen=True)
class AngularStop:
    """Stop for conic gradients: angle in degrees. None only for degenerate palettes."""
    color: Color
    angle: float | None


def resolve_contrast(contrast: str | None) -> str:
    if contrast in CONTRASTS:
        return contrast
    if contrast is not None:
        logger.debug("Unknown contrast %r — using %s", contrast, DEFAULT_CONTRAST)
    return DEFAULT_CONTRAST


def _spread(start: float, span: float, count: int) -> list[float]:
    """`count` evenly spaced positions across [start, start + span]. One element sits at start."""
    if count <= 0:
        return []
    if count == 1:
        return [start]
    step = span / (count - 1)
    return [start + step * i for i in range(count)]


def _ambient(colors: Sequence[Color]) -> list[ColorStop]:
    positions = _spread(0.0, 100.0, len(colors))
    return [ColorStop(c, p) for c, p in zip(colors, positions)]


def _highlight(colors: Sequence[Color]) -> list[ColorStop]:
    first = colors[0]
    if len(colors) == 2:
        mid = interpolate(first, colors[1], HIGHLIGHT_BLEND_RATIO)
        return [
            ColorStop(first, 0.0),
            ColorStop(first, HIGHLIGHT_HOLD),
            ColorStop(mid, HIGHLIGHT_BLEND_POSITION),
            ColorStop(colors[1], 100.0),
        ]
    remaining = colors[1:]
    stops = [ColorStop(first, 0.0), ColorStop(first, HIGHLIGHT_HOLD)]
    positions = _spread(HIGHLIGHT_HOLD, 100.0 - HIGHLIGHT_HOLD, len(remaining))
    stops.extend(ColorStop(c, p) for c, p in zip(remaining, positions))
    return stops


def _big_contrast(colors: Sequence[Color]) -> list[ColorStop]:
    n = len(colors)
    if n == 2:
        return [
            ColorStop(colors[0], BIG_CONTRAST_EDGE),
            ColorStop(colors[1], 100.0 - BIG_CONTRAST_EDGE),
        ]
    half = (n + 1) // 2  # ceil(n / 2)
    low = _spread(0.0, BIG_CONTRAST_EDGE, half)
    high = _spread(100.0 - BIG_CONTRAST_EDGE, BIG_CONTRAST_EDGE, n - half)
    return [ColorStop(c, p) for c, p in zip(colors, low + high)]


_DISTRIBUTORS = {
    "ambient": _ambient,
    "highlight": _highlight,
    "bigContrast": _big_contrast,
}


def distribute(colors: Sequence[Color], contrast: str | None = DEFAULT_CONTRAST) -> list[ColorStop]:
    """
    Place colors along 0-100% according to the contrast profile.
    - ambient: even spread.
    - highlight: first color holds 0-60%, the rest compress into 60-100%
      (two colors get an extra blended stop at 80%).
    - bigContrast: first half packs into 0-10%, second half into 90-100%.
    A single color renders as a uniform fill; unknown profiles behave like ambient.
    """
    colors = list(colors)
    if not colors:
        return []
    if len(colors) == 1:
        return [ColorStop(colors[0], 0.0), ColorStop(colors[0], 100.0)]
    return _DISTRIBUTORS[resolve_contrast(contrast)](colors)


def conic_stops(colors: Sequence[Color], offset: float = 0.0) -> list[AngularStop]:
    """
    Equal angular segments starting at `offset`, closed by the first color at 360 + offset
    so the wrap is seamless. Fewer than two colors come back verbatim (no angles).
    """
    colors = list(colors)
    if len(colors) < 2:
        return [AngularStop(c, None) for c in colors]
    segment = 360.0 / len(colors)
    stops = [AngularStop(c, segment * i + offset) for i, c in enumerate(colors)]
    stops.append(AngularStop(colors[0], 360.0 + offset))
    return stops
