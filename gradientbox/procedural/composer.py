"""
Gradient composer: topology + palette + contrast + angle → GradientSpec.
Entry point of the engine; pulls colors from the palette table and delegates stop placement.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Mapping, Sequence, Union

from .color import Color, coerce_number, parse
from .data.palettes import DEFAULT_PALETTE, FALLBACK_COLORS, lookup
from .stops import AngularStop, ColorStop, DEFAULT_CONTRAST, conic_stops, distribute

logger = logging.getLogger(__name__)

Topology = Literal["linear", "radial", "conic"]

TOPOLOGIES: tuple[str, ...] = ("linear", "radial", "conic")
DEFAULT_TOPOLOGY: Topology = "linear"
DEFAULT_ANGLE = 45.0


@dataclass(frozen=True)
class PaletteKey:
    """Named palette, resolved through the palette table."""
    name: str


@dataclass(frozen=True)
class PaletteColors:
    """Literal palette: colors as text, tuples or Color values."""
    colors: tuple


PaletteRef = Union[PaletteKey, PaletteColors]


@dataclass(frozen=True)
class GradientSpec:
    """
    Computed gradient. `angle` is the direction for linear and the start angle for conic;
    `center` (x%, y%) only matters for radial, None meaning the shape center.
    """
    topology: str
    angle: float
    stops: tuple[ColorStop, ...] | tuple[AngularStop, ...]
    center: tuple[float, float] | None = None

    @property
    def colors(self) -> list[Color]:
        return [s.color for s in self.stops]


def palette_ref(value) -> PaletteRef | None:
    """Coerce a config value (key string or color list) into a PaletteRef."""
    if isinstance(value, (PaletteKey, PaletteColors)):
        return value
    if isinstance(value, str):
        return PaletteKey(value)
    if isinstance(value, (list, tuple)):
        return PaletteColors(tuple(value))
    return None


def fallback_colors() -> list[Color]:
    return [parse(c) for c in FALLBACK_COLORS]


def resolve_palette(
    palette,
    extra_palettes: Mapping[str, Sequence] | None = None,
) -> list[Color]:
    """Palette reference → colors. Unknown keys, empty lists and anything else → fallback gray pair."""
    ref = palette_ref(palette)
    if isinstance(ref, PaletteKey):
        colors = lookup(ref.name, extra_palettes)
        if colors:
            return colors
        logger.warning("Unknown palette %r — using fallback gray gradient", ref.name)
        return fallback_colors()
    if isinstance(ref, PaletteColors) and ref.colors:
        return [parse(c) for c in ref.colors]
    logger.debug("Unusable palette %r — using fallback gray gradient", palette)
    return fallback_colors()


def resolve_topology(topology: str | None) -> str:
    if topology in TOPOLOGIES:
        return topology
    if topology is not None:
        logger.debug("Unknown gradient type %r — using %s", topology, DEFAULT_TOPOLOGY)
    return DEFAULT_TOPOLOGY


def coerce_angle(angle) -> float:
    return coerce_number(angle, DEFAULT_ANGLE, "angle")


def compose(
    topology: str | None = DEFAULT_TOPOLOGY,
    palette=DEFAULT_PALETTE,
    contrast: str | None = DEFAULT_CONTRAST,
    angle: float = DEFAULT_ANGLE,
    *,
    center: tuple[float, float] | None = None,
    extra_palettes: Mapping[str, Sequence] | None = None,
) -> GradientSpec:
    """
    Build the gradient for one box.
    - linear: contrast-distributed stops along `angle`.
    - radial: contrast-distributed stops from `center` outward.
    - conic: equal angular stops (offset 0), starting at `angle`.
    """
    kind = resolve_topology(topology)
    colors = resolve_palette(palette, extra_palettes)
    if kind == "conic":
        stops = conic_stops(colors, 0.0)
    else:
        stops = distribute(colors, contrast)
    return GradientSpec(
        topology=kind,
        angle=coerce_angle(angle),
        stops=tuple(stops),
        center=center if kind == "radial" else None,
    )
