"""
Procedural noise overlay: noise config → filter description.
Pipeline: fractal turbulence → grayscale → binary threshold mask → flood with the noise color
inside the mask. The threshold makes a stipple/grain, not smooth grayscale noise.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from ..random_utils import filter_token
from .color import Color, WHITE, coerce_number, to_css_string

logger = logging.getLogger(__name__)

NoiseType = Literal["subtle", "medium", "strong"]

DEFAULT_NOISE_TYPE: NoiseType = "subtle"
DEFAULT_INTENSITY = 0.3
BLEND_MODE = "overlay"
MASK_THRESHOLD = 0.5
MASK_VALUES: tuple[int, int] = (0, 1)

# Per type: (baseFrequency, numOctaves, opacity multiplier)
NOISE_PRESETS: dict[str, tuple[float, int, float]] = {
    "subtle": (0.8, 3, 0.6),
    "medium": (1.2, 4, 0.8),
    "strong": (1.8, 5, 0.1),
}


@dataclass(frozen=True)
class NoiseConfig:
    enabled: bool = False
    color: Color = WHITE
    intensity: float = DEFAULT_INTENSITY
    type: str = DEFAULT_NOISE_TYPE


@dataclass(frozen=True)
class FilterPrimitive:
    """One stage of the noise filter: an SVG filter primitive tag and its attributes."""
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple["FilterPrimitive", ...] = ()


@dataclass(frozen=True)
class NoiseSpec:
    base_frequency: float
    octaves: int
    overlay_opacity: float
    blend_mode: str
    mask_color: Color
    filter_id: str
    threshold: float = MASK_THRESHOLD
    mask_values: tuple[int, int] = MASK_VALUES

    @property
    def pipeline(self) -> tuple[FilterPrimitive, ...]:
        """The four filter stages, in order, as the host's filter primitives."""
        # discrete transfer: band i of n covers [i/n, (i+1)/n) and takes the mask of its start
        bands = len(self.mask_values)
        table = " ".join(str(threshold_mask(i / bands, self.threshold)) for i in range(bands))
        return (
            FilterPrimitive("feTurbulence", {
                "type": "fractalNoise",
                "baseFrequency": str(self.base_frequency),
                "numOctaves": str(self.octaves),
                "stitchTiles": "stitch",
                "result": "turbulence",
            }),
            FilterPrimitive("feColorMatrix", {
                "in": "turbulence",
                "type": "saturate",
                "values": "0",
                "result": "grayscale",
            }),
            FilterPrimitive(
                "feComponentTransfer",
                {"in": "grayscale", "result": "binaryMask"},
                (FilterPrimitive("feFuncA", {"type": "discrete", "tableValues": table}),),
            ),
            FilterPrimitive("feFlood", {
                "flood-color": f"rgb({self.mask_color.r}, {self.mask_color.g}, {self.mask_color.b})",
                "flood-opacity": "1",
                "result": "colorFill",
            }),
            FilterPrimitive("feComposite", {
                "in": "colorFill",
                "in2": "binaryMask",
                "operator": "in",
                "result": "finalNoise",
            }),
        )

    @property
    def color_css(self) -> str:
        return to_css_string(self.mask_color)


def resolve_noise_type(noise_type: str | None) -> str:
    if noise_type in NOISE_PRESETS:
        return noise_type
    if noise_type is not None:
        logger.debug("Unknown noise type %r — using %s", noise_type, DEFAULT_NOISE_TYPE)
    return DEFAULT_NOISE_TYPE


def threshold_mask(value: float, threshold: float = MASK_THRESHOLD) -> int:
    """Binary mask for one grayscale sample: 0 below the threshold, 1 at or above it."""
    low, high = MASK_VALUES
    return high if value >= threshold else low


def synthesize(config: NoiseConfig, *, filter_id: str | None = None) -> NoiseSpec | None:
    """
    Noise config → NoiseSpec, or None when noise is off.
    overlay_opacity = type multiplier * intensity; intensity is used as given (expected 0.1-1.0).
    """
    if not config.enabled:
        return None
    base_frequency, octaves, multiplier = NOISE_PRESETS[resolve_noise_type(config.type)]
    return NoiseSpec(
        base_frequency=base_frequency,
        octaves=octaves,
        overlay_opacity=multiplier * coerce_number(config.intensity, DEFAULT_INTENSITY, "noise intensity"),
        blend_mode=BLEND_MODE,
        mask_color=config.color,
        filter_id=filter_id or filter_token(),
    )
