"""
Gentle looping motion per gradient type, as declarative keyframes. Our descriptions only;
the host schedules frames.
- linear: background position slides 0% 50% ↔ 100% 50%
- radial: size/scale pulse 100%/1 ↔ 120%/1.02
- conic: stop offsets breathe 0 → 5 → 10 → 5 → 0 degrees (not a full rotation)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .color import coerce_number, format_number
from .composer import DEFAULT_ANGLE, DEFAULT_TOPOLOGY, GradientSpec, coerce_angle, resolve_palette
from .data.palettes import DEFAULT_PALETTE
from .stops import conic_stops

DEFAULT_DURATION = 8.0
TIMING = "ease-in-out"
ITERATION = "infinite"

# (keyframe percent, conic offset in degrees)
CONIC_PHASES: tuple[tuple[float, float], ...] = (
    (0.0, 0.0),
    (25.0, 5.0),
    (50.0, 10.0),
    (75.0, 5.0),
    (100.0, 0.0),
)


@dataclass(frozen=True)
class AnimationConfig:
    enabled: bool = False
    duration_seconds: float = DEFAULT_DURATION


@dataclass(frozen=True)
class Keyframe:
    """Properties at one or more percents of the cycle. Conic frames carry a gradient instead."""
    offsets: tuple[float, ...]
    properties: dict[str, str] = field(default_factory=dict)
    gradient: GradientSpec | None = None

    @property
    def selector(self) -> str:
        return ", ".join(f"{format_number(o)}%" for o in self.offsets)


@dataclass(frozen=True)
class AnimationSpec:
    name: str = ""
    duration_seconds: float = DEFAULT_DURATION
    timing: str = TIMING
    iteration: str = ITERATION
    keyframes: tuple[Keyframe, ...] = ()
    base_properties: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.keyframes

    @property
    def shorthand(self) -> str:
        """CSS `animation` value, e.g. 'gradientSlide 8s ease-in-out infinite'."""
        if self.is_empty:
            return ""
        return f"{self.name} {format_number(self.duration_seconds)}s {self.timing} {self.iteration}"


EMPTY_ANIMATION = AnimationSpec()


def _linear(duration: float) -> AnimationSpec:
    return AnimationSpec(
        name="gradientSlide",
        duration_seconds=duration,
        keyframes=(
            Keyframe((0.0, 100.0), {"background-position": "0% 50%"}),
            Keyframe((50.0,), {"background-position": "100% 50%"}),
        ),
        base_properties={"background-size": "200% 200%"},
    )


def _radial(duration: float) -> AnimationSpec:
    return AnimationSpec(
        name="radialPulse",
        duration_seconds=duration,
        keyframes=(
            Keyframe((0.0, 100.0), {"background-size": "100% 100%", "transform": "scale(1)"}),
            Keyframe((50.0,), {"background-size": "120% 120%", "transform": "scale(1.02)"}),
        ),
    )


def _conic(duration: float, palette, angle: float, extra_palettes) -> AnimationSpec:
    colors = resolve_palette(palette, extra_palettes)
    frames = tuple(
        Keyframe(
            (percent,),
            gradient=GradientSpec("conic", coerce_angle(angle), tuple(conic_stops(colors, offset))),
        )
        for percent, offset in CONIC_PHASES
    )
    return AnimationSpec(name="conicRotate", duration_seconds=duration, keyframes=frames)


def describe(
    topology: str | None = DEFAULT_TOPOLOGY,
    duration_seconds: float = DEFAULT_DURATION,
    palette=DEFAULT_PALETTE,
    angle: float = DEFAULT_ANGLE,
    *,
    enabled: bool = True,
    extra_palettes: Mapping[str, Sequence] | None = None,
) -> AnimationSpec | None:
    """
    Keyframes for the given gradient type, or None when animation is off.
    Types other than linear/radial/conic get EMPTY_ANIMATION (no motion).
    """
    if not enabled:
        return None
    duration_seconds = coerce_number(duration_seconds, DEFAULT_DURATION, "animation duration")
    kind = DEFAULT_TOPOLOGY if topology is None else topology
    if kind == "linear":
        return _linear(duration_seconds)
    if kind == "radial":
        return _radial(duration_seconds)
    if kind == "conic":
        return _conic(duration_seconds, palette, angle, extra_palettes)
    return EMPTY_ANIMATION


def describe_config(
    topology: str | None,
    config: AnimationConfig,
    palette=DEFAULT_PALETTE,
    angle: float = DEFAULT_ANGLE,
    *,
    extra_palettes: Mapping[str, Sequence] | None = None,
) -> AnimationSpec | None:
    return describe(
        topology,
        config.duration_seconds,
        palette,
        angle,
        enabled=config.enabled,
        extra_palettes=extra_palettes,
    )
