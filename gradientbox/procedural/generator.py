"""
Gradient box generator: box settings → gradient + optional noise overlay + optional animation.
Defaults come from the `gradient` config section; every call is a pure function of its settings.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any

from .animation import DEFAULT_DURATION, AnimationSpec, describe
from .color import WHITE, Color, coerce_number, parse, to_css_string
from .composer import DEFAULT_ANGLE, DEFAULT_TOPOLOGY, GradientSpec, compose
from .data.palettes import DEFAULT_PALETTE
from .noise import DEFAULT_INTENSITY, DEFAULT_NOISE_TYPE, NoiseConfig, NoiseSpec, synthesize
from .renderer import box_style, gradient_css, keyframes_css, noise_filter_svg, noise_overlay_style
from .stops import AngularStop, DEFAULT_CONTRAST

logger = logging.getLogger(__name__)

# camelCase prop names → field names
_ALIASES = {
    "topology": "type",
    "animationDuration": "animation_duration",
    "noiseColor": "noise_color",
    "noiseIntensity": "noise_intensity",
    "noiseType": "noise_type",
    "filterId": "filter_id",
}


_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0", ""})


def _as_float(value: Any, default: float, name: str) -> float:
    return coerce_number(value, default, name)


def _as_bool(value: Any, default: bool, name: str) -> bool:
    """Flags from props, YAML or the CLI: bools, numbers, or words like "false" / "off"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    logger.debug("Unreadable %s %r — using %s", name, value, default)
    return default


@dataclass(frozen=True)
class BoxConfig:
    """Everything one gradient box can be configured with."""
    palette: Any = DEFAULT_PALETTE
    type: str = DEFAULT_TOPOLOGY
    contrast: str = DEFAULT_CONTRAST
    angle: float = DEFAULT_ANGLE
    animated: bool = False
    animation_duration: float = DEFAULT_DURATION
    noise: bool = False
    noise_color: Color = WHITE
    noise_intensity: float = DEFAULT_INTENSITY
    noise_type: str = DEFAULT_NOISE_TYPE
    filter_id: str | None = None
    center: tuple[float, float] | None = None

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None, base: "BoxConfig | None" = None) -> "BoxConfig":
        """
        Build from config/prop keys (snake_case or the camelCase prop names).
        Unknown keys are ignored; unreadable values fall back to `base` (or the defaults).
        """
        base = base or cls()
        known = {f.name for f in fields(cls)}
        values = {f.name: getattr(base, f.name) for f in fields(cls)}
        for key, value in (data or {}).items():
            name = _ALIASES.get(key, key)
            if name in known:
                values[name] = value
        return cls(
            palette=values["palette"],
            type=values["type"],
            contrast=values["contrast"],
            angle=_as_float(values["angle"], base.angle, "angle"),
            animated=_as_bool(values["animated"], base.animated, "animated flag"),
            animation_duration=_as_float(values["animation_duration"], base.animation_duration, "animation duration"),
            noise=_as_bool(values["noise"], base.noise, "noise flag"),
            # unreadable noise color → white, not the gray fallback
            noise_color=parse(values["noise_color"], fallback=WHITE),
            noise_intensity=_as_float(values["noise_intensity"], base.noise_intensity, "noise intensity"),
            noise_type=values["noise_type"],
            filter_id=values["filter_id"],
            center=values["center"],
        )

    @property
    def noise_config(self) -> NoiseConfig:
        return NoiseConfig(
            enabled=self.noise,
            color=self.noise_color,
            intensity=self.noise_intensity,
            type=self.noise_type,
        )


@dataclass(frozen=True)
class GradientBox:
    """Combined output for one box: what the host paints, overlays and animates."""
    gradient: GradientSpec
    noise: NoiseSpec | None = None
    animation: AnimationSpec | None = None
    settings: BoxConfig = field(default_factory=BoxConfig)

    @property
    def background(self) -> str:
        return gradient_css(self.gradient)

    def style(self) -> dict:
        return box_style(self.gradient, self.animation)

    def overlay_style(self) -> dict[str, str]:
        return noise_overlay_style(self.noise) if self.noise is not None else {}

    def filter_svg(self) -> str:
        return noise_filter_svg(self.noise)

    def keyframes(self) -> str:
        return keyframes_css(self.animation)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly summary (colors as rgba text)."""
        stops = []
        for s in self.gradient.stops:
            key = "angle" if isinstance(s, AngularStop) else "position"
            stops.append({"color": to_css_string(s.color), key: getattr(s, key)})
        out: dict[str, Any] = {
            "gradient": {
                "topology": self.gradient.topology,
                "angle": self.gradient.angle,
                "stops": stops,
                "css": self.background,
            },
            "noise": None,
            "animation": None,
        }
        if self.noise is not None:
            out["noise"] = {
                "filter_id": self.noise.filter_id,
                "base_frequency": self.noise.base_frequency,
                "octaves": self.noise.octaves,
                "overlay_opacity": self.noise.overlay_opacity,
                "blend_mode": self.noise.blend_mode,
                "mask_color": self.noise.color_css,
            }
        if self.animation is not None:
            out["animation"] = {
                "name": self.animation.name,
                "shorthand": self.animation.shorthand,
                "keyframes": self.keyframes(),
            }
        return out


class GradientBoxGenerator:
    """
    Computes gradient boxes from settings:
    settings → (composer) gradient → (noise) overlay → (animation) keyframes.
    """

    def __init__(self, config: dict | None = None):
        from ..config import resolve_box_config
        section = resolve_box_config(config or {})
        self.extra_palettes: dict[str, list] = section.pop("palettes", {}) or {}
        self.defaults = BoxConfig.from_mapping(section)

    def settings(self, **overrides: Any) -> BoxConfig:
        return BoxConfig.from_mapping(overrides, base=self.defaults)

    def generate(self, settings: BoxConfig | None = None, **overrides: Any) -> GradientBox:
        """Build one box. `overrides` use the same keys as the config section."""
        box = settings or self.defaults
        if overrides:
            box = BoxConfig.from_mapping(overrides, base=box)
        gradient = compose(
            box.type,
            box.palette,
            box.contrast,
            box.angle,
            center=box.center,
            extra_palettes=self.extra_palettes,
        )
        noise = synthesize(box.noise_config, filter_id=box.filter_id)
        animation = describe(
            box.type,
            box.animation_duration,
            box.palette,
            box.angle,
            enabled=box.animated,
            extra_palettes=self.extra_palettes,
        )
        return GradientBox(gradient=gradient, noise=noise, animation=animation, settings=box)
