"""
Host translation: specs → CSS text, style mappings and SVG filter markup.
Still descriptive output; the host's browser/scene graph does the painting.
"""
from __future__ import annotations

from html import escape

from .animation import AnimationSpec, Keyframe
from .color import format_number, to_css_string
from .composer import GradientSpec
from .noise import FilterPrimitive, NoiseSpec
from .stops import AngularStop, ColorStop

# Post-filter boost so the binary grain stays crisp after blending
NOISE_FILTER_BOOST = "contrast(300%) brightness(150%)"


def stop_css(stop: ColorStop | AngularStop) -> str:
    color = to_css_string(stop.color)
    if isinstance(stop, AngularStop):
        if stop.angle is None:
            return color
        return f"{color} {format_number(stop.angle)}deg"
    return f"{color} {format_number(stop.position)}%"


def gradient_css(spec: GradientSpec) -> str:
    """
    CSS image for a gradient:
    linear-gradient(45deg, ...), radial-gradient(circle[ at x% y%], ...), conic-gradient(from 45deg, ...).
    """
    stops = ", ".join(stop_css(s) for s in spec.stops)
    angle = format_number(spec.angle)
    if spec.topology == "radial":
        shape = "circle"
        if spec.center is not None:
            cx, cy = spec.center
            shape += f" at {format_number(cx)}% {format_number(cy)}%"
        return f"radial-gradient({shape}, {stops})"
    if spec.topology == "conic":
        return f"conic-gradient(from {angle}deg, {stops})"
    return f"linear-gradient({angle}deg, {stops})"


def keyframe_properties(frame: Keyframe) -> dict[str, str]:
    props = dict(frame.properties)
    if frame.gradient is not None:
        props["background-image"] = gradient_css(frame.gradient)
    return props


def animation_style(animation: AnimationSpec | None) -> dict:
    """`animation` declaration plus a nested '@keyframes name' block. Empty when there is no motion."""
    if animation is None or animation.is_empty:
        return {}
    style: dict = dict(animation.base_properties)
    style["animation"] = animation.shorthand
    style[f"@keyframes {animation.name}"] = {
        frame.selector: keyframe_properties(frame) for frame in animation.keyframes
    }
    return style


def keyframes_css(animation: AnimationSpec | None, indent: str = "  ") -> str:
    if animation is None or animation.is_empty:
        return ""
    lines = [f"@keyframes {animation.name} {{"]
    for frame in animation.keyframes:
        body = " ".join(f"{k}: {v};" for k, v in keyframe_properties(frame).items())
        lines.append(f"{indent}{frame.selector} {{ {body} }}")
    lines.append("}")
    return "\n".join(lines)


def box_style(
    gradient: GradientSpec,
    animation: AnimationSpec | None = None,
) -> dict:
    """Style mapping for the gradient box itself (the overlay is styled separately)."""
    style: dict = {
        "background": gradient_css(gradient),
        "position": "relative",
    }
    style.update(animation_style(animation))
    return style


def noise_overlay_style(noise: NoiseSpec) -> dict[str, str]:
    """Absolutely positioned overlay that runs the noise filter over the noise color."""
    return {
        "position": "absolute",
        "top": "0",
        "left": "0",
        "right": "0",
        "bottom": "0",
        "filter": f"url(#{noise.filter_id}) {NOISE_FILTER_BOOST}",
        "opacity": format_number(noise.overlay_opacity),
        "mix-blend-mode": noise.blend_mode,
        "pointer-events": "none",
        "background": noise.color_css,
    }


def _primitive_svg(primitive: FilterPrimitive, depth: int, indent: str) -> list[str]:
    pad = indent * depth
    attrs = "".join(f' {k}="{escape(str(v), quote=True)}"' for k, v in primitive.attributes.items())
    if not primitive.children:
        return [f"{pad}<{primitive.tag}{attrs}/>"]
    lines = [f"{pad}<{primitive.tag}{attrs}>"]
    for child in primitive.children:
        lines.extend(_primitive_svg(child, depth + 1, indent))
    lines.append(f"{pad}</{primitive.tag}>")
    return lines


def noise_filter_svg(noise: NoiseSpec | None, indent: str = "  ") -> str:
    """Zero-size <svg> holding the noise <filter>; empty string when noise is off."""
    if noise is None:
        return ""
    lines = [
        '<svg style="position: absolute; width: 0; height: 0">',
        f"{indent}<defs>",
        f'{indent * 2}<filter id="{escape(noise.filter_id, quote=True)}" x="0%" y="0%" width="100%" height="100%">',
    ]
    for primitive in noise.pipeline:
        lines.extend(_primitive_svg(primitive, 3, indent))
    lines += [f"{indent * 2}</filter>", f"{indent}</defs>", "</svg>"]
    return "\n".join(lines)


def declarations_css(style: dict, indent: str = "") -> str:
    """Flat `prop: value;` lines; nested blocks (e.g. @keyframes) are skipped."""
    return "\n".join(
        f"{indent}{k}: {v};" for k, v in style.items() if not isinstance(v, dict)
    )
