#!/usr/bin/env python3
"""
CLI: Print the CSS (and SVG noise filter) for one gradient box.
Usage:
  python scripts/compose.py
  python scripts/compose.py ocean --type radial --contrast highlight
  python scripts/compose.py "#ff0000,#0000ff" --angle 90 --noise --noise-type medium
  python scripts/compose.py neon --type conic --animated --json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from gradientbox.config import load_config
from gradientbox.procedural import GradientBoxGenerator
from gradientbox.procedural.renderer import declarations_css


def parse_palette_arg(value: str | None):
    """'ocean' stays a key; 'a,b,c' becomes a literal color list."""
    if value is None:
        return None
    if "," in value:
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute a gradient box background (CSS + optional SVG noise filter)."
    )
    parser.add_argument(
        "palette",
        nargs="?",
        default=None,
        help="Palette name or comma-separated colors (default: from config).",
    )
    parser.add_argument("--type", "-t", default=None, help="linear | radial | conic")
    parser.add_argument("--contrast", "-c", default=None, help="ambient | highlight | bigContrast")
    parser.add_argument("--angle", "-a", type=float, default=None, help="Gradient angle in degrees.")
    parser.add_argument("--animated", action="store_true", default=None, help="Add looping motion.")
    parser.add_argument("--duration", type=float, default=None, help="Animation duration in seconds.")
    parser.add_argument("--noise", action="store_true", default=None, help="Add the grain overlay.")
    parser.add_argument("--noise-color", default=None, help="Grain color (hex or rgb()).")
    parser.add_argument("--noise-intensity", type=float, default=None, help="Grain strength (0.1-1.0).")
    parser.add_argument("--noise-type", default=None, help="subtle | medium | strong")
    parser.add_argument("--filter-id", default=None, help="Fixed SVG filter id (default: random).")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of CSS.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log fallbacks.")
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict:
    candidates = {
        "palette": parse_palette_arg(args.palette),
        "type": args.type,
        "contrast": args.contrast,
        "angle": args.angle,
        "animated": args.animated,
        "animation_duration": args.duration,
        "noise": args.noise,
        "noise_color": args.noise_color,
        "noise_intensity": args.noise_intensity,
        "noise_type": args.noise_type,
        "filter_id": args.filter_id,
    }
    return {k: v for k, v in candidates.items() if v is not None}


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    generator = GradientBoxGenerator(config)
    box = generator.generate(**overrides_from_args(args))

    if args.json:
        print(json.dumps(box.to_dict(), indent=2))
        return

    print(".gradient-box {")
    print(declarations_css(box.style(), indent="  "))
    print("}")
    if box.animation is not None and not box.animation.is_empty:
        print(box.keyframes())
    if box.noise is not None:
        print(".gradient-box__noise {")
        print(declarations_css(box.overlay_style(), indent="  "))
        print("}")
        print(box.filter_svg())


if __name__ == "__main__":
    main()
