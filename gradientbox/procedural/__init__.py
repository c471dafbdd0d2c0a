# Gradient & procedural-noise engine: pure functions from box settings to paintable descriptions

from .color import Color, parse, interpolate, to_css_string
from .stops import distribute, conic_stops
from .composer import GradientSpec, PaletteKey, PaletteColors, compose
from .noise import NoiseConfig, NoiseSpec, synthesize
from .animation import AnimationConfig, AnimationSpec, describe
from .generator import BoxConfig, GradientBox, GradientBoxGenerator

__all__ = [
    "Color",
    "parse",
    "interpolate",
    "to_css_string",
    "distribute",
    "conic_stops",
    "GradientSpec",
    "PaletteKey",
    "PaletteColors",
    "compose",
    "NoiseConfig",
    "NoiseSpec",
    "synthesize",
    "AnimationConfig",
    "AnimationSpec",
    "describe",
    "BoxConfig",
    "GradientBox",
    "GradientBoxGenerator",
]
