"""
Our data: gradient palettes (RGB 0–255). Read by the composer; never written at runtime.
Each palette is an ordered list of (R, G, B) tuples, first color first.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from ..color import Color, parse

DEFAULT_PALETTE = "warm_sunset"

# Used when a key is unknown or a literal palette is empty
FALLBACK_COLORS: tuple[str, str] = ("#f5f5f5", "#e0e0e0")

PALETTES: dict[str, list[tuple[int, int, int]]] = {
    "warm_sunset": [
        (255, 120, 80),
        (255, 80, 100),
        (180, 60, 120),
        (100, 40, 100),
    ],
    "ocean": [
        (20, 80, 140),
        (40, 120, 180),
        (80, 160, 220),
        (140, 200, 240),
    ],
    "neon": [
        (255, 0, 128),
        (128, 0, 255),
        (0, 255, 255),
        (255, 255, 0),
    ],
    "forest": [
        (20, 80, 40),
        (40, 120, 60),
        (80, 140, 90),
        (120, 160, 100),
    ],
    "night": [
        (10, 10, 30),
        (30, 20, 60),
        (60, 40, 100),
        (100, 80, 140),
    ],
    "dreamy": [
        (240, 220, 255),
        (220, 200, 255),
        (200, 180, 240),
        (180, 160, 220),
    ],
    "fire": [
        (255, 200, 50),
        (255, 120, 20),
        (200, 60, 10),
        (100, 20, 5),
    ],
    "peach": [
        (255, 218, 185),
        (255, 160, 122),
    ],
    "mint": [
        (224, 255, 240),
        (152, 230, 200),
    ],
    "mono": [
        (240, 240, 240),
        (180, 180, 180),
        (100, 100, 100),
        (40, 40, 40),
    ],
}


def lookup(
    key: str,
    extra: Mapping[str, Sequence] | None = None,
) -> list[Color] | None:
    """
    Resolve a palette key to its colors. `extra` (e.g. palettes from config) wins over the
    built-in table. Returns None when the key is unknown or its entry isn't a color list.
    """
    if extra and key in extra:
        raw = extra[key]
    elif key in PALETTES:
        raw = PALETTES[key]
    else:
        return None
    if not isinstance(raw, (list, tuple)):
        return None
    return [parse(c) for c in raw]


def palette_names(extra: Mapping[str, Sequence] | None = None) -> list[str]:
    names = set(PALETTES)
    if extra:
        names.update(extra)
    return sorted(names)
