from .palettes import DEFAULT_PALETTE, FALLBACK_COLORS, PALETTES, lookup, palette_names

__all__ = ["DEFAULT_PALETTE", "FALLBACK_COLORS", "PALETTES", "lookup", "palette_names"]
