"""
gradientbox: gradient and procedural-noise backgrounds as CSS/SVG descriptions.
"""
from .procedural import GradientBoxGenerator, compose, describe, synthesize

__version__ = "0.1.0"

__all__ = ["GradientBoxGenerator", "compose", "describe", "synthesize", "__version__"]
