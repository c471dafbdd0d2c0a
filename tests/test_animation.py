"""
Unit tests for the keyframe descriptions per gradient type.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gradientbox.procedural.animation import (
    EMPTY_ANIMATION,
    AnimationConfig,
    describe,
    describe_config,
)
from gradientbox.procedural.color import parse


class TestDescribe(unittest.TestCase):

    def test_disabled_is_none(self):
        self.assertIsNone(describe("linear", 8, enabled=False))
        self.assertIsNone(describe_config("conic", AnimationConfig(enabled=False)))

    def test_linear_slides_background_position(self):
        """0%/100% at '0% 50%', 50% at '100% 50%', over a 200% canvas."""
        spec = describe("linear", 8)
        self.assertEqual(spec.name, "gradientSlide")
        self.assertEqual(spec.shorthand, "gradientSlide 8s ease-in-out infinite")
        self.assertEqual(spec.base_properties, {"background-size": "200% 200%"})
        first, middle = spec.keyframes
        self.assertEqual(first.offsets, (0.0, 100.0))
        self.assertEqual(first.selector, "0%, 100%")
        self.assertEqual(first.properties, {"background-position": "0% 50%"})
        self.assertEqual(middle.properties, {"background-position": "100% 50%"})

    def test_radial_pulses_scale(self):
        spec = describe("radial", 6)
        self.assertEqual(spec.name, "radialPulse")
        rest, peak = spec.keyframes
        self.assertEqual(rest.properties, {"background-size": "100% 100%", "transform": "scale(1)"})
        self.assertEqual(peak.properties, {"background-size": "120% 120%", "transform": "scale(1.02)"})

    def test_conic_breathes_offsets(self):
        """Five phases at 0/25/50/75/100% with offsets 0, 5, 10, 5, 0 degrees."""
        palette = ["#ff0000", "#00ff00", "#0000ff"]
        spec = describe("conic", 10, palette, 30)
        self.assertEqual(spec.name, "conicRotate")
        self.assertEqual([k.offsets for k in spec.keyframes], [(0.0,), (25.0,), (50.0,), (75.0,), (100.0,)])
        offsets = [k.gradient.stops[0].angle for k in spec.keyframes]
        self.assertEqual(offsets, [0.0, 5.0, 10.0, 5.0, 0.0])
        for frame, offset in zip(spec.keyframes, offsets):
            self.assertEqual(frame.gradient.angle, 30.0)
            self.assertEqual(frame.gradient.stops[-1].angle, 360.0 + offset)
            self.assertEqual(frame.gradient.stops[-1].color, parse("#ff0000"))

    def test_unknown_topology_has_no_motion(self):
        spec = describe("spiral", 8)
        self.assertIs(spec, EMPTY_ANIMATION)
        self.assertTrue(spec.is_empty)
        self.assertEqual(spec.shorthand, "")

    def test_fractional_duration(self):
        self.assertEqual(describe("radial", 3.5).shorthand, "radialPulse 3.5s ease-in-out infinite")

    def test_non_finite_duration_is_default(self):
        for duration in (float("inf"), float("nan"), "forever"):
            self.assertEqual(describe("linear", duration).shorthand, "gradientSlide 8s ease-in-out infinite")
        conic = describe("conic", 6, ["#f00", "#00f"], angle="nan")
        self.assertEqual(conic.keyframes[0].gradient.angle, 45.0)

    def test_config_wrapper(self):
        spec = describe_config("linear", AnimationConfig(enabled=True, duration_seconds=4))
        self.assertEqual(spec.duration_seconds, 4)


if __name__ == "__main__":
    unittest.main()
