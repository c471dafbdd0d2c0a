"""
Unit tests for the box generator (settings → gradient + noise + animation) and YAML config.
Run from project root: python -m pytest tests/ -v
"""
import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gradientbox.config import load_config, resolve_box_config
from gradientbox.procedural.color import WHITE, Color, parse
from gradientbox.procedural.generator import BoxConfig, GradientBoxGenerator


class TestBoxConfig(unittest.TestCase):

    def test_defaults(self):
        """warm_sunset, linear, ambient, 45deg, no animation, no noise."""
        box = BoxConfig()
        self.assertEqual(box.palette, "warm_sunset")
        self.assertEqual((box.type, box.contrast, box.angle), ("linear", "ambient", 45.0))
        self.assertFalse(box.animated)
        self.assertEqual(box.animation_duration, 8.0)
        self.assertFalse(box.noise)
        self.assertEqual(box.noise_color, WHITE)
        self.assertEqual((box.noise_intensity, box.noise_type), (0.3, "subtle"))

    def test_camel_case_props(self):
        """camelCase prop names map onto the snake_case fields."""
        box = BoxConfig.from_mapping({
            "noise": True,
            "noiseColor": "#000000",
            "noiseType": "strong",
            "noiseIntensity": 1.0,
            "animationDuration": 3,
            "topology": "radial",
        })
        self.assertEqual(box.noise_color, Color(0, 0, 0, 1.0))
        self.assertEqual(box.noise_type, "strong")
        self.assertEqual(box.animation_duration, 3.0)
        self.assertEqual(box.type, "radial")

    def test_unreadable_values_fall_back(self):
        """Bad numbers keep the base value; a bad noise color becomes white."""
        box = BoxConfig.from_mapping({
            "angle": "wide",
            "animation_duration": None,
            "noise_intensity": "lots",
            "noise_color": "notacolor",
            "unknown_key": 1,
        })
        self.assertEqual(box.angle, 45.0)
        self.assertEqual(box.animation_duration, 8.0)
        self.assertEqual(box.noise_intensity, 0.3)
        self.assertEqual(box.noise_color, WHITE)

    def test_non_finite_numbers_fall_back(self):
        """nan and inf are unreadable too: they keep the base value."""
        box = BoxConfig.from_mapping({
            "angle": "nan",
            "animation_duration": "inf",
            "noise_intensity": float("-inf"),
        })
        self.assertEqual(box.angle, 45.0)
        self.assertEqual(box.animation_duration, 8.0)
        self.assertEqual(box.noise_intensity, 0.3)

    def test_flag_words(self):
        """Flags written as text (YAML strings, query params) mean what they say."""
        off = BoxConfig.from_mapping({"animated": "false", "noise": "no"})
        self.assertFalse(off.animated)
        self.assertFalse(off.noise)
        on = BoxConfig.from_mapping({"animated": "true", "noise": "On"})
        self.assertTrue(on.animated)
        self.assertTrue(on.noise)
        numeric = BoxConfig.from_mapping({"animated": 1, "noise": 0})
        self.assertTrue(numeric.animated)
        self.assertFalse(numeric.noise)

    def test_unreadable_flags_keep_base(self):
        base = BoxConfig(animated=True, noise=False)
        box = BoxConfig.from_mapping({"animated": "sometimes", "noise": None}, base=base)
        self.assertTrue(box.animated)
        self.assertFalse(box.noise)


class TestGenerator(unittest.TestCase):

    def test_default_box(self):
        box = GradientBoxGenerator().generate()
        self.assertEqual(box.gradient.topology, "linear")
        self.assertEqual(len(box.gradient.stops), 4)
        self.assertIsNone(box.noise)
        self.assertIsNone(box.animation)
        self.assertEqual(box.overlay_style(), {})
        self.assertEqual(box.filter_svg(), "")

    def test_overrides(self):
        box = GradientBoxGenerator().generate(palette=["#ff0000", "#0000ff"], angle=90)
        self.assertEqual(
            box.background,
            "linear-gradient(90deg, rgba(255, 0, 0, 1) 0%, rgba(0, 0, 255, 1) 100%)",
        )

    def test_overrides_leave_defaults_alone(self):
        generator = GradientBoxGenerator()
        generator.generate(type="conic", noise=True)
        self.assertEqual(generator.defaults, BoxConfig())

    def test_noise_and_animation(self):
        box = GradientBoxGenerator().generate(
            type="radial",
            animated=True,
            animation_duration=5,
            noise=True,
            noise_type="strong",
            noise_intensity=1.0,
            filter_id="noise-filter-fixed",
        )
        self.assertEqual(box.noise.overlay_opacity, 0.1)
        self.assertEqual(box.noise.filter_id, "noise-filter-fixed")
        self.assertEqual(box.animation.shorthand, "radialPulse 5s ease-in-out infinite")
        self.assertIn("url(#noise-filter-fixed)", box.overlay_style()["filter"])
        self.assertIn('id="noise-filter-fixed"', box.filter_svg())
        self.assertIn("@keyframes radialPulse", box.style())

    def test_non_finite_overrides_still_render(self):
        """nan/inf overrides fall back before any number is printed."""
        box = GradientBoxGenerator().generate(
            angle="nan",
            animated=True,
            animation_duration="inf",
            noise=True,
            noise_intensity="inf",
            filter_id="f",
        )
        self.assertEqual(box.gradient.angle, 45.0)
        self.assertTrue(box.background.startswith("linear-gradient(45deg, "))
        self.assertAlmostEqual(box.noise.overlay_opacity, 0.6 * 0.3)
        self.assertEqual(box.overlay_style()["opacity"], "0.18")
        self.assertEqual(box.animation.shorthand, "gradientSlide 8s ease-in-out infinite")

    def test_string_flags_from_overrides(self):
        """noise="false" / animated="false" switch the overlay and motion off."""
        box = GradientBoxGenerator().generate(noise="false", animated="false")
        self.assertIsNone(box.noise)
        self.assertIsNone(box.animation)

    def test_unknown_type_renders_linear_without_motion(self):
        box = GradientBoxGenerator().generate(type="spiral", animated=True)
        self.assertEqual(box.gradient.topology, "linear")
        self.assertTrue(box.animation.is_empty)
        self.assertEqual(box.keyframes(), "")

    def test_config_palettes_and_defaults(self):
        """The config's gradient section sets defaults and extra palettes."""
        config = {"gradient": {"palette": "duo", "contrast": "bigContrast", "palettes": {"duo": ["#000000", "#ffffff"]}}}
        generator = GradientBoxGenerator(config)
        box = generator.generate()
        self.assertEqual(box.gradient.stops[0].color, parse("#000000"))
        self.assertEqual([s.position for s in box.gradient.stops], [10.0, 90.0])
        conic = generator.generate(type="conic", animated=True)
        self.assertEqual(conic.animation.keyframes[0].gradient.stops[0].color, parse("#000000"))

    def test_settings_helper(self):
        generator = GradientBoxGenerator({"gradient": {"angle": 120}})
        settings = generator.settings(contrast="highlight")
        self.assertEqual((settings.angle, settings.contrast), (120.0, "highlight"))
        self.assertEqual(generator.generate(settings).gradient.angle, 120.0)

    def test_to_dict_is_json(self):
        box = GradientBoxGenerator().generate(type="conic", animated=True, noise=True, filter_id="f")
        data = json.loads(json.dumps(box.to_dict()))
        self.assertEqual(data["gradient"]["topology"], "conic")
        self.assertIn("angle", data["gradient"]["stops"][0])
        self.assertEqual(data["noise"]["filter_id"], "f")
        self.assertEqual(data["animation"]["name"], "conicRotate")


class TestConfig(unittest.TestCase):

    def test_missing_file_gives_defaults(self):
        config = load_config(Path(tempfile.gettempdir()) / "gradientbox-does-not-exist.yaml")
        self.assertEqual(config["gradient"]["palette"], "warm_sunset")

    def test_yaml_overrides(self):
        with tempfile.TemporaryDirectory() as d:
            path = Path(d) / "box.yaml"
            path.write_text("gradient:\n  type: conic\n  angle: 10\n", encoding="utf-8")
            config = load_config(path)
        section = resolve_box_config(config)
        self.assertEqual(section["type"], "conic")
        self.assertEqual(section["angle"], 10)
        self.assertEqual(section["contrast"], "ambient")
        self.assertEqual(section["palettes"], {})

    def test_empty_yaml(self):
        with tempfile.TemporaryDirectory() as d:
            path = Path(d) / "empty.yaml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(resolve_box_config(load_config(path))["type"], "linear")

    def test_shipped_default_config(self):
        config = load_config(ROOT / "config" / "default.yaml")
        section = resolve_box_config(config)
        self.assertEqual(section["palette"], "warm_sunset")
        self.assertIn("sunset_glow", section["palettes"])


if __name__ == "__main__":
    unittest.main()
