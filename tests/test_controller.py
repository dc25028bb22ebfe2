import unittest

from stringart.config import ConfigurationError, StringArtConfig
from stringart.controller import StringArtController


class StringArtControllerTest(unittest.TestCase):
    def test_starts_with_default_pattern(self):
        ctl = StringArtController()
        self.assertEqual(ctl.config, StringArtConfig())
        self.assertEqual(len(ctl.pattern), 39 * 3)

    def test_load_config_dict(self):
        ctl = StringArtController()
        pattern = ctl.load_config_dict({"sides": 4, "density": 10, "crossed": True})
        self.assertEqual(len(pattern), 32)
        self.assertIs(ctl.pattern, pattern)
        self.assertEqual(ctl.config.sides, 4)

    def test_invalid_config_keeps_previous_pattern(self):
        ctl = StringArtController()
        before = ctl.pattern
        with self.assertRaises(ConfigurationError):
            ctl.load_config_dict({"density": 5})
        self.assertIs(ctl.pattern, before)

    def test_summary(self):
        ctl = StringArtController(config=StringArtConfig(sides=4, density=10))
        summary = ctl.pattern_summary()
        self.assertEqual(summary["count"], 36)
        self.assertEqual(summary["config"]["sides"], 4)
        self.assertEqual(len(summary["bounding_box"]), 2)
        self.assertGreater(summary["total_length"], 0.0)

    def test_reset(self):
        ctl = StringArtController(config=StringArtConfig(sides=8, density=10))
        ctl.reset()
        self.assertEqual(ctl.config, StringArtConfig())

    def test_strokes_and_svg(self):
        ctl = StringArtController(config=StringArtConfig(sides=3, density=10))
        self.assertEqual(len(ctl.pattern_strokes()["strokes"]), 27)
        self.assertEqual(ctl.pattern_svg().count("<path"), 27)


if __name__ == "__main__":
    unittest.main()
