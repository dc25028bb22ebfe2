import argparse
import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from stringart.cli import _parse_color, build_parser, main


class CliTest(unittest.TestCase):
    def test_parse_color(self):
        self.assertEqual(_parse_color("0, 0.5 ,1"), (0.0, 0.5, 1.0))
        with self.assertRaises(argparse.ArgumentTypeError):
            _parse_color("0,1")
        with self.assertRaises(argparse.ArgumentTypeError):
            _parse_color("red")

    def test_exports_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            png = Path(tmp) / "out.png"
            svg = Path(tmp) / "out.svg"
            with redirect_stdout(io.StringIO()) as out, patch("stringart.cli.plt.show") as show:
                code = main([
                    "--sides", "5", "--crossed", "--density", "12",
                    "--color", "0.1,0.2,0.3",
                    "--save", str(png), "--svg", str(svg), "--no-show",
                ])
            self.assertEqual(code, 0)
            self.assertTrue(png.exists())
            self.assertEqual(svg.read_text(encoding="utf-8").count("<path"), 50)
            self.assertIn("Drew 50 strings", out.getvalue())
            show.assert_not_called()

    def test_shows_window(self):
        with redirect_stdout(io.StringIO()), patch("stringart.cli.plt.show") as show, \
                patch("stringart.rendering.plt.pause") as pause:
            main(["--density", "10"])
        show.assert_called_once()
        self.assertEqual(pause.call_count, 27)

    def test_maximize_flag(self):
        with redirect_stdout(io.StringIO()), patch("stringart.rendering.PatternRenderer._maximize") as maximize:
            main(["--density", "10", "--maximize", "--no-show"])
        maximize.assert_called_once()

    def test_every_option_has_help(self):
        parser = build_parser()
        for action in parser._actions:
            with self.subTest(option=action.dest):
                self.assertTrue(action.help)
        self.assertIn("String width", parser.format_help())

    def test_invalid_density_exits(self):
        with redirect_stderr(io.StringIO()) as err:
            with self.assertRaises(SystemExit) as ctx:
                main(["--density", "5", "--no-show"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("density", err.getvalue())


if __name__ == "__main__":
    unittest.main()
