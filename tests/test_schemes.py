"""
Unit tests for the built-in color scheme table.
Run from project root: python -m pytest tests/ -v
"""
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestColor(unittest.TestCase):

    def test_paint_wraps_text_in_truecolor_escape(self):
        from prettylog.schemes import Color

        self.assertEqual(Color(1, 2, 3).paint("x"), "\x1b[38;2;1;2;3mx\x1b[39m")

    def test_rejects_out_of_range_components(self):
        from prettylog.schemes import Color

        for bad in (-1, 256, 1.5, True, "10"):
            with self.assertRaises(ValueError):
                Color(bad, 0, 0)

    def test_is_immutable(self):
        from dataclasses import FrozenInstanceError
        from prettylog.schemes import Color

        c = Color(0, 0, 0)
        with self.assertRaises(FrozenInstanceError):
            c.r = 10


class TestColorSchemes(unittest.TestCase):

    def test_bundled_names(self):
        from prettylog.schemes import list_color_schemes

        self.assertEqual(list_color_schemes(), ["chalk", "greyscale", "mocha", "ocean", "solarized"])

    def test_every_palette_has_five_colors(self):
        from prettylog.schemes import Color, Palette, load_color_schemes

        for name, palette in load_color_schemes().items():
            self.assertIsInstance(palette, Palette, name)
            for slot in (palette.null, palette.boolean, palette.number, palette.string, palette.object_key):
                self.assertIsInstance(slot, Color)

    def test_lookup_exact_match(self):
        from prettylog.schemes import Color, get_color_scheme

        ocean = get_color_scheme("ocean")
        self.assertEqual(ocean.object_key, Color(143, 161, 179))

    def test_lookup_is_case_sensitive(self):
        from prettylog.errors import UnknownColorSchemeError
        from prettylog.schemes import get_color_scheme

        with self.assertRaises(UnknownColorSchemeError) as ctx:
            get_color_scheme("Ocean")
        self.assertEqual(ctx.exception.name, "Ocean")
        self.assertIn("ocean", ctx.exception.available)
        self.assertEqual(str(ctx.exception), "Unknown color scheme: Ocean")

    def test_unknown_scheme_is_a_key_error(self):
        from prettylog.schemes import get_color_scheme

        with self.assertRaises(KeyError):
            get_color_scheme("neon")

    def test_lookup_in_custom_table(self):
        from prettylog.schemes import get_color_scheme, load_color_schemes

        schemes = {"only": load_color_schemes()["chalk"]}
        self.assertIs(get_color_scheme("only", schemes), schemes["only"])

    def test_load_rejects_missing_slot(self):
        from prettylog.schemes import load_color_schemes

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "schemes.yaml"
            path.write_text(
                "broken:\n"
                "  \"null\": {r: 1, g: 2, b: 3}\n"
                "  bool: {r: 1, g: 2, b: 3}\n"
                "  number: {r: 1, g: 2, b: 3}\n"
                "  string: {r: 1, g: 2, b: 3}\n",
                encoding="utf-8",
            )
            with self.assertRaises(ValueError) as ctx:
                load_color_schemes(path)
        self.assertIn("missing=['object_key'], unexpected=[])", str(ctx.exception))

    def test_bundled_yaml_slot_keys_are_strings(self):
        """An unquoted `null:` key would load as None and break every scheme."""
        import yaml
        from prettylog.schemes import _SCHEMES_PATH

        with open(_SCHEMES_PATH, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        for name, slots in raw.items():
            self.assertEqual(list(slots), ["null", "bool", "number", "string", "object_key"], name)

    def test_unquoted_null_key_is_rejected(self):
        from prettylog.schemes import load_color_schemes

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "schemes.yaml"
            path.write_text(
                "bare:\n"
                "  null: {r: 1, g: 1, b: 1}\n"
                "  bool: {r: 2, g: 2, b: 2}\n"
                "  number: {r: 3, g: 3, b: 3}\n"
                "  string: {r: 4, g: 4, b: 4}\n"
                "  object_key: {r: 5, g: 5, b: 5}\n",
                encoding="utf-8",
            )
            with self.assertRaises(ValueError) as ctx:
                load_color_schemes(path)
        self.assertIn("missing=['null'], unexpected=[None]", str(ctx.exception))

    def test_load_custom_file(self):
        from prettylog.schemes import Color, load_color_schemes

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "schemes.yaml"
            path.write_text(
                "mine:\n"
                "  \"null\": {r: 1, g: 1, b: 1}\n"
                "  bool: {r: 2, g: 2, b: 2}\n"
                "  number: {r: 3, g: 3, b: 3}\n"
                "  string: {r: 4, g: 4, b: 4}\n"
                "  object_key: {r: 5, g: 5, b: 5}\n",
                encoding="utf-8",
            )
            schemes = load_color_schemes(path)
        self.assertEqual(list(schemes), ["mine"])
        self.assertEqual(schemes["mine"].boolean, Color(2, 2, 2))


if __name__ == "__main__":
    unittest.main()
