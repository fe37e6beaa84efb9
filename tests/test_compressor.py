"""Tests for CSS post-processing."""

import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent))

from critical_assets.compressor import StyleCompressor, is_production


class TestStyleCompressor(unittest.TestCase):
    def test_production_minifies(self):
        compressor = StyleCompressor(production=True)
        self.assertEqual(compressor.mode, "minify")
        self.assertEqual(compressor("body {\n  color: red;\n}\n").strip(), "body{color:red}")

    def test_development_beautifies(self):
        compressor = StyleCompressor(production=False)
        result = compressor("body{color:red}p{margin:0}")

        self.assertEqual(compressor.mode, "beautify")
        self.assertIn("color: red", result)
        self.assertIn("margin: 0", result)
        self.assertGreater(result.count("\n"), 2)

    def test_blank_input(self):
        self.assertEqual(StyleCompressor(production=True)("  \n"), "")
        self.assertEqual(StyleCompressor(production=False)(""), "")

    def test_mode_from_environment(self):
        with patch.dict(os.environ, {"SITE_ENV": "production"}):
            self.assertTrue(is_production())
            self.assertTrue(StyleCompressor().minify)

        with patch.dict(os.environ, {"SITE_ENV": "Production"}):
            self.assertFalse(StyleCompressor().minify)

        with patch.dict(os.environ, {}, clear=True):
            self.assertFalse(StyleCompressor().minify)

    def test_environment_is_read_at_call_time(self):
        with patch.dict(os.environ, {}, clear=True):
            compressor = StyleCompressor()
            self.assertEqual(compressor.mode, "beautify")

        with patch.dict(os.environ, {"SITE_ENV": "production"}):
            self.assertEqual(compressor.mode, "minify")
            self.assertEqual(compressor("body { color: red; }").strip(), "body{color:red}")

    def test_explicit_mode_overrides_environment(self):
        with patch.dict(os.environ, {"SITE_ENV": "production"}):
            self.assertFalse(StyleCompressor(production=False).minify)
        with patch.dict(os.environ, {}, clear=True):
            self.assertTrue(StyleCompressor(production=True).minify)


if __name__ == "__main__":
    unittest.main()
