"""Tests for script rendering."""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from critical_assets.errors import UnsupportedScope
from critical_assets.models import AttributedSource, PlainSource
from critical_assets.registry import AssetRegistry
from critical_assets.scripts import render_script_tag, render_scripts


class TestRenderScriptTag(unittest.TestCase):
    def test_plain_source(self):
        self.assertEqual(render_script_tag(PlainSource("/js/a.js")), '<script src="/js/a.js"></script>')

    def test_attributes_in_given_order(self):
        entry = AttributedSource.from_mapping({"defer": True, "src": "a.js", "type": "module"})
        self.assertEqual(render_script_tag(entry), '<script defer src="a.js" type="module"></script>')

    def test_false_value_is_rendered_as_string(self):
        entry = AttributedSource.from_mapping({"src": "a.js", "async": False})
        self.assertEqual(render_script_tag(entry), '<script src="a.js" async="false"></script>')

    def test_values_are_escaped(self):
        entry = PlainSource('/js/a.js?x=1&y="2"')
        self.assertEqual(
            render_script_tag(entry),
            '<script src="/js/a.js?x=1&amp;y=&quot;2&quot;"></script>',
        )


class TestRenderScripts(unittest.TestCase):
    def setUp(self):
        self.registry = AssetRegistry()

    def test_nothing_registered(self):
        self.assertEqual(render_scripts(self.registry, "async", "home"), "")
        self.assertEqual(render_scripts(self.registry, "critical", "home"), "")

    def test_async_attributed_entry_registered_twice(self):
        self.registry.add_script("async", "home", {"src": "a.js", "defer": True})
        self.registry.add_script("async", "home", {"src": "a.js", "defer": True})

        result = render_scripts(self.registry, "async", "home")

        self.assertEqual(result, '<script src="a.js" defer></script>')
        self.assertIn('src="a.js"', result)
        self.assertEqual(result.count("<script"), 1)

    def test_async_mixed_entries_newline_joined(self):
        self.registry.add_script("async", "home", "a.js")
        self.registry.add_script("async", "home", {"src": "b.js", "async": True})

        self.assertEqual(
            render_scripts(self.registry, "async", "home"),
            '<script src="a.js"></script>\n<script src="b.js" async></script>',
        )

    def test_async_entries_rendering_identically_are_collapsed(self):
        self.registry.add_script("async", "home", "a.js")
        self.registry.add_script("async", "home", {"src": "a.js"})

        self.assertEqual(render_scripts(self.registry, "async", "home"), '<script src="a.js"></script>')

    def test_flag_and_numeric_attribute_both_rendered(self):
        self.registry.add_script("async", "home", {"src": "a.js", "async": True})
        self.registry.add_script("async", "home", {"src": "a.js", "async": 1})

        self.assertEqual(
            render_scripts(self.registry, "async", "home"),
            '<script src="a.js" async></script>\n<script src="a.js" async="1"></script>',
        )

    def test_critical_entries_are_bare_sources(self):
        self.registry.add_script("critical", "home", "/js/a.js")
        self.registry.add_script("critical", "home", "/js/b.js")
        self.registry.add_script("critical", "home", "/js/a.js")

        self.assertEqual(render_scripts(self.registry, "critical", "home"), "/js/a.js\n/js/b.js")

    def test_critical_attributed_entry_renders_its_source(self):
        self.registry.add_script("critical", "home", {"src": "/js/a.js", "defer": True})
        self.assertEqual(render_scripts(self.registry, "critical", "home"), "/js/a.js")

    def test_identifiers_are_isolated(self):
        self.registry.add_script("async", "home", "a.js")
        self.assertEqual(render_scripts(self.registry, "async", "about"), "")

    def test_unsupported_scope(self):
        with self.assertRaises(UnsupportedScope):
            render_scripts(self.registry, "blocking", "home")


if __name__ == "__main__":
    unittest.main()
