"""
Unit tests for the renderer: random, by-id and render-all paths over the packaged catalogue.
"""
import re
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shapegen.catalogue.store import Catalogue, load_catalogue
from shapegen.data.pairings import COLOR_PAIRINGS
from shapegen.errors import (
    EmptyCatalogueError,
    IdentifierOutOfRange,
    InvalidIdentifier,
    InvalidOptionsError,
    MissingIdentifier,
)
from shapegen.gradients import GradientCounter
from shapegen.renderer import Renderer

GRADIENT_ID = re.compile(r'<linearGradient id="(grad-\d+)"')
STOP_COLORS = re.compile(r'stop-color="([^"]+)"')
PLACEHOLDER = re.compile(r"\$\{(color|width|height)\}")

# Packaged catalogue: 4 (diamond) and 8 (star) ship their own viewBox
OWN_VIEWBOX = {4: "0 0 100 100", 8: "0 0 24 24"}


def _strip_gradient_ids(markup: str) -> str:
    return re.sub(r"grad-\d+", "grad-N", markup)


class RendererTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.catalogue = load_catalogue()

    def setUp(self):
        self.renderer = Renderer(self.catalogue, seed=1234)


class TestRenderRandom(RendererTestCase):

    def test_color_and_size(self):
        for _ in range(20):
            out = self.renderer.render_random({"color": "red", "size": 24})
            self.assertIn('fill="red"', out)
            self.assertIn('width="24"', out)
            self.assertIn('height="24"', out)
            self.assertNotIn("<defs>", out)

    def test_defaults(self):
        out = self.renderer.render_random()
        self.assertIn('fill="blue"', out)
        self.assertIn('width="16"', out)
        self.assertIsNone(PLACEHOLDER.search(out))

    def test_keyword_options(self):
        out = self.renderer.render_random(color="green", size=32.0)
        self.assertIn('fill="green"', out)
        self.assertIn('width="32"', out)

    def test_gradient_ids_never_repeat(self):
        opts = {"gradient": True, "gradientStartColor": "red", "gradientStopColor": "yellow"}
        first = self.renderer.render_random(opts)
        second = self.renderer.render_random(opts)
        id1 = GRADIENT_ID.search(first).group(1)
        id2 = GRADIENT_ID.search(second).group(1)
        self.assertNotEqual(id1, id2)
        self.assertIn(f'fill="url(#{id1})"', first)
        self.assertEqual(STOP_COLORS.findall(first), ["red", "yellow"])

    def test_gradient_uses_default_colors(self):
        out = self.renderer.render_random(gradient=True)
        self.assertEqual(STOP_COLORS.findall(out), ["blue", "lightblue"])

    def test_selection_covers_catalogue(self):
        seen = set()
        for _ in range(300):
            out = self.renderer.render_random()
            for key in self.catalogue:
                if out == self.renderer.render_by_id(id=key):
                    seen.add(key)
        self.assertEqual(seen, set(self.catalogue))

    def test_same_seed_same_picks(self):
        a = Renderer(self.catalogue, seed=99)
        b = Renderer(self.catalogue, seed=99)
        self.assertEqual([a.render_random() for _ in range(10)], [b.render_random() for _ in range(10)])

    def test_empty_catalogue(self):
        renderer = Renderer(Catalogue({}), seed=0)
        with self.assertRaises(EmptyCatalogueError):
            renderer.render_random()
        self.assertEqual(renderer.render_all(), [])

    def test_bad_size(self):
        with self.assertRaises(InvalidOptionsError):
            self.renderer.render_random(size=-1)


class TestViewBoxAndPlaceholders(RendererTestCase):

    def test_every_template(self):
        for key in self.catalogue:
            for opts in ({}, {"gradient": True}, {"color": "#ff00aa", "size": 48}):
                out = self.renderer.render_by_id(opts, id=key)
                self.assertIsNone(PLACEHOLDER.search(out), f"template {key}")
                self.assertEqual(out.count("viewBox="), 1, f"template {key}")
                expected = OWN_VIEWBOX.get(key, "0 0 200 200")
                self.assertIn(f'viewBox="{expected}"', out)

    def test_defs_is_first_child_of_root(self):
        for key in self.catalogue:
            out = self.renderer.render_by_id(id=key, gradient=True)
            root_end = out.index(">")
            self.assertTrue(out[root_end + 1:].startswith("<defs><linearGradient"), f"template {key}")


class TestRenderById(RendererTestCase):

    def test_deterministic(self):
        outs = {self.renderer.render_by_id({"id": "1"}) for _ in range(5)}
        self.assertEqual(len(outs), 1)
        gradient_outs = {
            _strip_gradient_ids(self.renderer.render_by_id({"id": "1", "gradient": True}))
            for _ in range(5)
        }
        self.assertEqual(len(gradient_outs), 1)

    def test_id_is_catalogue_key(self):
        out = self.renderer.render_by_id(id="3", color="red")
        self.assertIn('<circle cx="100" cy="100" r="90" fill="red"/>', out)
        self.assertEqual(out, self.renderer.render_by_id(id=3, color="red"))
        self.assertEqual(out, self.renderer.render_by_id(id=" 3 ", color="red"))

    def test_missing_id(self):
        with self.assertRaises(InvalidIdentifier):
            self.renderer.render_by_id({})
        with self.assertRaises(MissingIdentifier):
            self.renderer.render_by_id({"id": ""})
        with self.assertRaises(MissingIdentifier):
            self.renderer.render_by_id()

    def test_out_of_range(self):
        for bad in ("0", "9", "-1", 100):
            with self.assertRaises(IdentifierOutOfRange) as ctx:
                self.renderer.render_by_id(id=bad)
            self.assertIsInstance(ctx.exception, InvalidIdentifier)
            self.assertEqual(ctx.exception.size, 8)

    def test_not_an_integer(self):
        for bad in ("abc", "1.5", "3abc", 2.5, True, [1]):
            with self.assertRaises(InvalidIdentifier):
                self.renderer.render_by_id(id=bad)

    def test_failed_lookup_mints_no_gradient(self):
        counter = GradientCounter()
        renderer = Renderer(self.catalogue, counter=counter, seed=0)
        with self.assertRaises(InvalidIdentifier):
            renderer.render_by_id(id="42", gradient=True)
        self.assertEqual(counter.value, 0)


class TestRenderAll(RendererTestCase):

    def test_color_only(self):
        outs = self.renderer.render_all({"color": "purple"})
        self.assertEqual(len(outs), len(self.catalogue))
        for out in outs:
            self.assertIn('fill="purple"', out)
            self.assertNotIn("<defs>", out)

    def test_key_order(self):
        outs = self.renderer.render_all(color="purple", size=20)
        expected = [self.renderer.render_by_id(id=k, color="purple", size=20) for k in self.catalogue]
        self.assertEqual(outs, expected)

    def test_no_options_random_pairings(self):
        outs = self.renderer.render_all()
        self.assertEqual(len(outs), len(self.catalogue))
        pairs = set(COLOR_PAIRINGS.values())
        ids = []
        for out in outs:
            m = GRADIENT_ID.search(out)
            self.assertIsNotNone(m)
            ids.append(m.group(1))
            self.assertIn(tuple(STOP_COLORS.findall(out)), pairs)
            self.assertIn('width="16"', out)
        self.assertEqual(len(set(ids)), len(ids))

    def test_no_styling_keeps_size(self):
        for out in self.renderer.render_all(size=40):
            self.assertIn('width="40"', out)
            self.assertIn("<defs>", out)

    def test_incomplete_gradient_falls_back_to_random(self):
        pairs = set(COLOR_PAIRINGS.values())
        for out in self.renderer.render_all(gradient=True, gradient_start_color="red"):
            self.assertIn(tuple(STOP_COLORS.findall(out)), pairs)

    def test_explicit_gradient_shared_with_fresh_ids(self):
        outs = self.renderer.render_all(
            gradient=True, gradient_start_color="red", gradient_stop_color="yellow"
        )
        ids = [GRADIENT_ID.search(out).group(1) for out in outs]
        self.assertEqual(len(set(ids)), len(outs))
        for out in outs:
            self.assertEqual(STOP_COLORS.findall(out), ["red", "yellow"])

    def test_counter_shared_across_renderers(self):
        counter = GradientCounter()
        a = Renderer(self.catalogue, counter=counter, seed=1)
        b = Renderer(self.catalogue, counter=counter, seed=2)
        outs = a.render_all() + b.render_all()
        ids = {GRADIENT_ID.search(out).group(1) for out in outs}
        self.assertEqual(len(ids), 2 * len(self.catalogue))
        self.assertEqual(counter.value, 2 * len(self.catalogue))


class TestDefaultRenderer(unittest.TestCase):
    """Module-level render_* functions share one default renderer."""

    def tearDown(self):
        from shapegen.renderer import reset_default_renderer

        reset_default_renderer()

    def test_module_functions(self):
        import shapegen
        from shapegen.renderer import get_default_renderer

        shapegen.reset_default_renderer(Renderer(load_catalogue(), seed=5))
        self.assertIs(get_default_renderer(), shapegen.get_default_renderer())
        self.assertIn('fill="red"', shapegen.render_by_id({"id": "2", "color": "red"}))
        self.assertIn("viewBox=", shapegen.render_random())
        self.assertEqual(len(shapegen.render_all()), 8)
        with self.assertRaises(shapegen.InvalidIdentifier):
            shapegen.render_by_id({})

    def test_lazy_default(self):
        from shapegen.renderer import get_default_renderer, reset_default_renderer

        reset_default_renderer()
        renderer = get_default_renderer()
        self.assertEqual(len(renderer.catalogue), 8)
        self.assertIs(get_default_renderer(), renderer)


if __name__ == "__main__":
    unittest.main()
