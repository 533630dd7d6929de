"""
Tests for the Search Engine Registry.

Tests cover:
- Registry creation and basic operations
- Engine registration and lookup
- Metadata management
- Running engines
- Error handling
- Singleton pattern
"""

import unittest

from PIL import Image

from BP_Libs.SamplerLib.target_sampler import TargetSampler
from BP_Libs.SearchLib.engine_registry import (
    SearchEngineRegistry,
    get_default_registry,
    register_default_engines,
)
from BP_Libs.SearchLib.evaluator import SearchStats
from BP_Libs.SearchLib.search_engines import grid_outer_values, strip_outer_values, xcut_logs


def dummy_engine(sampler, size, step, outer=None, method=None):
    return iter([])


class TestSearchEngineRegistry(unittest.TestCase):
    """Test SearchEngineRegistry basic functionality."""

    def setUp(self):
        """Create a fresh registry for each test."""
        self.registry = SearchEngineRegistry()

    def test_registry_creation(self):
        self.assertEqual(self.registry.list_engines(), [])

    def test_register_engine(self):
        self.registry.register("dummy", dummy_engine, grid_outer_values, step=10)

        self.assertTrue(self.registry.has_engine("dummy"))
        self.assertIn("dummy", self.registry.list_engines())
        self.assertIs(self.registry.get_engine("dummy"), dummy_engine)

    def test_register_with_metadata(self):
        self.registry.register(
            "dummy",
            dummy_engine,
            grid_outer_values,
            step=25,
            description="A test engine",
            regions=3,
        )

        meta = self.registry.get_all_metadata()["dummy"]

        self.assertEqual(meta["description"], "A test engine")
        self.assertEqual(meta["step"], 25)
        self.assertEqual(meta["regions"], 3)

    def test_register_empty_name_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.register("  ", dummy_engine, grid_outer_values, step=10)

    def test_register_non_callable_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.register("bad", "not callable", grid_outer_values, step=10)

    def test_register_non_positive_step_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.register("bad", dummy_engine, grid_outer_values, step=0)

    def test_register_duplicate_raises_error(self):
        self.registry.register("dummy", dummy_engine, grid_outer_values, step=10)

        with self.assertRaises(RuntimeError):
            self.registry.register("dummy", dummy_engine, grid_outer_values, step=10)

    def test_unknown_engine_raises_error(self):
        self.registry.register("dummy", dummy_engine, grid_outer_values, step=10)

        with self.assertRaises(KeyError) as context:
            self.registry.get_engine("nope")

        self.assertIn("Available algorithms: dummy", str(context.exception))

    def test_outer_values_use_registered_step(self):
        self.registry.register("xcut", xcut_logs, strip_outer_values, step=10)

        self.assertEqual(list(self.registry.outer_values("xcut", 60)), [10, 20])
        self.assertEqual(list(self.registry.outer_values("xcut", 80, step=20)), [20])


class TestDefaultEngines(unittest.TestCase):
    """Test the built-in engines."""

    def setUp(self):
        self.registry = SearchEngineRegistry()
        register_default_engines(self.registry)

    def test_all_engines_registered(self):
        self.assertEqual(self.registry.list_engines(), ["rect", "x3y2", "x3y3", "xcut", "ycut"])

    def test_default_steps(self):
        steps = {name: meta["step"] for name, meta in self.registry.get_all_metadata().items()}

        self.assertEqual(steps, {"xcut": 10, "ycut": 10, "rect": 16, "x3y2": 40, "x3y3": 50})

    def test_run(self):
        sampler = TargetSampler.from_image(Image.new("RGBA", (50, 50), (255, 0, 0, 255)))
        stats = SearchStats()

        results = list(self.registry.run("xcut", sampler, size=50, stats=stats))

        self.assertEqual([scored.score for scored in results], [103])
        self.assertEqual(stats.evaluated, 1)

    def test_run_unknown_raises_error(self):
        sampler = TargetSampler.from_image(Image.new("RGBA", (50, 50)))

        with self.assertRaises(KeyError):
            self.registry.run("zigzag", sampler)


class TestDefaultRegistry(unittest.TestCase):
    """Test the global singleton."""

    def test_singleton(self):
        self.assertIs(get_default_registry(), get_default_registry())

    def test_has_default_engines(self):
        registry = get_default_registry()

        for name in ["xcut", "ycut", "rect", "x3y2", "x3y3"]:
            self.assertTrue(registry.has_engine(name))
