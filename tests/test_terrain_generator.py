# ==============================================================================
# Файл: tests/test_terrain_generator.py
# Назначение: Тесты полного цикла генерации снапшота.
# ==============================================================================
import unittest
from unittest import mock

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine.algorithms.sampling import UniformSampler
from terrain_engine.core.preset import ConfigurationError, load_preset
from terrain_engine.core.types import TerrainSnapshot
from terrain_engine.core.utils.metrics import compute_snapshot_metrics
from terrain_engine.core.utils.rng import RNG
from terrain_engine.world.terrain_generator import TerrainGenerator


class TestTerrainGenerator(unittest.TestCase):

    def setUp(self):
        self.preset = load_preset({})

    def test_full_grid_from_default_preset(self):
        generator = TerrainGenerator(self.preset, RNG(2024))
        snapshot = generator.regenerate()

        self.assertIsInstance(snapshot, TerrainSnapshot)
        self.assertIs(generator.snapshot, snapshot)
        self.assertEqual(snapshot.requested, 256)
        self.assertLessEqual(len(snapshot), 256)
        self.assertEqual(len(snapshot.choices), len(snapshot.regions))
        for region in snapshot.regions:
            self.assertEqual((region.width, region.height), (16, 16))

    def test_same_samples_same_snapshot(self):
        """Два вызова с одинаковыми выборками дают одинаковые снапшоты."""
        samples = [(i % 97) / 97.0 for i in range(256)]
        generator = TerrainGenerator(self.preset, RNG(0))
        with mock.patch.object(UniformSampler, "generate", return_value=list(samples)):
            first = generator.regenerate()
        with mock.patch.object(UniformSampler, "generate", return_value=list(samples)):
            second = generator.regenerate()

        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        self.assertIs(generator.snapshot, second)

    def test_same_seed_same_snapshot(self):
        a = TerrainGenerator(self.preset, RNG(99)).regenerate()
        b = TerrainGenerator(self.preset, RNG(99)).regenerate()
        self.assertEqual(a, b)

    def test_regenerate_replaces_snapshot(self):
        generator = TerrainGenerator(self.preset, RNG(5))
        first = generator.regenerate()
        first_regions = first.regions
        second = generator.regenerate()
        self.assertIs(generator.snapshot, second)
        # старый снапшот не изменился
        self.assertIs(first.regions, first_regions)
        self.assertEqual(len(first.regions), len(first_regions))

    def test_preset_seed_is_used(self):
        preset = load_preset({"seed": 77})
        a = TerrainGenerator(preset)
        b = TerrainGenerator(preset)
        self.assertEqual(a.seed, 77)
        self.assertEqual(a.regenerate(), b.regenerate())

    def test_time_seed_when_preset_has_none(self):
        generator = TerrainGenerator(self.preset)
        self.assertIsInstance(generator.seed, int)

    def test_injected_rng_has_no_seed(self):
        self.assertIsNone(TerrainGenerator(self.preset, RNG(1)).seed)

    def test_empty_samples_give_empty_snapshot(self):
        generator = TerrainGenerator(self.preset, RNG(0))
        with mock.patch.object(UniformSampler, "generate", return_value=[]):
            with self.assertLogs("terrain_engine", level="WARNING"):
                snapshot = generator.regenerate()
        self.assertEqual(len(snapshot), 0)
        self.assertEqual(snapshot.underfill, 256)
        self.assertFalse(snapshot.is_complete)
        self.assertEqual(snapshot.as_array().shape, (0, 4))

    def test_underfilled_table(self):
        preset = load_preset({
            "grid": {"width": 4, "height": 4},
            "sampling": {"reverse_histogram": [0.25, 0.25]},
        })
        generator = TerrainGenerator(preset, RNG(3))
        with mock.patch.object(UniformSampler, "generate", return_value=[0.1, 0.3, 0.9] * 5 + [0.8]):
            with self.assertLogs("terrain_engine", level="WARNING") as cm:
                snapshot = generator.regenerate()
        # недобор сообщается одним предупреждением на регенерацию
        self.assertEqual(len(cm.records), 1)
        self.assertIn("short by 6 tiles", cm.output[0])
        self.assertEqual(snapshot.choices, (0, 1) * 5)
        self.assertEqual(snapshot.underfill, 6)
        self.assertEqual(generator.last_metrics["underfill"], 6)

    def test_strict_preset_rejects_bad_table(self):
        preset = load_preset({"sampling": {"reverse_histogram": [0.25, 0.25], "strict": True}})
        with self.assertRaises(ConfigurationError):
            TerrainGenerator(preset, RNG(3)).regenerate()

    def test_as_array(self):
        snapshot = TerrainGenerator(self.preset, RNG(11)).regenerate()
        arr = snapshot.as_array()
        self.assertEqual(arr.shape, (len(snapshot), 4))
        self.assertEqual(tuple(arr[0]), tuple(snapshot.regions[0]))


class TestSnapshotMetrics(unittest.TestCase):

    def test_counts(self):
        snapshot = TerrainSnapshot(
            regions=((0, 0, 16, 16),) * 3,
            choices=(0, 2, 2),
            grid_width=2, grid_height=2, tile_size=16,
        )
        metrics = compute_snapshot_metrics(snapshot, category_count=4)
        self.assertEqual(metrics["counts"], [1, 0, 2, 0])
        self.assertEqual(metrics["requested"], 4)
        self.assertEqual(metrics["filled"], 3)
        self.assertEqual(metrics["underfill"], 1)
        self.assertAlmostEqual(metrics["fractions"][2], 0.5)
        self.assertEqual(metrics["kinds"], {"grass": 1, "high_grass": 2})

    def test_empty(self):
        snapshot = TerrainSnapshot(regions=(), choices=(), grid_width=0, grid_height=0, tile_size=16)
        metrics = compute_snapshot_metrics(snapshot, category_count=3)
        self.assertEqual(metrics["counts"], [0, 0, 0])
        self.assertEqual(metrics["fractions"], [0.0, 0.0, 0.0])


if __name__ == '__main__':
    unittest.main()
