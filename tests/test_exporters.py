# ==============================================================================
# Файл: tests/test_exporters.py
# Назначение: Тесты сохранения снапшота в JSON и PNG.
# ==============================================================================
import json
import os
import tempfile
import unittest

from PIL import Image

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine.core.export import snapshot_to_dict, write_snapshot_json, write_snapshot_preview
from terrain_engine.core.preset import load_preset
from terrain_engine.core.utils.rng import RNG
from terrain_engine.world.layout import grid_origin
from terrain_engine.world.terrain_generator import TerrainGenerator


class TestJsonExport(unittest.TestCase):

    def test_write_and_read(self):
        preset = load_preset({"grid": {"width": 4, "height": 4}})
        generator = TerrainGenerator(preset, RNG(8))
        snapshot = generator.regenerate()

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "snap.json")
            write_snapshot_json(path, snapshot, seed=8, metrics=generator.last_metrics)
            self.assertFalse(os.path.exists(path + ".tmp"))
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)

        self.assertEqual(data["seed"], 8)
        self.assertEqual(data["grid"], {"width": 4, "height": 4})
        self.assertEqual(data["choices"], list(snapshot.choices))
        self.assertEqual(data["regions"], [list(r) for r in snapshot.regions])
        self.assertEqual(data["metrics"]["requested"], 16)

    def test_dict_without_metrics(self):
        preset = load_preset({"grid": {"width": 2, "height": 2}})
        snapshot = TerrainGenerator(preset, RNG(1)).regenerate()
        data = snapshot_to_dict(snapshot)
        self.assertIsNone(data["seed"])
        self.assertEqual(data["metrics"], {})
        self.assertEqual(data["underfill"], snapshot.underfill)


class TestPreviewExport(unittest.TestCase):

    def test_preview_uses_placement_law(self):
        # Атлас 80x64: клетка (0,0) красная, остальное зелёное
        atlas = Image.new("RGBA", (80, 64), (0, 255, 0, 255))
        atlas.paste((255, 0, 0, 255), (0, 0, 16, 16))

        preset = load_preset({
            "grid": {"width": 2, "height": 2},
            "render": {"screen_width": 200, "screen_height": 100},
            "sampling": {"reverse_histogram": [1.0]},
        })
        snapshot = TerrainGenerator(preset, RNG(4)).regenerate()
        self.assertTrue(all(c == 0 for c in snapshot.choices))

        with tempfile.TemporaryDirectory() as tmp:
            atlas_path = os.path.join(tmp, "tileset.png")
            atlas.save(atlas_path)
            out_path = os.path.join(tmp, "out", "preview.png")
            write_snapshot_preview(out_path, snapshot, atlas_path, preset)
            with Image.open(out_path) as img:
                img = img.convert("RGBA")
                self.assertEqual(img.size, (200, 100))
                ox, oy = grid_origin(200, 100, 2, 2, 32, 32)
                self.assertEqual(img.getpixel((0, 0)), (0, 0, 0, 255))
                for i in range(len(snapshot)):
                    cx = ox + (i % 2) * 32 + 16
                    cy = oy + (i // 2) * 32 + 16
                    self.assertEqual(img.getpixel((cx, cy)), (255, 0, 0, 255))


if __name__ == '__main__':
    unittest.main()
