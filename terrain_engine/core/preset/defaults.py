# ========================
# file: terrain_engine/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..constants import DEFAULT_REVERSE_HISTOGRAM, DEFAULT_WEIGHT_EPSILON

CURRENT_PRESET_VERSION = 1

DEFAULT_TERRAIN_PRESET: Dict[str, Any] = {
    "id": "terrain/grassland_default",
    "version": CURRENT_PRESET_VERSION,
    "seed": None,
    "grid": {"width": 16, "height": 16},
    "atlas": {"path": "tileset.png", "tile_size": 16},
    "render": {
        "screen_width": 960,
        "screen_height": 720,
        "draw_tile_width": 32,
        "draw_tile_height": 32,
        "window_title": "game1",
        "fps": 60,
    },
    "sampling": {
        "reverse_histogram": list(DEFAULT_REVERSE_HISTOGRAM),
        "strict": False,
        "epsilon": DEFAULT_WEIGHT_EPSILON,
    },
}
