# ==============================================================================
# Файл: terrain_engine/core/export/image_exporters.py
# Назначение: Превью снапшота в PNG без окна (Pillow).
# ==============================================================================
from __future__ import annotations
import logging
from pathlib import Path
from typing import Tuple

from PIL import Image

from ...world.layout import grid_destinations
from ..preset.model import TerrainPreset
from ..types import TerrainSnapshot

logger = logging.getLogger(__name__)

BACKGROUND_RGBA: Tuple[int, int, int, int] = (0, 0, 0, 255)


def write_snapshot_preview(
        path: str,
        snapshot: TerrainSnapshot,
        atlas_path: str,
        preset: TerrainPreset,
) -> None:
    """
    Рисует снапшот так же, как окно: тайлы атласа масштабируются до
    draw_tile_width x draw_tile_height и ставятся по той же сетке.
    """
    canvas = Image.new("RGBA", (preset.screen_width, preset.screen_height), BACKGROUND_RGBA)
    draw_size = (preset.draw_tile_width, preset.draw_tile_height)

    destinations = grid_destinations(
        len(snapshot),
        preset.screen_width, preset.screen_height,
        snapshot.grid_width, snapshot.grid_height,
        preset.draw_tile_width, preset.draw_tile_height,
    )

    with Image.open(atlas_path) as src:
        atlas = src.convert("RGBA")

    # Один тайл атласа масштабируется один раз на все его повторы
    tile_cache = {}
    for region, dest in zip(snapshot.regions, destinations):
        tile = tile_cache.get(region)
        if tile is None:
            box = (region.x, region.y, region.x + region.width, region.y + region.height)
            tile = atlas.crop(box).resize(draw_size, Image.NEAREST)
            tile_cache[region] = tile
        canvas.paste(tile, dest, tile)

    Path(path).parent.mkdir(parents=True, exist_ok=True)
    canvas.save(path)
    logger.info("Snapshot preview saved: %s (%d tiles)", path, len(snapshot))
