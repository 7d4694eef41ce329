# Файл: run_tile_viewer.py
from __future__ import annotations
import sys
import time
import logging
import pathlib
import traceback

import pygame
from PIL import UnidentifiedImageError

from terrain_engine.setup_logging import setup_logging
from terrain_engine.core.preset import load_preset
from terrain_engine.core.export import write_snapshot_json, write_snapshot_preview
from terrain_engine.world.terrain_generator import TerrainGenerator

from tile_viewer.assets import load_tileset, resolve_atlas_path
from tile_viewer.config import (
    ARTIFACTS_ROOT, ASSETS_ROOT, FATAL_ERROR_WAIT_MS, LOG_DIR, PRESET_ID,
)
from tile_viewer.controls import (
    SIGNAL_EXIT, SIGNAL_EXPORT, SIGNAL_REGENERATE, signal_for_event,
)
from tile_viewer.renderer import TileRenderer


logger = logging.getLogger("tile_viewer")


def export_snapshot(
        generator: TerrainGenerator,
        atlas_path: pathlib.Path,
        out_dir: pathlib.Path | None = None,
) -> None:
    """Сохраняет JSON и PNG-превью снапшота. Ошибки только логируются."""
    if generator.snapshot is None:
        return
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_dir = out_dir if out_dir is not None else ARTIFACTS_ROOT / "snapshots"

    json_path = out_dir / f"terrain_{stamp}.json"
    try:
        write_snapshot_json(
            str(json_path),
            generator.snapshot, seed=generator.seed, metrics=generator.last_metrics,
        )
    except OSError as e:
        logger.error("Snapshot JSON export failed: %s (%s)", json_path, e)

    if not atlas_path.exists():
        logger.warning("Preview skipped, atlas not found: %s", atlas_path)
        return

    png_path = out_dir / f"terrain_{stamp}.png"
    try:
        write_snapshot_preview(
            str(png_path), generator.snapshot, str(atlas_path), generator.preset,
        )
    except (OSError, UnidentifiedImageError) as e:
        logger.error("Snapshot preview export failed: %s (%s)", png_path, e)


def main():
    setup_logging(log_dir=LOG_DIR)
    preset_source = sys.argv[1] if len(sys.argv) > 1 else PRESET_ID
    preset = load_preset(preset_source)

    generator = TerrainGenerator(preset)
    logger.info("--- Terrain seed: %s ---", generator.seed)
    generator.regenerate()

    pygame.init()
    screen = pygame.display.set_mode((preset.screen_width, preset.screen_height))
    pygame.display.set_caption(preset.window_title)
    clock = pygame.time.Clock()

    atlas_path = resolve_atlas_path(preset.atlas_path, ASSETS_ROOT)
    tileset = load_tileset(atlas_path)
    renderer = TileRenderer(screen, preset, tileset)

    running = True
    while running:
        try:
            clock.tick(preset.fps)

            # --- Обработка событий ---
            for event in pygame.event.get():
                signal = signal_for_event(event)
                if signal == SIGNAL_EXIT:
                    running = False
                elif signal == SIGNAL_REGENERATE:
                    generator.regenerate()
                elif signal == SIGNAL_EXPORT:
                    export_snapshot(generator, atlas_path)

            # Отрисовка
            renderer.draw_snapshot(generator.snapshot)
            renderer.draw_status(generator.snapshot, generator.seed)
            renderer.draw_error_banner()

            pygame.display.flip()

        except Exception as e:
            error_msg = f"FATAL ERROR: {type(e).__name__}"
            logger.error("%s: %s\n%s", error_msg, e, traceback.format_exc())
            renderer.set_error(error_msg)
            renderer.draw_error_banner()
            pygame.display.flip()
            pygame.time.wait(FATAL_ERROR_WAIT_MS)
            running = False

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
