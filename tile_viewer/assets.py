# tile_viewer/assets.py
from __future__ import annotations
import logging
import pathlib
from typing import Optional

import pygame

logger = logging.getLogger(__name__)


def resolve_atlas_path(atlas_path: str, assets_root: pathlib.Path) -> pathlib.Path:
    path = pathlib.Path(atlas_path)
    return path if path.is_absolute() else assets_root / path


def load_tileset(path: pathlib.Path | str) -> Optional[pygame.Surface]:
    """
    Загружает атлас. При ошибке пишет диагностику и возвращает None:
    генерация от картинки не зависит, просто рисовать будет нечего.
    """
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as e:
        logger.error("Failed to load tileset: %s (%s)", path, e)
        return None

    # convert_alpha требует открытого окна
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    logger.info("Tileset loaded: %s %s", path, surface.get_size())
    return surface
