# tile_viewer/renderer.py
from __future__ import annotations
from typing import List, Optional, Tuple

import pygame

from terrain_engine.core.preset.model import TerrainPreset
from terrain_engine.core.types import TerrainSnapshot
from terrain_engine.world.layout import grid_destinations
from .config import BACKGROUND_COLOR, STATUS_TEXT_COLOR


class TileRenderer:
    def __init__(self, screen: pygame.Surface, preset: TerrainPreset,
                 tileset: Optional[pygame.Surface]):
        self.screen = screen
        self.preset = preset
        self.font = pygame.font.Font(None, 20)
        self.error_message: Optional[str] = None

        # Масштаб атлас -> экран, тайл 16px рисуется как 32px
        self.scale_x = preset.draw_tile_width / preset.atlas_tile_size
        self.scale_y = preset.draw_tile_height / preset.atlas_tile_size
        self.tileset = self._scale_tileset(tileset) if tileset is not None else None

    def _scale_tileset(self, tileset: pygame.Surface) -> pygame.Surface:
        w, h = tileset.get_size()
        size = (round(w * self.scale_x), round(h * self.scale_y))
        if size == (w, h):
            return tileset
        return pygame.transform.scale(tileset, size)

    def _scaled_area(self, region) -> pygame.Rect:
        return pygame.Rect(
            round(region.x * self.scale_x),
            round(region.y * self.scale_y),
            self.preset.draw_tile_width,
            self.preset.draw_tile_height,
        )

    def destinations(self, snapshot: TerrainSnapshot) -> List[Tuple[int, int]]:
        p = self.preset
        return grid_destinations(
            len(snapshot),
            p.screen_width, p.screen_height,
            snapshot.grid_width, snapshot.grid_height,
            p.draw_tile_width, p.draw_tile_height,
        )

    def draw_snapshot(self, snapshot: Optional[TerrainSnapshot]) -> int:
        """Рисует снапшот, возвращает число нарисованных тайлов."""
        self.screen.fill(BACKGROUND_COLOR)
        if self.tileset is None or snapshot is None:
            return 0

        drawn = 0
        for region, dest in zip(snapshot.regions, self.destinations(snapshot)):
            self.screen.blit(self.tileset, dest, self._scaled_area(region))
            drawn += 1
        return drawn

    def set_error(self, message: str):
        self.error_message = message

    def draw_error_banner(self):
        if not self.error_message: return
        font = pygame.font.Font(None, 26)
        text_surf = font.render(self.error_message, True, (255, 255, 0))
        bg_rect = text_surf.get_rect(center=(self.preset.screen_width / 2, 30)).inflate(20, 10)
        pygame.draw.rect(self.screen, (100, 0, 0), bg_rect)
        pygame.draw.rect(self.screen, (255, 255, 0), bg_rect, 2)
        self.screen.blit(text_surf, text_surf.get_rect(center=bg_rect.center))

    def draw_status(self, snapshot: Optional[TerrainSnapshot], seed: Optional[int]):
        filled = len(snapshot) if snapshot is not None else 0
        requested = snapshot.requested if snapshot is not None else 0
        status_text = (
            f"Seed: {seed if seed is not None else '-'} | "
            f"Tiles: {filled}/{requested} | "
            f"Underfill: {requested - filled} | "
            f"Atlas: {'ok' if self.tileset is not None else 'missing'} | "
            f"[R] regenerate  [F12] export  [Esc] quit"
        )
        text_surface = self.font.render(status_text, True, STATUS_TEXT_COLOR)
        bar_height = text_surface.get_height() + 8
        s = pygame.Surface((self.preset.screen_width, bar_height), pygame.SRCALPHA)
        s.fill((0, 0, 0, 180))
        self.screen.blit(s, (0, self.preset.screen_height - bar_height))
        self.screen.blit(text_surface, (5, self.preset.screen_height - bar_height + 4))
