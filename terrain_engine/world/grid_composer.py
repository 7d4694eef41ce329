# terrain_engine/world/grid_composer.py
from __future__ import annotations
from typing import Iterable, List

from ..core.errors import InvalidArgumentError
from ..core.types import AtlasCoordinate, TileRegion


class GridComposer:
    """Собирает координаты атласа в последовательность регионов TS x TS."""

    def __init__(self, tile_size: int):
        if tile_size <= 0:
            raise InvalidArgumentError(f"atlas tile size must be > 0, got {tile_size}")
        self.tile_size = tile_size

    def compose(self, coordinates: Iterable[AtlasCoordinate]) -> List[TileRegion]:
        ts = self.tile_size
        return [TileRegion(x, y, ts, ts) for x, y in coordinates]
