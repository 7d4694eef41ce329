# terrain_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np


class AtlasCoordinate(NamedTuple):
    """Левый верхний пиксель тайла внутри атласа."""

    x: int
    y: int


class TileRegion(NamedTuple):
    """Прямоугольник в пикселях атласа (x, y, w, h)."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class TerrainSnapshot:
    """
    Один полный результат заполнения сетки, готовый к отрисовке.

    regions идут в порядке row-major. При регенерации создаётся новый
    снапшот, старый не изменяется.
    """

    regions: Tuple[TileRegion, ...]
    choices: Tuple[int, ...]
    grid_width: int
    grid_height: int
    tile_size: int

    @property
    def requested(self) -> int:
        return self.grid_width * self.grid_height

    @property
    def underfill(self) -> int:
        return self.requested - len(self.regions)

    @property
    def is_complete(self) -> bool:
        return self.underfill == 0

    def __len__(self) -> int:
        return len(self.regions)

    def as_array(self) -> np.ndarray:
        if not self.regions:
            return np.zeros((0, 4), dtype=np.int32)
        return np.asarray(self.regions, dtype=np.int32)
