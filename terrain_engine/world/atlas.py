# ==============================================================================
# Файл: terrain_engine/world/atlas.py
# Назначение: Перевод индекса категории в координаты тайла в атласе.
# ==============================================================================
from __future__ import annotations
import numbers
from typing import Iterable, List, Sequence, Tuple

from ..core.constants import ATLAS_CELLS
from ..core.errors import InvalidArgumentError
from ..core.types import AtlasCoordinate


class AtlasDecoder:
    """
    Декодер индексов для атласа с фиксированной раскладкой.

    Таблица координат строится один раз в конструкторе из ATLAS_CELLS
    (см. core/constants.py) и размера тайла атласа.
    """

    def __init__(self, tile_size: int, cells: Sequence[Tuple[int, int]] = ATLAS_CELLS):
        if tile_size <= 0:
            raise InvalidArgumentError(f"atlas tile size must be > 0, got {tile_size}")
        self.tile_size = tile_size
        self._table: Tuple[AtlasCoordinate, ...] = tuple(
            AtlasCoordinate(col * tile_size, row * tile_size) for col, row in cells
        )

    @property
    def capacity(self) -> int:
        return len(self._table)

    def decode_one(self, index: int) -> AtlasCoordinate:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise InvalidArgumentError(f"category index must be int, got {index!r}")
        if not 0 <= index < len(self._table):
            raise InvalidArgumentError(
                f"category index {index} is outside the atlas (0..{len(self._table) - 1})"
            )
        return self._table[int(index)]

    def decode(self, choices: Iterable[int]) -> List[AtlasCoordinate]:
        return [self.decode_one(c) for c in choices]
