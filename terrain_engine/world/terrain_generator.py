# ==============================================================================
# Файл: terrain_engine/world/terrain_generator.py
# Назначение: Полный цикл генерации снапшота:
#             выборки -> категории -> координаты атласа -> регионы.
# ==============================================================================
from __future__ import annotations
import logging
import time
from typing import Optional

from ..algorithms.sampling import UniformSampler, WeightedSelector
from ..core.preset.model import TerrainPreset
from ..core.types import TerrainSnapshot
from ..core.utils.metrics import compute_snapshot_metrics
from ..core.utils.rng import RNG, seed_from_time
from .atlas import AtlasDecoder
from .grid_composer import GridComposer

logger = logging.getLogger(__name__)


class TerrainGenerator:
    """
    Владеет генератором случайных чисел и текущим снапшотом.

    regenerate() всегда строит новый снапшот целиком и только потом
    подменяет ссылку self.snapshot.
    """

    def __init__(self, preset: TerrainPreset, rng: Optional[RNG] = None):
        self.preset = preset
        if rng is None:
            self.seed = preset.seed if preset.seed is not None else seed_from_time()
            rng = RNG(self.seed)
        else:
            self.seed = None
        self.rng = rng

        self.sampler = UniformSampler(rng)
        self.selector = WeightedSelector(
            self.sampler, strict=preset.strict_weights, epsilon=preset.weight_epsilon
        )
        self.decoder = AtlasDecoder(preset.atlas_tile_size)
        self.composer = GridComposer(preset.atlas_tile_size)

        self.snapshot: Optional[TerrainSnapshot] = None
        self.last_metrics: dict = {}

    def regenerate(self) -> TerrainSnapshot:
        t_start = time.perf_counter()
        p = self.preset

        choices = self.selector.select(p.cell_count, p.reverse_histogram)
        coords = self.decoder.decode(choices)
        regions = self.composer.compose(coords)

        snapshot = TerrainSnapshot(
            regions=tuple(regions),
            choices=tuple(choices),
            grid_width=p.grid_width,
            grid_height=p.grid_height,
            tile_size=p.atlas_tile_size,
        )
        self.snapshot = snapshot
        self.last_metrics = compute_snapshot_metrics(snapshot, p.category_count)

        logger.info(
            "Terrain regenerated in %.2f ms: %d/%d tiles, kinds=%s",
            (time.perf_counter() - t_start) * 1000,
            len(snapshot), snapshot.requested, self.last_metrics["kinds"],
        )
        if not snapshot.is_complete:
            logger.warning("Snapshot is short by %d tiles", snapshot.underfill)
        return snapshot
