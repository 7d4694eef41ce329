# terrain_engine/core/preset/model.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class TerrainPreset:
    id: str
    version: int

    grid_width: int
    grid_height: int

    atlas_path: str
    atlas_tile_size: int

    screen_width: int
    screen_height: int
    draw_tile_width: int
    draw_tile_height: int
    window_title: str
    fps: int

    reverse_histogram: Tuple[float, ...]
    strict_weights: bool = False
    weight_epsilon: float = 1e-6

    seed: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def cell_count(self) -> int:
        return self.grid_width * self.grid_height

    @property
    def category_count(self) -> int:
        return len(self.reverse_histogram)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "seed": self.seed,
            "grid": {"width": self.grid_width, "height": self.grid_height},
            "atlas": {"path": self.atlas_path, "tile_size": self.atlas_tile_size},
            "render": {
                "screen_width": self.screen_width,
                "screen_height": self.screen_height,
                "draw_tile_width": self.draw_tile_width,
                "draw_tile_height": self.draw_tile_height,
                "window_title": self.window_title,
                "fps": self.fps,
            },
            "sampling": {
                "reverse_histogram": list(self.reverse_histogram),
                "strict": bool(self.strict_weights),
                "epsilon": float(self.weight_epsilon),
            },
        }
