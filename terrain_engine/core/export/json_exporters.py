# ==============================================================================
# Файл: terrain_engine/core/export/json_exporters.py
# Назначение: Сохранение снапшота террейна в JSON.
# ==============================================================================
from __future__ import annotations
import dataclasses
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ..types import TerrainSnapshot

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    """Убеждается, что директория для файла существует."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _atomic_write_json(path: str, data: Any) -> None:
    """Атомарно записывает данные в JSON файл для предотвращения битых файлов."""
    _ensure_path_exists(path)
    tmp_path = path + ".tmp"

    def default_serializer(o):
        if dataclasses.is_dataclass(o):
            return dataclasses.asdict(o)
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2, default=default_serializer)
    os.replace(tmp_path, path)


def snapshot_to_dict(
        snapshot: TerrainSnapshot,
        seed: Optional[int] = None,
        metrics: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "seed": seed,
        "grid": {"width": snapshot.grid_width, "height": snapshot.grid_height},
        "tile_size": snapshot.tile_size,
        "requested": snapshot.requested,
        "underfill": snapshot.underfill,
        "choices": list(snapshot.choices),
        # NamedTuple -> [x, y, w, h]
        "regions": [list(r) for r in snapshot.regions],
        "metrics": metrics or {},
    }


def write_snapshot_json(
        path: str,
        snapshot: TerrainSnapshot,
        seed: Optional[int] = None,
        metrics: Optional[Dict[str, Any]] = None,
) -> None:
    _atomic_write_json(str(path), snapshot_to_dict(snapshot, seed, metrics))
    logger.info("Snapshot JSON saved: %s", path)
