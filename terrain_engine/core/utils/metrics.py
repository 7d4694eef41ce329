# terrain_engine/core/utils/metrics.py
from __future__ import annotations
from typing import Any, Dict

import numpy as np

from .. import constants as const
from ..types import TerrainSnapshot


def compute_snapshot_metrics(snapshot: TerrainSnapshot, category_count: int) -> Dict[str, Any]:
    """
    Считает, сколько клеток досталось каждой категории и каждому виду тайла.
    Доли считаются от запрошенного числа клеток, поэтому при недоборе
    их сумма меньше 1.
    """
    requested = snapshot.requested
    choices = np.asarray(snapshot.choices, dtype=np.int64)
    counts = np.bincount(choices, minlength=category_count) if choices.size else np.zeros(
        category_count, dtype=np.int64
    )
    fractions = counts / requested if requested else np.zeros(len(counts), dtype=np.float64)

    kind_counts: Dict[str, int] = {}
    for category, c in enumerate(counts):
        kind = const.CATEGORY_TO_KIND.get(category, f"category_{category}")
        kind_counts[kind] = kind_counts.get(kind, 0) + int(c)

    return {
        "requested": requested,
        "filled": len(snapshot),
        "underfill": snapshot.underfill,
        "counts": [int(c) for c in counts],
        "fractions": [float(f) for f in fractions],
        "kinds": kind_counts,
    }
