# ========================
# file: terrain_engine/core/preset/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
import logging
from typing import Any, Dict, Union, Mapping

from .defaults import DEFAULT_TERRAIN_PRESET, CURRENT_PRESET_VERSION
from .model import TerrainPreset
from .registry import resolve_preset_path
from .validators import validate_dict
from ..utils.rng import seed_from_any

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_preset(
    source: Union[str, Dict[str, Any]], overrides: Mapping[str, Any] | None = None
) -> TerrainPreset:
    """Load a preset from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g., 'terrain/grassland_default'), or file path to JSON, or raw dict
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        TerrainPreset (immutable dataclass) ready for use
    """
    if isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            path = resolve_preset_path(source)
            data = _load_json_file(path)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path/id or dict")

    merged = deep_merge(DEFAULT_TERRAIN_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)
    merged["version"] = CURRENT_PRESET_VERSION

    validate_dict(merged)

    grid = merged["grid"]
    atlas = merged["atlas"]
    render = merged["render"]
    sampling = merged["sampling"]
    seed = merged.get("seed")

    preset = TerrainPreset(
        id=merged["id"],
        version=int(merged["version"]),
        grid_width=int(grid["width"]),
        grid_height=int(grid["height"]),
        atlas_path=str(atlas["path"]),
        atlas_tile_size=int(atlas["tile_size"]),
        screen_width=int(render["screen_width"]),
        screen_height=int(render["screen_height"]),
        draw_tile_width=int(render["draw_tile_width"]),
        draw_tile_height=int(render["draw_tile_height"]),
        window_title=str(render["window_title"]),
        fps=int(render["fps"]),
        reverse_histogram=tuple(float(w) for w in sampling["reverse_histogram"]),
        strict_weights=bool(sampling["strict"]),
        weight_epsilon=float(sampling["epsilon"]),
        seed=None if seed is None else seed_from_any(seed),
        raw=merged,
    )
    logger.debug(
        "Preset '%s' loaded: grid=%dx%d, categories=%d",
        preset.id, preset.grid_width, preset.grid_height, preset.category_count,
    )
    return preset
