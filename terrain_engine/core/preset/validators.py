# ========================
# file: terrain_engine/core/preset/validators.py
# ========================
from __future__ import annotations
import math
import numbers
from typing import Any, Dict

from .errors import ValidationError
from ..constants import ATLAS_CAPACITY


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Validation for merged preset dicts.

    Raises ValidationError on the first failing check. The sum of the
    reverse histogram is NOT checked here (see sampling.check_weights).
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "Preset.id must be non-empty string",
    )
    seed = cfg.get("seed")
    _require(
        seed is None or _is_int(seed) or isinstance(seed, (str, bytes)),
        "seed must be null, int or string",
    )

    grid = dict(cfg.get("grid", {}))
    for key in ("width", "height"):
        _require(_is_int(grid.get(key)) and grid[key] > 0, f"grid.{key} must be int > 0")

    atlas = dict(cfg.get("atlas", {}))
    _require(
        isinstance(atlas.get("path"), str) and atlas["path"],
        "atlas.path must be non-empty string",
    )
    _require(
        _is_int(atlas.get("tile_size")) and atlas["tile_size"] > 0,
        "atlas.tile_size must be int > 0",
    )

    render = dict(cfg.get("render", {}))
    for key in ("screen_width", "screen_height", "draw_tile_width", "draw_tile_height", "fps"):
        _require(_is_int(render.get(key)) and render[key] > 0, f"render.{key} must be int > 0")
    _require(isinstance(render.get("window_title"), str), "render.window_title must be string")

    sampling = dict(cfg.get("sampling", {}))
    hist = sampling.get("reverse_histogram")
    _require(
        isinstance(hist, (list, tuple)) and len(hist) > 0,
        "sampling.reverse_histogram must be a non-empty list",
    )
    _require(
        len(hist) <= ATLAS_CAPACITY,
        f"sampling.reverse_histogram has {len(hist)} entries, atlas holds {ATLAS_CAPACITY}",
    )
    for i, w in enumerate(hist):
        _require(
            isinstance(w, numbers.Real) and not isinstance(w, bool),
            f"sampling.reverse_histogram[{i}] must be a number",
        )
        _require(math.isfinite(w) and w >= 0.0, f"sampling.reverse_histogram[{i}] must be finite and >= 0")
    _require(isinstance(sampling.get("strict"), bool), "sampling.strict must be bool")
    _require(
        isinstance(sampling.get("epsilon"), numbers.Real)
        and not isinstance(sampling["epsilon"], bool)
        and sampling["epsilon"] >= 0.0,
        "sampling.epsilon must be >= 0",
    )
