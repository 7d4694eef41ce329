# ==============================================================================
# Файл: terrain_engine/core/export/__init__.py
# Назначение: Точка входа в пакет для экспорта снапшотов.
# ==============================================================================
from __future__ import annotations

from .image_exporters import write_snapshot_preview
from .json_exporters import snapshot_to_dict, write_snapshot_json

__all__ = [
    "write_snapshot_preview",
    "snapshot_to_dict",
    "write_snapshot_json",
]
