# ========================
# file: terrain_engine/core/preset/__init__.py
# ========================
from .defaults import CURRENT_PRESET_VERSION, DEFAULT_TERRAIN_PRESET
from .errors import ConfigurationError, NotFoundError, PresetError, ValidationError
from .model import TerrainPreset
from .loader import load_preset, deep_merge
