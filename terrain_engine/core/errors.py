# ========================
# file: terrain_engine/core/errors.py
# ========================
class TerrainError(Exception):
    """Base error for the terrain core."""


class InvalidArgumentError(TerrainError, ValueError):
    """Raised when a core operation gets an argument outside its domain."""
