# terrain_engine: weighted tile sampling and atlas decoding for grass terrain
from .core.types import AtlasCoordinate, TerrainSnapshot, TileRegion
from .world.terrain_generator import TerrainGenerator

__all__ = ["AtlasCoordinate", "TerrainSnapshot", "TileRegion", "TerrainGenerator"]
