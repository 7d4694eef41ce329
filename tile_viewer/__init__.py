# tile_viewer: pygame window around terrain_engine
