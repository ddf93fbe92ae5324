# Earth constants
RADIUS_OF_EARTH = 6378100  # mean radius in meters, sphere

# Map tiles
TILE_SIZE = 256  # pixels per tile side at zoom 0
