# scale factors of the mercator tile grid at a given zoom level
import math

from offsetcenter.constants import RADIUS_OF_EARTH, TILE_SIZE


def tile_grid_pixel_count(zoom_level):
    # pixels spanned by the whole world along one axis
    return TILE_SIZE * 2**int(zoom_level)

def _per_pixel(meters, zoom_level):
    #meters / (TILE_SIZE * 2**zoom), 0.0 past the top zoom levels and inf below the bottom ones
    try:
        return math.ldexp(meters / TILE_SIZE, -int(zoom_level))
    except OverflowError:
        return math.inf

def meters_per_pixel_horizontal(zoom_level):
    return _per_pixel(2 * math.pi * RADIUS_OF_EARTH, zoom_level)

def meters_per_degree_horizontal():
    return (2 * math.pi * RADIUS_OF_EARTH) / 360

# half circumference on the vertical axis, so a vertical pixel is half as long
# as a horizontal one while a degree has the same length on both axes
def meters_per_pixel_vertical(zoom_level):
    return _per_pixel(math.pi * RADIUS_OF_EARTH, zoom_level)

def meters_per_degree_vertical():
    return (math.pi * RADIUS_OF_EARTH) / 180
