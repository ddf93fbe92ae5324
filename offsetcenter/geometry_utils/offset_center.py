# moving a map center so a point shows up centered in the visible part of the viewport
import logging
from typing import NamedTuple

from offsetcenter.geometry_utils import pixel_scale as ps
from offsetcenter.useful_functs import validate_pos

logger = logging.getLogger(__name__)


class Coordinate(NamedTuple):
    latitude: float
    longitude: float


OCCLUSION_ARGS = [
    ('latitude', 'real'),
    ('longitude', 'real'),
    ('width_total', 'int'),
    ('height_total', 'int'),
    ('zoom_level', 'int'),
    ('width_occlusion_from_left', 'int'),
]

PIXEL_ARGS = [
    ('latitude', 'real'),
    ('longitude', 'real'),
    ('width_total', 'int'),
    ('height_total', 'int'),
    ('x_final', 'int'),
    ('y_final', 'int'),
    ('zoom_level', 'int'),
]


def get_pixels_offset(width_total, height_total, width_occlusion_from_left):
    # height is not used, only horizontal occlusions are handled
    current_center = int(width_total / 2)
    center_of_effective_area = int(width_total - width_occlusion_from_left) / 2

    return abs(current_center - center_of_effective_area)

def occlusion_degrees_offset(width_total, height_total, zoom_level, width_occlusion_from_left):
    #pixels we need to move the center
    pixels_offset = get_pixels_offset(width_total, height_total, width_occlusion_from_left)

    #pixels -> meters -> degrees
    meters_offset = pixels_offset * ps.meters_per_pixel_horizontal(zoom_level)
    degrees_offset = meters_offset / ps.meters_per_degree_horizontal()

    logger.debug('occlusion offset: %s px, %s deg', pixels_offset, degrees_offset)
    return degrees_offset

def pixel_degrees_offset(width_total, height_total, x_final, y_final, zoom_level):
    # returns (vertical, horizontal) degrees, x_final and y_final may be scalars or Series
    #where the point is drawn without any offset
    x_initial = int(width_total / 2)
    y_initial = int(height_total / 2)

    #horizontal
    pixels_offset_h = -(x_final - x_initial)
    meters_offset_h = pixels_offset_h * ps.meters_per_pixel_horizontal(zoom_level)
    degrees_offset_h = meters_offset_h / ps.meters_per_degree_horizontal()

    #vertical
    pixels_offset_v = -(y_final - y_initial)
    meters_offset_v = pixels_offset_v * ps.meters_per_pixel_vertical(zoom_level)
    degrees_offset_v = meters_offset_v / ps.meters_per_degree_vertical()

    return degrees_offset_v, degrees_offset_h

def offset_by_occlusion(latitude, longitude, width_total, height_total, zoom_level, width_occlusion_from_left):
    """Map center that shows (latitude, longitude) centered right of a left-bound occlusion."""
    error = validate_pos((latitude, longitude, width_total, height_total, zoom_level, width_occlusion_from_left),
                         OCCLUSION_ARGS)
    if error is not None:
        raise error

    degrees_offset = occlusion_degrees_offset(width_total, height_total, zoom_level, width_occlusion_from_left)
    return Coordinate(latitude, longitude - degrees_offset)

def offset_by_pixel(latitude, longitude, width_total, height_total, x_final, y_final, zoom_level):
    """Map center that draws (latitude, longitude) at pixel (x_final, y_final), origin bottom-left."""
    error = validate_pos((latitude, longitude, width_total, height_total, x_final, y_final, zoom_level),
                         PIXEL_ARGS)
    if error is not None:
        raise error

    degrees_offset_v, degrees_offset_h = pixel_degrees_offset(width_total, height_total, x_final, y_final, zoom_level)
    logger.debug('pixel offset: (%s, %s) deg', degrees_offset_v, degrees_offset_h)
    return Coordinate(latitude + degrees_offset_v, longitude + degrees_offset_h)

def offset_google_maps_center(*args):
    """Older name of offset_by_occlusion, positional arguments only."""
    error = validate_pos(args, OCCLUSION_ARGS)
    if error is not None:
        raise error
    return offset_by_occlusion(*args)
