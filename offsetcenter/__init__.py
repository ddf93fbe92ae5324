from offsetcenter.constants import RADIUS_OF_EARTH, TILE_SIZE
from offsetcenter.useful_functs import InvalidArgument
from offsetcenter.geometry_utils.offset_center import (
    Coordinate,
    offset_by_occlusion,
    offset_by_pixel,
    offset_google_maps_center,
)
from offsetcenter.pipeline_utils.offset_frame import offset_frame_by_occlusion, offset_frame_by_pixel
from offsetcenter.pipeline_utils.viewport_offsetter import viewport_offsetter
