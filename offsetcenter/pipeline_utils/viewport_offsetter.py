import numpy as np

from offsetcenter.geometry_utils import offset_center as oc
from offsetcenter.pipeline_utils import offset_frame
from offsetcenter.useful_functs import validate_pos

VIEWPORT_ARGS = [
    ('width_total', 'int'),
    ('height_total', 'int'),
    ('zoom_level', 'int'),
    ('width_occlusion_from_left', 'int'),
]


class viewport_offsetter:
    """
    One map viewport (size, zoom and left occlusion) applied to many points.
    """

    def __init__(self, width_total, height_total, zoom_level, width_occlusion_from_left = 0):

        error = validate_pos((width_total, height_total, zoom_level, width_occlusion_from_left), VIEWPORT_ARGS)
        if error is not None:
            raise error

        #Viewport settings.
        self.width_total = width_total
        self.height_total = height_total
        self.zoom_level = zoom_level
        self.width_occlusion_from_left = width_occlusion_from_left

    def offset(self, latitude, longitude):
        return oc.offset_by_occlusion(latitude, longitude, self.width_total, self.height_total,
                                      self.zoom_level, self.width_occlusion_from_left)

    def offset_to_pixel(self, latitude, longitude, x_final, y_final):
        return oc.offset_by_pixel(latitude, longitude, self.width_total, self.height_total,
                                  x_final, y_final, self.zoom_level)

    def offset_many(self, coords):
        """
        Offsets an iterable of (latitude, longitude) pairs, returns an array
        with one (latitude, longitude) row per pair.
        """
        result = [self.offset(lat, lon) for lat, lon in coords]
        return np.array(result, dtype = float).reshape(len(result), 2)

    def offset_frame(self, df, lat_col = 'latitude', lon_col = 'longitude'):
        return offset_frame.offset_frame_by_occlusion(df, self.width_total, self.height_total, self.zoom_level,
                                                      self.width_occlusion_from_left, lat_col, lon_col)

    def offset_frame_to_pixels(self, df, x_col = 'x', y_col = 'y', lat_col = 'latitude', lon_col = 'longitude'):
        return offset_frame.offset_frame_by_pixel(df, self.width_total, self.height_total, self.zoom_level,
                                                  x_col, y_col, lat_col, lon_col)
