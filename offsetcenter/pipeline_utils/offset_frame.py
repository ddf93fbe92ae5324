import logging
import numpy as np
import pandas as pd

from offsetcenter.geometry_utils import offset_center as oc
from offsetcenter.useful_functs import InvalidArgument, validate_pos

logger = logging.getLogger(__name__)


def check_columns(df, numeric_cols = (), integer_cols = ()):
    for col in list(numeric_cols) + list(integer_cols):
        if col not in df.columns:
            raise InvalidArgument("Column '%s' is missing" % col, name = col)
    for col in numeric_cols:
        if not pd.api.types.is_numeric_dtype(df[col]) or pd.api.types.is_bool_dtype(df[col]):
            raise InvalidArgument("Column '%s' is not numeric" % col, name = col)
        # NaN marks a missing coordinate, inf is rejected like in the scalar functions
        if np.isinf(df[col].to_numpy(dtype = float, na_value = np.nan)).any():
            raise InvalidArgument("Column '%s' has non finite values" % col, name = col)
    for col in integer_cols:
        if not pd.api.types.is_integer_dtype(df[col]) or pd.api.types.is_unsigned_integer_dtype(df[col]):
            raise InvalidArgument("Column '%s' is not a signed integer column" % col, name = col)

def offset_frame_by_occlusion(df, width_total, height_total, zoom_level, width_occlusion_from_left,
                              lat_col = 'latitude', lon_col = 'longitude'):
    """
    Copy of df with lon_col shifted like offset_by_occlusion, for every row.
    Latitudes are left as they are and missing coordinates stay missing.
    """
    error = validate_pos((width_total, height_total, zoom_level, width_occlusion_from_left),
                         oc.OCCLUSION_ARGS[2:])
    if error is not None:
        raise error
    check_columns(df, numeric_cols = [lat_col, lon_col])

    df = df.copy()
    degrees_offset = oc.occlusion_degrees_offset(width_total, height_total, zoom_level, width_occlusion_from_left)
    df[lon_col] = df[lon_col] - degrees_offset

    logger.info('The number of rows offset by occlusion is: %d', int(df[lon_col].notnull().sum()))
    return df

def offset_frame_by_pixel(df, width_total, height_total, zoom_level, x_col = 'x', y_col = 'y',
                          lat_col = 'latitude', lon_col = 'longitude'):
    """
    Copy of df with lat_col and lon_col shifted like offset_by_pixel, each row
    using its own target pixel from x_col and y_col.
    """
    error = validate_pos((width_total, height_total, zoom_level),
                         [oc.PIXEL_ARGS[2], oc.PIXEL_ARGS[3], oc.PIXEL_ARGS[6]])
    if error is not None:
        raise error
    check_columns(df, numeric_cols = [lat_col, lon_col], integer_cols = [x_col, y_col])

    df = df.copy()
    degrees_offset_v, degrees_offset_h = oc.pixel_degrees_offset(width_total, height_total,
                                                                 df[x_col], df[y_col], zoom_level)
    df[lat_col] = df[lat_col] + degrees_offset_v
    df[lon_col] = df[lon_col] + degrees_offset_h

    logger.info('The number of rows offset by pixel is: %d',
                int((df[lat_col].notnull() & df[lon_col].notnull()).sum()))
    return df
