"""Image display helpers."""

from astrodisplay.image.axis import (
    AxisNonUniformWarning,
    axis_extent,
    axis_nonuniformity,
    image_fix_axis,
)

__all__ = ["AxisNonUniformWarning", "axis_extent", "axis_nonuniformity", "image_fix_axis"]
