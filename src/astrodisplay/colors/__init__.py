"""Color tables and palettes."""

from astrodisplay.colors.tables import (
    RGB_TABLE_NAMES,
    matplotlib_rgb_table,
    read_rgb_table,
    rgb_table_colormap,
    rgb_table_names,
)
from astrodisplay.colors.tol import (
    TolColor,
    TolPalette,
    color_tol,
    tol_palette,
    tol_palette_names,
)
from astrodisplay.colors.velocity import (
    MASK_INDEX,
    MISSING_INDEX,
    RAMP_END,
    RAMP_START,
    VelocityTable,
    plot_vel_rgb_table,
    scale_velocity,
    velocity_colormap,
    velocity_ramp,
    velocity_rgb,
)

__all__ = [
    # tables
    "RGB_TABLE_NAMES",
    "matplotlib_rgb_table",
    "read_rgb_table",
    "rgb_table_colormap",
    "rgb_table_names",
    # tol
    "TolColor",
    "TolPalette",
    "color_tol",
    "tol_palette",
    "tol_palette_names",
    # velocity
    "MASK_INDEX",
    "MISSING_INDEX",
    "RAMP_END",
    "RAMP_START",
    "VelocityTable",
    "plot_vel_rgb_table",
    "scale_velocity",
    "velocity_colormap",
    "velocity_ramp",
    "velocity_rgb",
]
