"""astrodisplay: thermal line widths, color tables and image axes for astronomy."""

from __future__ import annotations

from astrodisplay.colors import (
    color_tol,
    matplotlib_rgb_table,
    plot_vel_rgb_table,
    read_rgb_table,
    tol_palette,
)
from astrodisplay.config import DisplayConfig, get_config, set_config
from astrodisplay.errors import MissingOptionalDependencyError, UnknownNameError
from astrodisplay.image import AxisNonUniformWarning, axis_extent, image_fix_axis
from astrodisplay.spectral import (
    ion_mass,
    thermal_temperature,
    thermal_width,
    velocity_to_width,
    width_to_velocity,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # spectral
    "thermal_width",
    "thermal_temperature",
    "width_to_velocity",
    "velocity_to_width",
    "ion_mass",
    # colors
    "matplotlib_rgb_table",
    "read_rgb_table",
    "plot_vel_rgb_table",
    "color_tol",
    "tol_palette",
    # image
    "image_fix_axis",
    "axis_extent",
    "AxisNonUniformWarning",
    # config / errors
    "DisplayConfig",
    "get_config",
    "set_config",
    "MissingOptionalDependencyError",
    "UnknownNameError",
]
