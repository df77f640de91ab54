"""Image display through the velocity color table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from astrodisplay.colors.velocity import plot_vel_rgb_table, velocity_colormap
from astrodisplay.image.axis import axis_extent

from ._core import add_colorbar, ensure_ax, style_context
from ._styles import LABELS

if TYPE_CHECKING:
    from matplotlib.axes import Axes

logger = logging.getLogger(__name__)


def plot_velocity_image(
    image: Any,
    x: Any | None = None,
    y: Any | None = None,
    *,
    vrange: float | None = None,
    missing: float | None = None,
    mask: Any | None = None,
    ax: Axes | None = None,
    colorbar: bool = True,
    xlabel: str | None = None,
    ylabel: str | None = None,
    style: str = "default",
) -> Axes:
    """Display a 2-D velocity map with the blue-white-red table.

    The image is rescaled with ``plot_vel_rgb_table`` and drawn as RGB, so
    missing and masked pixels keep their sentinel colors. Pixel axes are
    regularized with ``image_fix_axis`` to build the image extent.

    Args:
        image: 2-D velocity array (ny, nx), km/s.
        x: Optional pixel-centre positions along columns (length nx).
        y: Optional pixel-centre positions along rows (length ny).
        vrange: Velocity at the ends of the ramp; defaults to max |v|.
        missing: Extra value flagging missing data.
        mask: Boolean array of pixels to draw in the mask color.
        ax: Axes to draw on; a new figure is created if None.
        colorbar: Add a velocity colorbar.
        xlabel: X axis label (defaults to pixel columns or solar-x).
        ylabel: Y axis label.
        style: Style preset name.

    Returns:
        The matplotlib Axes.

    Raises:
        ValueError: If the image is not 2-D or an axis length mismatches.
    """
    from matplotlib.cm import ScalarMappable
    from matplotlib.colors import Normalize

    data = np.asarray(image, dtype=float)
    if data.ndim != 2:
        raise ValueError(f"image must be 2-D, got shape {data.shape}")
    ny, nx = data.shape

    x = np.arange(nx, dtype=float) if x is None else np.asarray(x, dtype=float)
    y = np.arange(ny, dtype=float) if y is None else np.asarray(y, dtype=float)
    if x.shape != (nx,) or y.shape != (ny,):
        raise ValueError(
            f"axis lengths ({x.size}, {y.size}) do not match image shape ({ny}, {nx})"
        )
    if nx < 2 or ny < 2:
        raise ValueError("image needs at least 2 pixels along each axis")

    table = plot_vel_rgb_table(data, vrange=vrange, missing=missing, mask=mask)
    left, right = axis_extent(x)
    bottom, top = axis_extent(y)
    logger.debug(f"Velocity image {ny}x{nx}, vrange +/-{table.vrange:.3g}")

    with style_context(style):
        _, ax = ensure_ax(ax)
        ax.imshow(
            table.to_rgb_image(),
            extent=(left, right, bottom, top),
            origin="lower",
            interpolation="nearest",
            aspect="auto",
        )
        ax.set_xlabel(xlabel or LABELS["pixel_x"])
        ax.set_ylabel(ylabel or LABELS["pixel_y"])
        if colorbar:
            mappable = ScalarMappable(
                norm=Normalize(-table.vrange, table.vrange), cmap=velocity_colormap()
            )
            add_colorbar(mappable, ax, label=LABELS["velocity"])
    return ax
