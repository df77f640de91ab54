"""Palette and lookup-table previews."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from astrodisplay.colors.tables import matplotlib_rgb_table, rgb_table_names
from astrodisplay.colors.tol import TolPalette, tol_palette

from ._core import ensure_ax, style_context
from ._styles import LABELS

if TYPE_CHECKING:
    from matplotlib.axes import Axes


def plot_palette_legend(
    palette: str | TolPalette,
    *,
    ax: Axes | None = None,
    style: str = "default",
) -> Axes:
    """Draw one labelled swatch per palette color.

    The bad-data color, when the palette defines one, is drawn last and
    labelled "bad".

    Args:
        palette: Palette name or TolPalette.
        ax: Axes to draw on; a new figure is created if None.
        style: Style preset name.

    Returns:
        The matplotlib Axes.
    """
    from matplotlib.patches import Rectangle

    pal = palette if isinstance(palette, TolPalette) else tol_palette(palette)
    swatches = list(pal.colors)
    if pal.bad is not None:
        swatches.append(pal.bad)

    with style_context(style):
        _, ax = ensure_ax(ax)
        for i, color in enumerate(swatches):
            y = len(swatches) - 1 - i
            ax.add_patch(
                Rectangle((0.0, y + 0.1), 1.0, 0.8, facecolor=color.hex, edgecolor="0.3")
            )
            ax.text(1.2, y + 0.5, f"{color.name}  {color.hex}", va="center")
        ax.set_xlim(0.0, 4.0)
        ax.set_ylim(0.0, len(swatches))
        ax.set_axis_off()
        ax.set_title(f"{pal.name} ({pal.kind})")
    return ax


def plot_rgb_table(
    table: Any = 3,
    *,
    ax: Axes | None = None,
    style: str = "default",
) -> Axes:
    """Display a 256-entry lookup table as a horizontal strip.

    Args:
        table: Table name/index for ``matplotlib_rgb_table`` or an (N, 3)
            uint8 array.
        ax: Axes to draw on; a new figure is created if None.
        style: Style preset name.
    """
    if isinstance(table, (str, int, np.integer)):
        rgb = matplotlib_rgb_table(table)
        title = table if isinstance(table, str) else rgb_table_names()[int(table)]
    else:
        rgb = np.asarray(table, dtype=np.uint8)
        title = "custom"
    if rgb.ndim != 2 or rgb.shape[1] != 3:
        raise ValueError(f"RGB table must have shape (N, 3), got {rgb.shape}")

    with style_context(style):
        _, ax = ensure_ax(ax)
        ax.imshow(
            rgb[np.newaxis, :, :],
            aspect="auto",
            extent=(-0.5, rgb.shape[0] - 0.5, 0.0, 1.0),
        )
        ax.set_yticks([])
        ax.set_xlabel(LABELS["table_index"])
        ax.set_title(str(title))
    return ax
