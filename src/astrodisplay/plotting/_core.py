"""Core plotting utilities for astrodisplay.

This module provides low-level utilities used by all plot functions:
- ensure_ax: Create or validate matplotlib axes
- add_colorbar: Add colorbar with astronomy defaults
- style_context: Context manager for style presets

All matplotlib imports are lazy (inside functions) to allow importing
this module even without matplotlib installed.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.cm import ScalarMappable
    from matplotlib.colorbar import Colorbar
    from matplotlib.figure import Figure, SubFigure


def ensure_ax(ax: Axes | None = None) -> tuple[Figure | SubFigure, Axes]:
    """Return (figure, axes), creating new ones if ax is None.

    Args:
        ax: Optional matplotlib Axes. If None, creates new figure and axes.

    Returns:
        Tuple of (Figure, Axes).

    Example:
        >>> fig, ax = ensure_ax()  # Creates new figure
        >>> fig, ax = ensure_ax(existing_ax)  # Uses existing axes
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots()
        return fig, ax
    return ax.figure, ax


def add_colorbar(
    mappable: ScalarMappable,
    ax: Axes,
    *,
    label: str = "",
    **kwargs: Any,
) -> Colorbar:
    """Add colorbar with astronomy defaults.

    No minor ticks, positioned to the right of the axes.

    Args:
        mappable: The matplotlib ScalarMappable (e.g., return from imshow).
        ax: The axes to attach the colorbar to.
        label: Colorbar label text.
        **kwargs: Additional arguments passed to figure.colorbar().

    Returns:
        The created Colorbar instance.
    """
    fig = ax.figure
    cbar = fig.colorbar(mappable, ax=ax, **kwargs)
    if label:
        cbar.set_label(label)
    cbar.ax.minorticks_off()
    return cbar


@contextmanager
def style_context(style: str = "default") -> Iterator[None]:
    """Context manager for applying a style preset temporarily.

    Applies matplotlib rcParams from the specified style preset, then
    reverts to the previous settings on exit.

    Args:
        style: Style preset name. One of "default", "paper", "presentation".

    Raises:
        ValueError: If style is not recognized.

    Example:
        >>> with style_context("paper"):
        ...     fig, ax = ensure_ax()
        ...     ax.imshow(image)
    """
    import matplotlib.pyplot as plt

    from ._styles import STYLES

    if style not in STYLES:
        valid_styles = ", ".join(sorted(STYLES.keys()))
        raise ValueError(f"Unknown style {style!r}. Valid styles: {valid_styles}")

    with plt.rc_context(STYLES[style]):
        yield
