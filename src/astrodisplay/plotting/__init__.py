"""Plotting utilities for astrodisplay.

matplotlib is a required dependency but is only imported when a plotting
function is called. Installs without it (e.g. `pip install --no-deps`)
get MissingOptionalDependencyError.

Example:
    >>> from astrodisplay.plotting import plot_velocity_image
    >>> ax = plot_velocity_image(dopplergram, vrange=20.0)

Style System:
    - "default": Balanced for interactive exploration (8x5 inches, 100 dpi)
    - "paper": Publication-ready (3.5x2.5 inches, 300 dpi)
    - "presentation": Large fonts for slides (10x6 inches, 150 dpi)
"""

from __future__ import annotations

import importlib.util

MATPLOTLIB_AVAILABLE = importlib.util.find_spec("matplotlib") is not None

__all__: list[str]

if MATPLOTLIB_AVAILABLE:
    from ._core import add_colorbar, ensure_ax, style_context
    from .images import plot_velocity_image
    from .palettes import plot_palette_legend, plot_rgb_table

    __all__ = [
        "MATPLOTLIB_AVAILABLE",
        "add_colorbar",
        "ensure_ax",
        "style_context",
        "plot_palette_legend",
        "plot_rgb_table",
        "plot_velocity_image",
    ]
else:
    __all__ = ["MATPLOTLIB_AVAILABLE"]
