"""Style presets and constants for plotting.

This module defines:
- STYLES: matplotlib rcParams presets ("default", "paper", "presentation")
- LABELS: Standard axis labels with units
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Style Presets
# =============================================================================

STYLES: dict[str, dict[str, Any]] = {
    "default": {
        "figure.figsize": (8, 5),
        "figure.dpi": 100,
        "font.size": 10,
        "axes.titlesize": 12,
        "axes.labelsize": 10,
        "xtick.labelsize": 9,
        "ytick.labelsize": 9,
        "legend.fontsize": 9,
        "axes.linewidth": 1.0,
        "axes.grid": False,
        # Images are pixel maps: no smoothing
        "image.interpolation": "nearest",
        "image.origin": "lower",
    },
    "paper": {
        # Publication-ready: small figures, high resolution
        "figure.figsize": (3.5, 2.5),
        "figure.dpi": 300,
        "font.size": 8,
        "axes.titlesize": 9,
        "axes.labelsize": 8,
        "xtick.labelsize": 7,
        "ytick.labelsize": 7,
        "legend.fontsize": 7,
        "axes.linewidth": 0.8,
        "axes.grid": False,
        "image.interpolation": "nearest",
        "image.origin": "lower",
        "font.family": "serif",
    },
    "presentation": {
        # Large figures for slides
        "figure.figsize": (10, 6),
        "figure.dpi": 150,
        "font.size": 14,
        "axes.titlesize": 18,
        "axes.labelsize": 14,
        "xtick.labelsize": 12,
        "ytick.labelsize": 12,
        "legend.fontsize": 12,
        "axes.linewidth": 1.5,
        "axes.grid": True,
        "grid.alpha": 0.3,
        "image.interpolation": "nearest",
        "image.origin": "lower",
    },
}


# =============================================================================
# Axis Labels
# =============================================================================

LABELS: dict[str, str] = {
    "velocity": "Velocity (km s$^{-1}$)",
    "wavelength": r"Wavelength ($\AA$)",
    "solar_x": "Solar-X (arcsec)",
    "solar_y": "Solar-Y (arcsec)",
    "pixel_x": "Column (pixels)",
    "pixel_y": "Row (pixels)",
    "table_index": "Table index",
}
