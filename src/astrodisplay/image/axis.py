"""Uniform pixel axes for image display.

Display routines place image pixels on a regular grid given by the lower
edge of each pixel. Measured axes (wavelength, solar-x, time) are pixel
centres and are often only approximately regular; ``image_fix_axis``
replaces them with a uniform grid and shifts it by half a bin.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any

import numpy as np

from astrodisplay.config import get_config

logger = logging.getLogger(__name__)


class AxisNonUniformWarning(UserWarning):
    """Issued when an axis deviates from uniform spacing beyond tolerance."""


def axis_nonuniformity(axis: Any) -> float:
    """Largest fractional deviation of a step from the mean step."""
    x = _validate_axis(axis)
    step = (x[-1] - x[0]) / (x.size - 1)
    return float(np.max(np.abs(np.diff(x) - step)) / abs(step))


def _validate_axis(axis: Any) -> np.ndarray:
    x = np.asarray(axis, dtype=float)
    if x.ndim != 1:
        raise ValueError(f"axis must be one-dimensional, got shape {x.shape}")
    if x.size < 2:
        raise ValueError(f"axis needs at least 2 points, got {x.size}")
    if not np.all(np.isfinite(x)):
        raise ValueError("axis contains non-finite values")
    if x[-1] == x[0]:
        raise ValueError("axis has zero span (first and last values are equal)")
    return x


def image_fix_axis(axis: Any, *, tolerance: float | None = None) -> np.ndarray:
    """Return a uniformly spaced, half-bin shifted copy of an axis.

    Args:
        axis: 1-D sequence of pixel-centre positions (n >= 2), increasing
            or decreasing.
        tolerance: Maximum fractional deviation of any step from the mean
            step before a warning is issued. Defaults to the configured
            ``axis_tolerance`` (0.01).

    Returns:
        Array of n lower pixel edges: ``x[0] - d/2 + i*d`` with
        ``d = (x[-1] - x[0]) / (n - 1)``.

    Raises:
        ValueError: For non 1-D input, fewer than 2 points, non-finite
            values or zero span.

    Warns:
        AxisNonUniformWarning: If the axis is not uniform within tolerance.

    Example:
        >>> image_fix_axis([0.0, 1.0, 2.0, 3.0]).tolist()
        [-0.5, 0.5, 1.5, 2.5]
    """
    x = _validate_axis(axis)
    tol = get_config().axis_tolerance if tolerance is None else float(tolerance)
    if not tol >= 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")

    n = x.size
    step = (x[-1] - x[0]) / (n - 1)
    deviation = axis_nonuniformity(x)
    if deviation > tol:
        message = (
            f"Axis is not uniform: step deviates by {deviation:.2%} from the mean "
            f"step {step:.6g} (tolerance {tol:.2%})"
        )
        logger.warning(message)
        warnings.warn(message, AxisNonUniformWarning, stacklevel=2)

    return x[0] - step / 2.0 + step * np.arange(n)


def axis_extent(axis: Any, *, tolerance: float | None = None) -> tuple[float, float]:
    """(left, right) image extent covering all pixels of an axis."""
    edges = image_fix_axis(axis, tolerance=tolerance)
    step = edges[1] - edges[0]
    return float(edges[0]), float(edges[-1] + step)
