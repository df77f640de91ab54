"""Blue-white-red color table for Doppler velocity images.

Table layout (256 entries):
- MISSING_INDEX (0): missing data (NaN, inf, or a caller-given value)
- RAMP_START..RAMP_END (1..254): blue -> white -> red ramp; 1..127 blue to
  white, 128..254 white to red, so zero velocity lands on white
- MASK_INDEX (255): pixels excluded by a caller-given boolean mask
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np
from pydantic import BaseModel, ConfigDict

from astrodisplay.config import get_config
from astrodisplay.errors import MissingOptionalDependencyError

if TYPE_CHECKING:
    from matplotlib.colors import ListedColormap

logger = logging.getLogger(__name__)

MISSING_INDEX = 0
RAMP_START = 1
RAMP_END = 254
MASK_INDEX = 255
RAMP_SIZE = RAMP_END - RAMP_START + 1
_HALF = RAMP_SIZE // 2

RGBTriple = tuple[int, int, int]


class VelocityTable(BaseModel):
    """Color table plus (optionally) an image scaled into its index range.

    Attributes:
        rgb: (256, 3) uint8 table.
        vrange: Velocity mapped to the ends of the ramp (+/- vrange).
        scaled: uint8 image of table indices, or None if no image was given.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    rgb: np.ndarray
    vrange: float
    scaled: np.ndarray | None = None

    def to_rgb_image(self) -> np.ndarray:
        """Look up the scaled image in the table: an (..., 3) uint8 array."""
        if self.scaled is None:
            raise ValueError("VelocityTable has no scaled image")
        return self.rgb[self.scaled]


def _check_color(color: Any, label: str) -> RGBTriple:
    rgb = tuple(int(c) for c in color)
    if len(rgb) != 3 or any(not 0 <= c <= 255 for c in rgb):
        raise ValueError(f"{label} must be three bytes (0..255), got {color!r}")
    return rgb  # type: ignore[return-value]


def velocity_ramp() -> np.ndarray:
    """The (254, 3) uint8 blue-white-red ramp without sentinel entries."""
    frac = np.arange(_HALF, dtype=float) / (_HALF - 1)
    blue = np.column_stack([frac, frac, np.ones(_HALF)])
    # red half mirrors the blue half entry for entry
    red = np.column_stack([np.ones(_HALF), frac[::-1], frac[::-1]])
    ramp = np.vstack([blue, red])
    return np.round(ramp * 255.0).astype(np.uint8)


def velocity_rgb(
    missing_color: RGBTriple | None = None,
    mask_color: RGBTriple | None = None,
) -> np.ndarray:
    """Full 256-entry table including the sentinel colors."""
    config = get_config()
    table = np.zeros((256, 3), dtype=np.uint8)
    table[RAMP_START : RAMP_END + 1] = velocity_ramp()
    table[MISSING_INDEX] = _check_color(
        config.missing_color if missing_color is None else missing_color, "missing_color"
    )
    table[MASK_INDEX] = _check_color(
        config.mask_color if mask_color is None else mask_color, "mask_color"
    )
    return table


def _check_vrange(vrange: Any) -> float:
    vr = float(vrange)
    if not (np.isfinite(vr) and vr > 0):
        raise ValueError(f"vrange must be positive and finite, got {vr}")
    return vr


def scale_velocity(
    image: Any,
    vrange: float,
    *,
    missing: float | None = None,
    mask: Any | None = None,
) -> np.ndarray:
    """Map velocities onto table indices.

    Values in [-vrange, +vrange] map linearly onto RAMP_START..RAMP_END and
    saturate outside it. Missing values map to MISSING_INDEX and masked
    pixels to MASK_INDEX; the mask takes precedence.

    Raises:
        ValueError: If vrange is not positive and finite, or the mask shape
            differs from the image shape.
    """
    vrange = _check_vrange(vrange)
    data = np.asarray(image, dtype=float)
    missing_mask = ~np.isfinite(data)
    if missing is not None:
        missing_mask |= data == missing

    # 0 -> first entry of the red half (white)
    position = (np.where(missing_mask, 0.0, data) + vrange) / (2.0 * vrange)
    indices = RAMP_START + np.floor(position * RAMP_SIZE)
    scaled = np.clip(indices, RAMP_START, RAMP_END).astype(np.uint8)
    scaled[missing_mask] = MISSING_INDEX

    if mask is not None:
        pixel_mask = np.asarray(mask, dtype=bool)
        if pixel_mask.shape != data.shape:
            raise ValueError(
                f"mask shape {pixel_mask.shape} does not match image shape {data.shape}"
            )
        scaled[pixel_mask] = MASK_INDEX
    return scaled


def _default_vrange(data: np.ndarray, missing: float | None) -> float:
    valid = np.isfinite(data)
    if missing is not None:
        valid &= data != missing
    if not valid.any():
        raise ValueError("Image has no valid values; pass vrange explicitly")
    vrange = float(np.max(np.abs(data[valid])))
    if vrange == 0:
        vrange = get_config().default_vrange
        logger.debug(f"Image is all zero; velocity range defaulted to +/-{vrange:.3g}")
        return vrange
    logger.debug(f"Velocity range defaulted to +/-{vrange:.3g} from image")
    return vrange


def plot_vel_rgb_table(
    image: Any | None = None,
    *,
    vrange: float | None = None,
    missing: float | None = None,
    mask: Any | None = None,
    missing_color: RGBTriple | None = None,
    mask_color: RGBTriple | None = None,
) -> VelocityTable:
    """Build the velocity color table and rescale an image into it.

    Args:
        image: Velocity image (any shape). If None, only the table is built.
        vrange: Velocity at the ends of the ramp. Defaults to the largest
            absolute valid value in the image, or to the configured default
            range when there is no image or the image is all zero.
        missing: Value flagging missing data in addition to NaN/inf.
        mask: Boolean array, True for pixels to draw in the mask color.
        missing_color: RGB bytes for missing data (config default: black).
        mask_color: RGB bytes for masked pixels (config default: grey).

    Returns:
        VelocityTable with the table, the range used and the scaled image.

    Raises:
        ValueError: If vrange is not positive and finite, the image holds no
            valid value and no vrange is given, or the mask shape differs.

    Example:
        >>> vt = plot_vel_rgb_table(np.array([[-10.0, 0.0, np.nan]]), vrange=10)
        >>> vt.scaled.tolist()
        [[1, 128, 0]]
    """
    rgb = velocity_rgb(missing_color, mask_color)

    data = None if image is None else np.asarray(image, dtype=float)
    if data is None and mask is not None:
        raise ValueError("mask given without an image")

    if vrange is not None:
        vr = _check_vrange(vrange)
    elif data is not None:
        vr = _default_vrange(data, missing)
    else:
        vr = get_config().default_vrange

    scaled = None
    if data is not None:
        scaled = scale_velocity(data, vr, missing=missing, mask=mask)
    return VelocityTable(rgb=rgb, vrange=vr, scaled=scaled)


def velocity_colormap(missing_color: RGBTriple | None = None) -> ListedColormap:
    """The ramp as a matplotlib colormap, with the missing color as "bad"."""
    try:
        from matplotlib.colors import ListedColormap
    except ImportError as e:
        raise MissingOptionalDependencyError("plotting") from e

    rgb = velocity_rgb(missing_color=missing_color)
    cmap = ListedColormap(velocity_ramp().astype(float) / 255.0, name="velocity")
    cmap.set_bad(rgb[MISSING_INDEX].astype(float) / 255.0)
    return cmap
