"""Perceptually uniform 256-entry RGB lookup tables.

The five tables are the listed colormaps designed for matplotlib (magma,
inferno, plasma, viridis) plus cividis. The byte tables are built from the
colormap data bundled with matplotlib, sampled at their 256 native entries.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from astrodisplay.errors import MissingOptionalDependencyError, UnknownNameError

if TYPE_CHECKING:
    from matplotlib.colors import ListedColormap

logger = logging.getLogger(__name__)

RGB_TABLE_NAMES: tuple[str, ...] = ("magma", "inferno", "plasma", "viridis", "cividis")
TABLE_SIZE = 256


def rgb_table_names() -> tuple[str, ...]:
    """Names of the available tables, in index order."""
    return RGB_TABLE_NAMES


def _resolve_table_name(table: str | int) -> str:
    if isinstance(table, str):
        name = table.strip().lower()
        if name not in RGB_TABLE_NAMES:
            raise UnknownNameError("rgb table", table, RGB_TABLE_NAMES)
        return name
    if isinstance(table, bool) or not isinstance(table, (int, np.integer)):
        raise ValueError(f"Table must be a name or an integer index, got {table!r}")
    index = int(table)
    if not 0 <= index < len(RGB_TABLE_NAMES):
        raise ValueError(
            f"Table index {index} out of range 0..{len(RGB_TABLE_NAMES) - 1}"
        )
    return RGB_TABLE_NAMES[index]


@lru_cache(maxsize=len(RGB_TABLE_NAMES))
def _load_table(name: str) -> np.ndarray:
    try:
        import matplotlib
    except ImportError as e:
        raise MissingOptionalDependencyError("plotting") from e

    cmap = matplotlib.colormaps[name]
    if cmap.N != TABLE_SIZE:
        raise RuntimeError(f"matplotlib colormap {name!r} has {cmap.N} entries, expected 256")
    rgba = np.asarray(cmap(np.arange(TABLE_SIZE)), dtype=float)
    table = np.round(rgba[:, :3] * 255.0).astype(np.uint8)
    table.setflags(write=False)
    logger.debug(f"Loaded rgb table {name!r} from matplotlib")
    return table


def matplotlib_rgb_table(table: str | int = 3) -> np.ndarray:
    """Return one of the perceptually uniform lookup tables as bytes.

    Args:
        table: Table name (case-insensitive) or index into
            ``rgb_table_names()``: 0 magma, 1 inferno, 2 plasma,
            3 viridis (default), 4 cividis.

    Returns:
        A new (256, 3) uint8 array of red, green, blue values.

    Raises:
        UnknownNameError: If the name is not recognized (a ValueError).
        ValueError: If the index is out of range or not an integer.
        MissingOptionalDependencyError: If matplotlib is missing from the
            environment (it is a required dependency).

    Example:
        >>> rgb = matplotlib_rgb_table("viridis")
        >>> rgb.shape, rgb.dtype
        ((256, 3), dtype('uint8'))
    """
    return _load_table(_resolve_table_name(table)).copy()


def read_rgb_table(path: str | Path) -> np.ndarray:
    """Read a 256-entry RGB table from a whitespace-delimited text file.

    Each line holds one ``r g b`` triple, either bytes (0..255) or
    fractions (0..1). Lines starting with ``#`` are ignored.

    Raises:
        ValueError: If the file does not hold 256 rows of 3 values in range.
    """
    data = np.loadtxt(Path(path), dtype=float, comments="#", ndmin=2)
    if data.shape != (TABLE_SIZE, 3):
        raise ValueError(f"RGB table must have shape (256, 3), got {data.shape}")
    if not np.all(np.isfinite(data)) or data.min() < 0:
        raise ValueError("RGB table values must be finite and non-negative")
    if data.max() <= 1.0:
        data = data * 255.0
    if data.max() > 255.0:
        raise ValueError("RGB table values must be bytes (0..255) or fractions (0..1)")
    return np.round(data).astype(np.uint8)


def rgb_table_colormap(table: Any, name: str | None = None) -> ListedColormap:
    """Wrap a lookup table as a matplotlib ListedColormap.

    Args:
        table: Table name/index (see ``matplotlib_rgb_table``) or an
            (N, 3) uint8 array.
        name: Colormap name; defaults to the table name.
    """
    try:
        from matplotlib.colors import ListedColormap
    except ImportError as e:
        raise MissingOptionalDependencyError("plotting") from e

    if isinstance(table, (str, int, np.integer)):
        label = name or _resolve_table_name(table)
        rgb = matplotlib_rgb_table(table)
    else:
        rgb = np.asarray(table)
        if rgb.ndim != 2 or rgb.shape[1] != 3:
            raise ValueError(f"RGB table must have shape (N, 3), got {rgb.shape}")
        label = name or "custom"
    return ListedColormap(rgb.astype(float) / 255.0, name=label)
