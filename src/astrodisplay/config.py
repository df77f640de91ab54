"""Display and analysis defaults."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

_ENV_AXIS_TOLERANCE = "ASTRODISPLAY_AXIS_TOLERANCE"
_ENV_VRANGE = "ASTRODISPLAY_VRANGE"


@dataclass(frozen=True)
class DisplayConfig:
    """
    Defaults shared by the display helpers.

    Attributes
    ----------
    axis_tolerance : float
        Maximum fractional deviation of an axis step from the mean step
        before ``image_fix_axis`` warns (default: 0.01).
    default_vrange : float
        Velocity range (km/s) used for the velocity table when neither an
        image nor an explicit range is given (default: 30.0).
    missing_color : tuple[int, int, int]
        RGB bytes for the missing-data entry of the velocity table.
    mask_color : tuple[int, int, int]
        RGB bytes for the masked-pixel entry of the velocity table.
    """

    axis_tolerance: float = 0.01
    default_vrange: float = 30.0
    missing_color: tuple[int, int, int] = (0, 0, 0)
    mask_color: tuple[int, int, int] = (128, 128, 128)

    def __post_init__(self) -> None:
        if not self.axis_tolerance >= 0:
            raise ValueError(f"axis_tolerance must be >= 0, got {self.axis_tolerance}")
        if not (self.default_vrange > 0 and math.isfinite(self.default_vrange)):
            raise ValueError(
                f"default_vrange must be positive and finite, got {self.default_vrange}"
            )

    @classmethod
    def from_env(cls) -> DisplayConfig:
        """Build a config, overriding defaults from ASTRODISPLAY_* variables."""
        config = cls()
        for env_name, field in (
            (_ENV_AXIS_TOLERANCE, "axis_tolerance"),
            (_ENV_VRANGE, "default_vrange"),
        ):
            raw = os.getenv(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                value = float(raw)
            except ValueError:
                logger.warning(f"Ignoring {env_name}={raw!r}: not a number")
                continue
            try:
                config = replace(config, **{field: value})
            except ValueError as e:
                logger.warning(f"Ignoring {env_name}={raw!r}: {e}")
        return config


_config: DisplayConfig | None = None


def get_config() -> DisplayConfig:
    """Return the process-wide config, reading the environment on first use."""
    global _config
    if _config is None:
        _config = DisplayConfig.from_env()
    return _config


def set_config(config: DisplayConfig | None) -> None:
    """Replace the process-wide config; ``None`` re-reads the environment lazily."""
    global _config
    _config = config
