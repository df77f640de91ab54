"""Spectral-line helpers."""

from astrodisplay.spectral.thermal import (
    ATOMIC_WEIGHTS,
    WIDTH_KINDS,
    ion_mass,
    thermal_temperature,
    thermal_width,
    velocity_to_width,
    width_to_velocity,
)

__all__ = [
    "ATOMIC_WEIGHTS",
    "WIDTH_KINDS",
    "ion_mass",
    "thermal_temperature",
    "thermal_width",
    "velocity_to_width",
    "width_to_velocity",
]
