"""Thermal Doppler line widths.

An ion population at temperature T has a Maxwellian velocity distribution,
which broadens an emission line of rest wavelength lambda into a Gaussian
profile with

    FWHM = (lambda / c) * sqrt(8 ln2 k T / M)

This module evaluates that width (or the related ion speeds) and converts
between widths expressed in wavelength and in velocity units:
- thermal_width: FWHM, mean ion speed or 1/e thermal velocity
- thermal_temperature: temperature producing a given thermal FWHM
- width_to_velocity / velocity_to_width: Doppler unit conversion
- ion_mass: standard atomic weight for an element symbol

Plain floats are interpreted as Angstrom (wavelengths), atomic mass units
(masses), K (temperatures) and km/s (velocities). astropy Quantities are
accepted for wavelengths, widths and velocities.
"""

from __future__ import annotations

import math
from typing import Any

import astropy.units as u
import numpy as np
from astropy import constants

from astrodisplay.errors import UnknownNameError

# Standard atomic weights (IUPAC conventional values), amu.
ATOMIC_WEIGHTS: dict[str, float] = {
    "H": 1.008,
    "He": 4.0026,
    "Li": 6.94,
    "Be": 9.0122,
    "B": 10.81,
    "C": 12.011,
    "N": 14.007,
    "O": 15.999,
    "F": 18.998,
    "Ne": 20.180,
    "Na": 22.990,
    "Mg": 24.305,
    "Al": 26.982,
    "Si": 28.085,
    "P": 30.974,
    "S": 32.06,
    "Cl": 35.45,
    "Ar": 39.948,
    "K": 39.098,
    "Ca": 40.078,
    "Sc": 44.956,
    "Ti": 47.867,
    "V": 50.942,
    "Cr": 51.996,
    "Mn": 54.938,
    "Fe": 55.845,
    "Co": 58.933,
    "Ni": 58.693,
    "Cu": 63.546,
    "Zn": 65.38,
}

WIDTH_KINDS: tuple[str, ...] = ("fwhm", "velocity", "vth")

_FWHM_FACTOR = 8.0 * math.log(2.0)
_VELOCITY_UNIT = u.km / u.s


def ion_mass(symbol: str) -> float:
    """Return the standard atomic weight (amu) of an element.

    Args:
        symbol: Element symbol, case-insensitive (e.g. "Fe", "fe", "FE").

    Raises:
        UnknownNameError: If the symbol is not in the table.

    Example:
        >>> ion_mass("fe")
        55.845
    """
    key = str(symbol).strip().capitalize()
    if key not in ATOMIC_WEIGHTS:
        raise UnknownNameError("element", symbol, list(ATOMIC_WEIGHTS))
    return ATOMIC_WEIGHTS[key]


def _as_wavelength(wavelength: Any) -> u.Quantity:
    if isinstance(wavelength, u.Quantity):
        if wavelength.unit.physical_type != "length":
            raise ValueError(f"wavelength must be a length, got unit {wavelength.unit}")
        quantity = wavelength
    else:
        quantity = np.asarray(wavelength, dtype=float) * u.AA
    if not np.all(np.isfinite(quantity.value)) or np.any(quantity.value <= 0):
        raise ValueError("wavelength must be positive and finite")
    return quantity


def _as_mass(mass: Any) -> u.Quantity:
    if isinstance(mass, str):
        value: Any = ion_mass(mass)
    else:
        value = np.asarray(mass, dtype=float)
    if not np.all(np.isfinite(value)) or np.any(np.asarray(value) <= 0):
        raise ValueError("mass must be positive and finite (atomic mass units)")
    return value * constants.u


def _resolve_temperature(
    temperature: Any | None, log_temperature: Any | None
) -> u.Quantity:
    if (temperature is None) == (log_temperature is None):
        raise ValueError("Give exactly one of temperature or log_temperature")
    if temperature is not None:
        value = np.asarray(temperature, dtype=float)
    else:
        value = 10.0 ** np.asarray(log_temperature, dtype=float)
    if not np.all(np.isfinite(value)) or np.any(value <= 0):
        raise ValueError("temperature must be positive and finite")
    return value * u.K


def _finish(result: u.Quantity, unit: Any | None) -> float | np.ndarray:
    if unit is not None:
        try:
            result = result.to(u.Unit(unit))
        except (u.UnitConversionError, ValueError, TypeError) as e:
            raise ValueError(f"Cannot express {result.unit} as {unit!r}: {e}") from e
    value = result.value
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value)


def thermal_width(
    wavelength: Any,
    mass: Any,
    temperature: Any | None = None,
    *,
    log_temperature: Any | None = None,
    kind: str = "fwhm",
    unit: Any | None = None,
) -> float | np.ndarray:
    """Thermal broadening of an emission line.

    Args:
        wavelength: Rest wavelength, Angstrom or an astropy length Quantity.
            Ignored for the velocity kinds, but still validated.
        mass: Ion mass in amu, or an element symbol.
        temperature: Ion temperature in K.
        log_temperature: log10 of the ion temperature; give this or
            temperature, not both.
        kind: "fwhm" for the Doppler FWHM in wavelength units, "velocity"
            for the mean ion speed sqrt(8kT/(pi M)) in km/s, or "vth" for
            the 1/e thermal velocity sqrt(2kT/M) in km/s.
        unit: Optional unit to convert the result to.

    Returns:
        Float for scalar inputs, numpy array when any input is an array.

    Raises:
        ValueError: On missing/duplicate temperature, non-positive inputs,
            unknown kind, or an incompatible unit.

    Example:
        >>> round(thermal_width(195.119, "Fe", log_temperature=6.2), 4)
        0.0235
    """
    if kind not in WIDTH_KINDS:
        raise ValueError(f"Unknown kind {kind!r}. Valid kinds: {', '.join(WIDTH_KINDS)}")

    wvl = _as_wavelength(wavelength)
    ion = _as_mass(mass)
    temp = _resolve_temperature(temperature, log_temperature)
    kt = constants.k_B * temp

    if kind == "fwhm":
        result = (wvl / constants.c * np.sqrt(_FWHM_FACTOR * kt / ion)).to(wvl.unit)
    elif kind == "velocity":
        result = np.sqrt(8.0 * kt / (math.pi * ion)).to(_VELOCITY_UNIT)
    else:
        result = np.sqrt(2.0 * kt / ion).to(_VELOCITY_UNIT)

    return _finish(result, unit)


def thermal_temperature(width: Any, wavelength: Any, mass: Any) -> float | np.ndarray:
    """Temperature (K) whose thermal FWHM equals ``width``.

    Args:
        width: Line FWHM, in the wavelength's unit or as a Quantity.
        wavelength: Rest wavelength, Angstrom or a Quantity.
        mass: Ion mass in amu, or an element symbol.
    """
    wvl = _as_wavelength(wavelength)
    ion = _as_mass(mass)
    fwhm = width if isinstance(width, u.Quantity) else np.asarray(width, dtype=float) * wvl.unit
    if np.any(fwhm.value < 0):
        raise ValueError("width must be non-negative")
    velocity = constants.c * fwhm / wvl
    temp = (ion * velocity**2 / (_FWHM_FACTOR * constants.k_B)).to(u.K)
    return _finish(temp, None)


def width_to_velocity(width: Any, wavelength: Any) -> float | np.ndarray:
    """Convert a Doppler width in wavelength units to km/s.

    Args:
        width: Width in the wavelength's unit (Angstrom for plain floats),
            or a length Quantity.
        wavelength: Rest wavelength, Angstrom or a Quantity.

    Example:
        >>> round(width_to_velocity(0.1, 1000.0), 3)
        29.979
    """
    wvl = _as_wavelength(wavelength)
    dl = width if isinstance(width, u.Quantity) else np.asarray(width, dtype=float) * wvl.unit
    return _finish((constants.c * dl / wvl).to(_VELOCITY_UNIT), None)


def velocity_to_width(velocity: Any, wavelength: Any) -> float | np.ndarray:
    """Convert a Doppler width in km/s to the wavelength's unit."""
    wvl = _as_wavelength(wavelength)
    v = (
        velocity
        if isinstance(velocity, u.Quantity)
        else np.asarray(velocity, dtype=float) * _VELOCITY_UNIT
    )
    return _finish((v / constants.c * wvl).to(wvl.unit), None)
