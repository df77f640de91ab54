"""CLI entrypoint for astrodisplay.

Usage:
    astrodisplay thermal-width 195.119 Fe --log-temperature 6.2
    astrodisplay rgb-table viridis --out viridis.txt
    astrodisplay fix-axis "0 1 2.02 3"
    astrodisplay fix-axis -3 -2 -1 0
    astrodisplay color-tol muted rose indigo --hex
"""

from __future__ import annotations

import sys
import warnings
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import click
import numpy as np

from astrodisplay.cli.common_cli import (
    EXIT_INPUT_ERROR,
    EXIT_RUNTIME_ERROR,
    AstrodisplayCliError,
    dump_json_output,
    parse_float_list,
    resolve_optional_output_path,
)
from astrodisplay.colors.tables import matplotlib_rgb_table, rgb_table_names
from astrodisplay.colors.tol import color_tol, tol_palette, tol_palette_names
from astrodisplay.errors import MissingOptionalDependencyError, error_from_exception
from astrodisplay.image.axis import AxisNonUniformWarning, image_fix_axis
from astrodisplay.spectral.thermal import WIDTH_KINDS, thermal_width


@contextmanager
def _translate_errors() -> Iterator[None]:
    """Turn library exceptions into CLI errors with exit codes."""
    try:
        yield
    except MissingOptionalDependencyError as exc:
        raise AstrodisplayCliError(str(exc), exit_code=EXIT_RUNTIME_ERROR) from exc
    except ValueError as exc:
        envelope = error_from_exception(exc)
        raise AstrodisplayCliError(
            f"{envelope.type.value}: {envelope.message}", exit_code=EXIT_INPUT_ERROR
        ) from exc


def _emit(payload: dict[str, Any], text: str, json_output: bool, out: str | None) -> None:
    out_path = resolve_optional_output_path(out)
    if json_output:
        dump_json_output(payload, out_path)
    elif out_path is None:
        click.echo(text)
    else:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")


def _json_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--json", "json_output", is_flag=True, default=False, help="Emit JSON output."
    )(func)


def _out_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--out",
        "-o",
        "out",
        default=None,
        help="Write output to this path ('-' for stdout).",
    )(func)


@click.group()
@click.version_option(package_name="astrodisplay")
def cli() -> None:
    """astrodisplay CLI: line widths, color tables and image axes."""
    pass


@cli.command("thermal-width")
@click.argument("wavelength", type=float)
@click.argument("mass")
@click.option("--temperature", "-t", type=float, default=None, help="Temperature (K).")
@click.option(
    "--log-temperature", "-l", type=float, default=None, help="log10 temperature (K)."
)
@click.option(
    "--kind",
    type=click.Choice(list(WIDTH_KINDS), case_sensitive=False),
    default="fwhm",
    show_default=True,
    help="fwhm (Angstrom), velocity (mean ion speed, km/s) or vth (1/e, km/s).",
)
@click.option("--unit", default=None, help="Convert the result to this unit.")
@_json_option
@_out_option
def thermal_width_command(
    wavelength: float,
    mass: str,
    temperature: float | None,
    log_temperature: float | None,
    kind: str,
    unit: str | None,
    json_output: bool,
    out: str | None,
) -> None:
    """Thermal width of a line at WAVELENGTH (Angstrom) for ion MASS (amu or symbol)."""
    mass_value: float | str
    try:
        mass_value = float(mass)
    except ValueError:
        mass_value = mass

    with _translate_errors():
        value = thermal_width(
            wavelength,
            mass_value,
            temperature,
            log_temperature=log_temperature,
            kind=kind.lower(),
            unit=unit,
        )

    default_unit = "Angstrom" if kind.lower() == "fwhm" else "km/s"
    payload = {
        "wavelength": wavelength,
        "mass": mass_value,
        "temperature": temperature,
        "log_temperature": log_temperature,
        "kind": kind.lower(),
        "unit": unit or default_unit,
        "value": value,
    }
    _emit(payload, f"{value:.6g} {unit or default_unit}", json_output, out)


@cli.command("rgb-table")
@click.argument("table", default="viridis")
@_json_option
@_out_option
def rgb_table_command(table: str, json_output: bool, out: str | None) -> None:
    """Print a 256-entry RGB table by name or index (one 'r g b' per line)."""
    selector: str | int = int(table) if table.strip().lstrip("-").isdigit() else table
    with _translate_errors():
        rgb = matplotlib_rgb_table(selector)

    name = selector if isinstance(selector, str) else rgb_table_names()[selector]
    text = "\n".join(" ".join(str(int(c)) for c in row) for row in rgb)
    _emit({"name": str(name).lower(), "rgb": rgb}, text, json_output, out)


@cli.command("fix-axis", context_settings={"ignore_unknown_options": True})
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--tolerance",
    type=float,
    default=None,
    help="Fractional step deviation allowed before warning (default 0.01).",
)
@_json_option
@_out_option
def fix_axis_command(
    values: tuple[str, ...], tolerance: float | None, json_output: bool, out: str | None
) -> None:
    """Uniform, half-bin shifted replacement for an axis given as VALUES.

    VALUES may be one quoted list ("0 1 2" or "0,1,2") or separate
    arguments; negative values such as "-3 -2 -1 0" are accepted.
    """
    axis = parse_float_list(" ".join(values), label="VALUES")
    with _translate_errors(), warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", AxisNonUniformWarning)
        fixed = image_fix_axis(axis, tolerance=tolerance)

    messages = [str(w.message) for w in caught if issubclass(w.category, AxisNonUniformWarning)]
    for message in messages:
        click.echo(f"Warning: {message}", err=True)

    text = " ".join(f"{v:.10g}" for v in fixed)
    _emit({"axis": fixed, "warnings": messages}, text, json_output, out)


@cli.command("color-tol")
@click.argument("palette", default="bright")
@click.argument("names", nargs=-1)
@click.option("--hex", "as_hex", is_flag=True, default=False, help="Print hex strings.")
@click.option("--list", "list_palettes", is_flag=True, default=False, help="List palettes.")
@_json_option
@_out_option
def color_tol_command(
    palette: str,
    names: tuple[str, ...],
    as_hex: bool,
    list_palettes: bool,
    json_output: bool,
    out: str | None,
) -> None:
    """Colors of a Paul Tol PALETTE, optionally only the named ones."""
    if list_palettes:
        listing = {name: list(tol_palette(name).color_names) for name in tol_palette_names()}
        text = "\n".join(f"{k}: {', '.join(v)}" for k, v in listing.items())
        _emit({"palettes": listing}, text, json_output, out)
        return

    with _translate_errors():
        pal = tol_palette(palette)
        selected = list(names) or list(pal.color_names)
        colors = color_tol(pal.name, selected, as_hex=as_hex)

    if as_hex:
        rows = list(colors)
    else:
        rows = [" ".join(str(int(c)) for c in row) for row in np.asarray(colors)]
    text = "\n".join(f"{name}\t{row}" for name, row in zip(selected, rows, strict=True))
    payload = {"palette": pal.name, "colors": dict(zip(selected, colors, strict=True))}
    _emit(payload, text, json_output, out)


def main() -> int:
    """Main entry point for the CLI."""
    try:
        cli(standalone_mode=False)
        return 0
    except AstrodisplayCliError as e:
        e.show()
        return e.exit_code
    except click.ClickException as e:
        e.show()
        return EXIT_INPUT_ERROR
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
