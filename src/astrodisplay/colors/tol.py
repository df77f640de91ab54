"""Paul Tol's color-blind safe palettes.

Qualitative schemes (bright, high-contrast, vibrant, muted) have named
colors meant to be used in the listed order. The diverging sunset scheme
is addressed by position (c0..c10). Reference: Tol, P. 2021, "Colour
Schemes", SRON/EPS/TN/09-002.
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np
from pydantic import BaseModel, ConfigDict

from astrodisplay.errors import UnknownNameError, require_matplotlib


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TolColor(FrozenModel):
    name: str
    hex: str

    @property
    def rgb(self) -> tuple[int, int, int]:
        value = self.hex.lstrip("#")
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


class TolPalette(FrozenModel):
    """One palette: ordered colors plus the color for bad/missing data."""

    name: str
    kind: Literal["qualitative", "diverging"]
    colors: tuple[TolColor, ...]
    bad: TolColor | None = None

    @property
    def color_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.colors)

    def rgb_array(self) -> np.ndarray:
        return np.array([c.rgb for c in self.colors], dtype=np.uint8)


def _qualitative(name: str, pairs: list[tuple[str, str]], bad: str | None = None) -> TolPalette:
    return TolPalette(
        name=name,
        kind="qualitative",
        colors=tuple(TolColor(name=n, hex=h) for n, h in pairs),
        bad=None if bad is None else TolColor(name="bad", hex=bad),
    )


def _diverging(name: str, hexes: list[str], bad: str) -> TolPalette:
    return TolPalette(
        name=name,
        kind="diverging",
        colors=tuple(TolColor(name=f"c{i}", hex=h) for i, h in enumerate(hexes)),
        bad=TolColor(name="bad", hex=bad),
    )


_PALETTES: dict[str, TolPalette] = {
    p.name: p
    for p in (
        _qualitative(
            "bright",
            [
                ("blue", "#4477AA"),
                ("red", "#EE6677"),
                ("green", "#228833"),
                ("yellow", "#CCBB44"),
                ("cyan", "#66CCEE"),
                ("purple", "#AA3377"),
                ("grey", "#BBBBBB"),
            ],
        ),
        _qualitative(
            "high-contrast",
            [
                ("blue", "#004488"),
                ("yellow", "#DDAA33"),
                ("red", "#BB5566"),
                ("black", "#000000"),
                ("white", "#FFFFFF"),
            ],
        ),
        _qualitative(
            "vibrant",
            [
                ("orange", "#EE7733"),
                ("blue", "#0077BB"),
                ("cyan", "#33BBEE"),
                ("magenta", "#EE3377"),
                ("red", "#CC3311"),
                ("teal", "#009988"),
                ("grey", "#BBBBBB"),
            ],
        ),
        _qualitative(
            "muted",
            [
                ("rose", "#CC6677"),
                ("indigo", "#332288"),
                ("sand", "#DDCC77"),
                ("green", "#117733"),
                ("cyan", "#88CCEE"),
                ("wine", "#882255"),
                ("teal", "#44AA99"),
                ("olive", "#999933"),
                ("purple", "#AA4499"),
            ],
            bad="#DDDDDD",
        ),
        _diverging(
            "sunset",
            [
                "#364B9A",
                "#4A7BB7",
                "#6EA6CD",
                "#98CAE1",
                "#C2E4EF",
                "#EAECCC",
                "#FEDA8B",
                "#FDB366",
                "#F67E4B",
                "#DD3D2D",
                "#A50026",
            ],
            bad="#FFFFFF",
        ),
    )
}


def tol_palette_names() -> tuple[str, ...]:
    return tuple(_PALETTES)


def tol_palette(name: str) -> TolPalette:
    """Look up a palette by name (case-insensitive, "_" or " " for "-")."""
    key = str(name).strip().lower().replace("_", "-").replace(" ", "-")
    if key not in _PALETTES:
        raise UnknownNameError("palette", name, tol_palette_names())
    return _PALETTES[key]


def _select(palette: TolPalette, names: str | list[str] | tuple[str, ...]) -> list[TolColor]:
    lookup = {c.name: c for c in palette.colors}
    if palette.bad is not None:
        lookup["bad"] = palette.bad
    requested = [names] if isinstance(names, str) else list(names)
    selected = []
    for requested_name in requested:
        key = str(requested_name).strip().lower().replace("-", "_").replace(" ", "_")
        if key == "gray":
            key = "grey"
        if key not in lookup:
            raise UnknownNameError(f"{palette.name} color", requested_name, list(lookup))
        selected.append(lookup[key])
    return selected


def color_tol(
    palette: str = "bright",
    names: str | list[str] | tuple[str, ...] | None = None,
    *,
    as_hex: bool = False,
    show: bool = False,
    ax: Any | None = None,
) -> Any:
    """Return colors from one of Paul Tol's palettes.

    Args:
        palette: Palette name: "bright", "high-contrast", "vibrant", "muted"
            or "sunset".
        names: None for the whole palette in order, or one color name / a
            list of names ("bad" selects the palette's bad-data color).
        as_hex: Return "#RRGGBB" strings instead of a uint8 array.
        show: Also draw a legend of the whole palette (needs matplotlib).
        ax: Axes for the legend when ``show`` is set; a new figure is
            created if None. Use ``plotting.plot_palette_legend`` directly
            to get the Axes back.

    Returns:
        (n, 3) uint8 array, or a list of hex strings when ``as_hex``.

    Raises:
        UnknownNameError: For an unknown palette or color name (a ValueError).

    Example:
        >>> color_tol("bright", "blue").tolist()
        [[68, 119, 170]]
        >>> color_tol("vibrant", ["orange", "teal"], as_hex=True)
        ['#EE7733', '#009988']
    """
    pal = tol_palette(palette)
    colors = list(pal.colors) if names is None else _select(pal, names)

    if show:
        require_matplotlib()
        from astrodisplay.plotting.palettes import plot_palette_legend

        plot_palette_legend(pal, ax=ax)

    if as_hex:
        return [c.hex for c in colors]
    return np.array([c.rgb for c in colors], dtype=np.uint8).reshape(-1, 3)
