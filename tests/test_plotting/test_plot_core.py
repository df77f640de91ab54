"""Tests for astrodisplay.plotting._core module."""

from __future__ import annotations

import matplotlib.pyplot as plt
import pytest
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from astrodisplay.plotting._core import add_colorbar, ensure_ax, style_context
from astrodisplay.plotting._styles import STYLES


class TestEnsureAx:
    def test_creates_figure_when_none(self):
        """ensure_ax creates new figure and axes when ax=None."""
        fig, ax = ensure_ax()

        assert isinstance(fig, Figure)
        assert isinstance(ax, Axes)
        assert ax.figure is fig

    def test_uses_provided_ax(self):
        """ensure_ax uses provided axes and returns its figure."""
        existing_fig, existing_ax = plt.subplots()

        fig, ax = ensure_ax(existing_ax)

        assert fig is existing_fig
        assert ax is existing_ax


class TestStyleContext:
    def test_applies_paper_style(self):
        with style_context("paper"):
            assert list(plt.rcParams["figure.figsize"]) == list(
                STYLES["paper"]["figure.figsize"]
            )
            assert plt.rcParams["image.interpolation"] == "nearest"

    def test_reverts_on_exception(self):
        """style_context reverts rcParams even on exception."""
        original_fontsize = plt.rcParams["font.size"]

        with pytest.raises(RuntimeError):
            with style_context("presentation"):
                raise RuntimeError("test error")

        assert plt.rcParams["font.size"] == original_fontsize

    def test_raises_on_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown style"):
            with style_context("nonexistent"):
                pass


class TestAddColorbar:
    def test_sets_label(self):
        fig, ax = plt.subplots()
        im = ax.imshow([[0, 1], [2, 3]])

        cbar = add_colorbar(im, ax, label="Velocity")

        assert cbar.ax.get_ylabel() == "Velocity"
