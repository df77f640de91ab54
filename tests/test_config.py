from __future__ import annotations

import pytest

from astrodisplay.config import DisplayConfig, get_config, set_config


@pytest.fixture(autouse=True)
def _reset_config():
    set_config(None)
    yield
    set_config(None)


def test_defaults() -> None:
    config = DisplayConfig()
    assert config.axis_tolerance == 0.01
    assert config.default_vrange == 30.0
    assert config.missing_color == (0, 0, 0)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTRODISPLAY_AXIS_TOLERANCE", "0.05")
    monkeypatch.setenv("ASTRODISPLAY_VRANGE", "12.5")
    config = DisplayConfig.from_env()
    assert config.axis_tolerance == 0.05
    assert config.default_vrange == 12.5


def test_from_env_ignores_garbage(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("ASTRODISPLAY_VRANGE", "fast")
    assert DisplayConfig.from_env().default_vrange == 30.0
    assert "ASTRODISPLAY_VRANGE" in caplog.text


def test_get_config_reads_env_lazily(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTRODISPLAY_VRANGE", "7")
    assert get_config().default_vrange == 7.0


def test_set_config_overrides() -> None:
    set_config(DisplayConfig(default_vrange=3.0))
    assert get_config().default_vrange == 3.0


@pytest.mark.parametrize("kwargs", [{"axis_tolerance": -0.1}, {"default_vrange": 0.0}])
def test_rejects_invalid(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        DisplayConfig(**kwargs)


def test_is_frozen() -> None:
    with pytest.raises(AttributeError):
        DisplayConfig().axis_tolerance = 1.0  # type: ignore[misc]


@pytest.mark.parametrize("raw", ["0", "-5", "nan", "inf"])
def test_from_env_drops_out_of_range_vrange(
    raw: str, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("ASTRODISPLAY_VRANGE", raw)
    monkeypatch.setenv("ASTRODISPLAY_AXIS_TOLERANCE", "0.2")
    config = DisplayConfig.from_env()
    assert config.default_vrange == 30.0
    assert config.axis_tolerance == 0.2
    assert "ASTRODISPLAY_VRANGE" in caplog.text


def test_from_env_drops_negative_tolerance(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTRODISPLAY_AXIS_TOLERANCE", "-1")
    assert DisplayConfig.from_env().axis_tolerance == 0.01


def test_bad_env_value_does_not_break_other_operations(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    from astrodisplay.image.axis import image_fix_axis

    monkeypatch.setenv("ASTRODISPLAY_VRANGE", "0")
    assert get_config().default_vrange == 30.0
    assert image_fix_axis([0.0, 1.0, 2.0]).tolist() == [-0.5, 0.5, 1.5]


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_rejects_non_finite_vrange(value: float) -> None:
    with pytest.raises(ValueError, match="finite"):
        DisplayConfig(default_vrange=value)
