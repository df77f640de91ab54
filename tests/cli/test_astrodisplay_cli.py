"""Contract tests for the `astrodisplay` click CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from astrodisplay.cli.common_cli import EXIT_INPUT_ERROR
from astrodisplay.cli.main import cli
from astrodisplay.spectral.thermal import thermal_width


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_help_lists_commands(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("thermal-width", "rgb-table", "fix-axis", "color-tol"):
        assert command in result.output


class TestThermalWidthCommand:
    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["thermal-width", "195.119", "Fe", "--log-temperature", "6.2", "--json"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["kind"] == "fwhm"
        assert payload["unit"] == "Angstrom"
        assert payload["value"] == pytest.approx(
            thermal_width(195.119, "Fe", log_temperature=6.2)
        )

    def test_numeric_mass_and_velocity_kind(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["thermal-width", "1000", "55.845", "-t", "1e6", "--kind", "vth", "--json"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["mass"] == 55.845
        assert payload["unit"] == "km/s"

    def test_text_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["thermal-width", "1000", "H", "-t", "1e4"])
        assert result.exit_code == 0
        assert result.output.strip().endswith("Angstrom")

    def test_missing_temperature_is_input_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["thermal-width", "1000", "Fe"])
        assert result.exit_code == EXIT_INPUT_ERROR
        assert "INVALID_INPUT" in result.output

    def test_unknown_element_is_reported(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["thermal-width", "1000", "Xx", "-t", "1e6"])
        assert result.exit_code == EXIT_INPUT_ERROR
        assert "UNKNOWN_NAME" in result.output


class TestRgbTableCommand:
    def test_text_table(self, runner: CliRunner) -> None:
        pytest.importorskip("matplotlib")
        result = runner.invoke(cli, ["rgb-table", "viridis"])
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert len(lines) == 256
        assert lines[0] == "68 1 84"

    def test_index_json_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        pytest.importorskip("matplotlib")
        out = tmp_path / "table.json"
        result = runner.invoke(cli, ["rgb-table", "0", "--json", "--out", str(out)])
        assert result.exit_code == 0, result.output
        payload = json.loads(out.read_text(encoding="utf-8"))
        assert payload["name"] == "magma"
        assert len(payload["rgb"]) == 256

    def test_bad_index(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rgb-table", "7"])
        assert result.exit_code == EXIT_INPUT_ERROR


class TestFixAxisCommand:
    def test_uniform_axis(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "0,1,2,3"])
        assert result.exit_code == 0
        assert result.output.strip() == "-0.5 0.5 1.5 2.5"

    def test_non_uniform_axis_reports_warning(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "0 1 2.5 3", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["axis"] == [-0.5, 0.5, 1.5, 2.5]
        assert len(payload["warnings"]) == 1

    def test_tolerance_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "0 1 2.5 3", "--tolerance", "0.6", "--json"])
        assert json.loads(result.stdout)["warnings"] == []

    def test_invalid_numbers(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "0 one 2"])
        assert result.exit_code == EXIT_INPUT_ERROR

    def test_single_point(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "4"])
        assert result.exit_code == EXIT_INPUT_ERROR
        assert "at least 2" in result.output

    def test_negative_axis_quoted(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "-3 -2 -1 0"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "-3.5 -2.5 -1.5 -0.5"

    def test_negative_axis_separate_arguments(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "-3", "-2", "-1", "0", "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["axis"] == [-3.5, -2.5, -1.5, -0.5]
        assert payload["warnings"] == []

    def test_decreasing_solar_x_axis(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis", "-900,-902,-904"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "-899 -901 -903"

    def test_missing_values(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["fix-axis"])
        assert result.exit_code != 0


class TestColorTolCommand:
    def test_named_colors_hex(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["color-tol", "muted", "rose", "indigo", "--hex"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["rose\t#CC6677", "indigo\t#332288"]

    def test_whole_palette_json(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["color-tol", "bright", "--json"])
        payload = json.loads(result.output)
        assert payload["palette"] == "bright"
        assert payload["colors"]["blue"] == [68, 119, 170]

    def test_list(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["color-tol", "--list"])
        assert result.exit_code == 0
        assert "sunset: c0" in result.output

    def test_unknown_palette(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["color-tol", "rainbow"])
        assert result.exit_code == EXIT_INPUT_ERROR
        assert "rainbow" in result.output
