"""Tests for the typer CLI."""

import json
from pathlib import Path

import pytest

typer = pytest.importorskip("typer")
from typer.testing import CliRunner  # noqa: E402

from swatch_picker.cli.app import create_app  # noqa: E402

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestPresetsCommand:
    """Tests for `swatch-picker presets`."""

    def test_lists_builtin_presets(self, app) -> None:
        result = runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        assert "material-simple" in result.output
        assert "text-advanced" in result.output


class TestShowCommand:
    """Tests for `swatch-picker show`."""

    def test_default_preset(self, app) -> None:
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        assert "16 swatches" in result.output

    def test_hidden_exception(self, app) -> None:
        result = runner.invoke(app, ["show", "#e31432", "#a156e2", "-e", "#E31432", "-m", "hidden"])
        assert result.exit_code == 0
        assert "48;2;161;86;226" in result.output
        assert "48;2;227;20;50" not in result.output

    def test_grid_rows(self, app) -> None:
        result = runner.invoke(app, ["show", "--grid", "#000000,#ffffff", "#ff0000"])
        assert result.exit_code == 0
        assert "3 swatches" in result.output
        assert "48;2;255;0;0" in result.output

    def test_preset_option(self, app) -> None:
        result = runner.invoke(app, ["show", "-p", "material-simple", "--swatch-size", "20"])
        assert result.exit_code == 0
        assert "19 swatches" in result.output
        assert "swatch 20px" in result.output

    def test_inline_has_no_cap(self, app) -> None:
        result = runner.invoke(app, ["show", "--inline"])
        assert result.exit_code == 0
        assert "max-height none" in result.output

    def test_config_file(self, app, tmp_path: Path) -> None:
        path = tmp_path / "picker.json"
        path.write_text(json.dumps({"colors": ["#123456"], "maxHeight": 77}))
        result = runner.invoke(app, ["show", "-c", str(path)])
        assert result.exit_code == 0
        assert "max-height 77px" in result.output

    def test_missing_config_file(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", "-c", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)

    def test_unknown_preset(self, app) -> None:
        result = runner.invoke(app, ["show", "-p", "nope"])
        assert result.exit_code == 1

    def test_bad_mode(self, app) -> None:
        result = runner.invoke(app, ["show", "#000", "-m", "bogus"])
        assert result.exit_code == 1

    def test_colors_and_preset_conflict(self, app) -> None:
        result = runner.invoke(app, ["show", "#000", "-p", "simple"])
        assert result.exit_code == 2


class TestExportCommand:
    """Tests for `swatch-picker export`."""

    def test_writes_png(self, app, tmp_path: Path) -> None:
        pytest.importorskip("PIL")
        out = tmp_path / "sheet.png"
        result = runner.invoke(app, ["export", str(out), "-p", "material-light"])
        assert result.exit_code == 0
        assert out.exists()
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


class TestPickCommand:
    """Tests for `swatch-picker pick` with the interactive session stubbed out."""

    def test_prints_choice(self, app, monkeypatch) -> None:
        monkeypatch.setattr("swatch_picker.cli.session.run_picker", lambda picker: picker.grid[0][1].token)
        result = runner.invoke(app, ["pick", "#e31432", "#a156e2"])
        assert result.exit_code == 0
        assert result.output.strip() == "#a156e2"

    def test_no_choice(self, app, monkeypatch) -> None:
        monkeypatch.setattr("swatch_picker.cli.session.run_picker", lambda picker: None)
        result = runner.invoke(app, ["pick"])
        assert result.exit_code == 1
