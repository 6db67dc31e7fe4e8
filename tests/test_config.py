"""Tests for SwatchesConfig and config file loading."""

import json
from pathlib import Path

import pytest

from swatch_picker.config import SwatchesConfig, load_config
from swatch_picker.core.errors import ConfigError
from swatch_picker.engine.exceptions import ExceptionMode
from swatch_picker.engine.layout import LayoutFields


class TestDefaults:
    """Tests for default option values."""

    def test_defaults(self) -> None:
        config = SwatchesConfig()
        assert config.colors is None
        assert config.exceptions == ()
        assert config.exception_mode is ExceptionMode.DISABLED
        assert config.inline is False
        assert config.close_on_select is True
        assert config.background_color == "#ffffff"
        assert config.shapes == "squares"
        assert config.popover_to == "right"
        assert config.trigger_size == 42

    def test_layout_unset_by_default(self) -> None:
        assert SwatchesConfig().explicit_layout().is_empty()


class TestValidation:
    """Tests for option validation."""

    def test_exception_mode_parsed(self) -> None:
        assert SwatchesConfig(exception_mode="hidden").exception_mode is ExceptionMode.HIDDEN

    def test_exceptions_become_tuple(self) -> None:
        assert SwatchesConfig(exceptions=["#000"]).exceptions == ("#000",)

    def test_single_string_exceptions_rejected(self) -> None:
        with pytest.raises(ConfigError):
            SwatchesConfig(exceptions="#000")

    @pytest.mark.parametrize("options", [
        {"exception_mode": "gone"},
        {"shapes": "hexagons"},
        {"popover_to": "top"},
        {"max_height": -1},
        {"swatch_size": "big"},
        {"spacing_size": True},
        {"row_length": 0},
        {"row_length": 2.5},
        {"trigger_size": 0},
    ])
    def test_rejects_bad_values(self, options: dict) -> None:
        with pytest.raises(ConfigError):
            SwatchesConfig(**options)

    def test_string_lengths_are_coerced(self) -> None:
        config = SwatchesConfig(max_height="250", swatch_size="18px", spacing_size=" 4 ", row_length="3")
        assert config.max_height == 250
        assert config.swatch_size == 18
        assert config.spacing_size == 4
        assert config.row_length == 3

    @pytest.mark.parametrize("options", [
        {"max_height": "tall"},
        {"swatch_size": "18em"},
        {"spacing_size": "-4"},
        {"row_length": "2.5"},
        {"trigger_size": "0px"},
    ])
    def test_rejects_bad_length_strings(self, options: dict) -> None:
        with pytest.raises(ConfigError):
            SwatchesConfig(**options)

    @pytest.mark.parametrize("entry", [None, 42, ["#000"]])
    def test_rejects_non_string_exceptions(self, entry) -> None:
        with pytest.raises(ConfigError, match="color strings"):
            SwatchesConfig(exceptions=["#e31432", entry])

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SwatchesConfig(shapes="stars")


class TestFromMapping:
    """Tests for building configs from dicts."""

    def test_camel_case(self) -> None:
        config = SwatchesConfig.from_mapping({
            "colors": "material-simple",
            "exceptionMode": "hidden",
            "maxHeight": 120,
            "closeOnSelect": False,
            "popoverTo": "left",
        })
        assert config.colors == "material-simple"
        assert config.exception_mode is ExceptionMode.HIDDEN
        assert config.max_height == 120
        assert config.close_on_select is False
        assert config.popover_to == "left"

    def test_singular_shape_alias(self) -> None:
        assert SwatchesConfig.from_mapping({"shape": "circles"}).shapes == "circles"

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigError, match="Unknown option"):
            SwatchesConfig.from_mapping({"colour": "red"})

    def test_replace_validates(self) -> None:
        config = SwatchesConfig()
        assert config.replace(rowLength=3).row_length == 3
        with pytest.raises(ConfigError):
            config.replace(row_length=-2)

    def test_explicit_layout(self) -> None:
        config = SwatchesConfig(swatch_size=20, border_radius=0, show_border=True)
        assert config.explicit_layout() == LayoutFields(
            swatch_size=20, border_radius=0, show_border=True,
        )


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "picker.json"
        path.write_text(json.dumps({
            "colors": [["#000", "#fff"], ["#f00"]],
            "exceptions": ["#FFF"],
            "inline": True,
        }))
        config = load_config(path)
        assert config.colors == [["#000", "#fff"], ["#f00"]]
        assert config.exceptions == ("#FFF",)
        assert config.inline is True

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="cannot read config"):
            load_config(tmp_path / "missing.json")

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="expected a JSON object"):
            load_config(str(path))
