"""Tests for color token normalization."""

import pytest

from swatch_picker.core.color import equivalent, is_light, is_recognized, normalize, to_rgb


class TestNormalize:
    """Tests for normalize()."""

    def test_hex_case_folds(self) -> None:
        assert normalize("#E31432") == "#e31432"
        assert normalize("#e31432") == "#e31432"

    def test_trims_whitespace(self) -> None:
        assert normalize("  #E31432\t") == "#e31432"

    def test_short_hex_expands(self) -> None:
        assert normalize("#F0F") == "#ff00ff"
        assert normalize("#f0f8") == "#ff00ff88"

    def test_bare_long_hex(self) -> None:
        assert normalize("E31432") == "#e31432"

    def test_bare_short_hex_is_not_a_color(self) -> None:
        # Three hex letters without '#' are too likely to be a word
        assert normalize("bad") == "bad"

    def test_opaque_alpha_collapses(self) -> None:
        assert normalize("#FF0000FF") == "#ff0000"

    def test_named_colors(self) -> None:
        assert normalize("red") == "#ff0000"
        assert normalize("CornflowerBlue") == "#6495ed"

    def test_rgb_function(self) -> None:
        assert normalize("rgb(255, 0, 0)") == "#ff0000"
        assert normalize("RGB(227,20,50)") == "#e31432"
        assert normalize("rgb(100%, 0%, 0%)") == "#ff0000"

    def test_rgba_function(self) -> None:
        assert normalize("rgba(255, 0, 0, 1)") == "#ff0000"
        assert normalize("rgba(255, 0, 0, 0.5)") == "#ff000080"

    @pytest.mark.parametrize("token", [
        "$ef86ff",
        "#eiaea3",
        "rgb(300, 0, 0)",
        "rgb(10%, 0, 0)",
        "rgba(1, 2, 3, 7)",
        "not-a-color",
    ])
    def test_malformed_tokens_pass_through(self, token: str) -> None:
        assert normalize(token) == token

    def test_malformed_keeps_case(self) -> None:
        assert normalize(" $EF86FF ") == "$EF86FF"

    def test_empty(self) -> None:
        assert normalize("   ") == ""


class TestEquivalence:
    """Tests for equivalent() and helpers."""

    def test_across_notations(self) -> None:
        assert equivalent("#E31432", "#e31432")
        assert equivalent("#E31432", "rgb(227, 20, 50)")
        assert equivalent("white", "#FFF")

    def test_different_colors(self) -> None:
        assert not equivalent("#e31432", "#e31433")

    def test_malformed_compares_literally(self) -> None:
        assert equivalent("$ef86ff", "$ef86ff")
        assert not equivalent("$ef86ff", "$EF86FF")

    def test_is_recognized(self) -> None:
        assert is_recognized("#abc")
        assert is_recognized("teal")
        assert not is_recognized("$abc")

    def test_to_rgb(self) -> None:
        assert to_rgb("#e31432") == (227, 20, 50)
        assert to_rgb("#ff000080") == (255, 0, 0)
        assert to_rgb("$ef86ff") is None

    def test_is_light(self) -> None:
        assert is_light("#ffffff")
        assert is_light("#ffeb3b")
        assert not is_light("#000000")
        assert not is_light("junk")
