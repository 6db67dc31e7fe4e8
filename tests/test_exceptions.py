"""Tests for exception-color annotation."""

import pytest

from swatch_picker.core.errors import ConfigError
from swatch_picker.engine.exceptions import (
    Disposition,
    ExceptionMode,
    SwatchAnnotation,
    annotate,
    exception_tokens,
    find,
    visible_rows,
)

GRID = (
    ("#e31432", "#a156e2", "#eca23e"),
    ("#a2341e", "$ef86ff", "#E31432"),
)


class TestExceptionMode:
    """Tests for ExceptionMode.parse()."""

    def test_default_is_disabled(self) -> None:
        assert ExceptionMode.parse(None) is ExceptionMode.DISABLED

    def test_strings(self) -> None:
        assert ExceptionMode.parse("hidden") is ExceptionMode.HIDDEN
        assert ExceptionMode.parse(" Disabled ") is ExceptionMode.DISABLED

    def test_member_passes_through(self) -> None:
        assert ExceptionMode.parse(ExceptionMode.HIDDEN) is ExceptionMode.HIDDEN

    @pytest.mark.parametrize("value", ["invisible", 1, True])
    def test_rejects_other_values(self, value) -> None:
        with pytest.raises(ConfigError):
            ExceptionMode.parse(value)


class TestSwatchAnnotation:
    """Tests for SwatchAnnotation flags."""

    def test_plain_swatch(self) -> None:
        annotation = SwatchAnnotation("#000000")
        assert annotation.visible
        assert annotation.selectable
        assert not annotation.is_exception

    def test_hidden(self) -> None:
        annotation = SwatchAnnotation("#000000", True, Disposition.HIDDEN)
        assert not annotation.visible
        assert not annotation.selectable

    def test_disabled(self) -> None:
        annotation = SwatchAnnotation("#000000", True, Disposition.DISABLED)
        assert annotation.visible
        assert not annotation.selectable


class TestAnnotate:
    """Tests for annotate()."""

    def test_no_exceptions(self) -> None:
        annotated = annotate(GRID)
        assert all(a.disposition is Disposition.NONE for row in annotated for a in row)
        assert [[a.token for a in row] for row in annotated] == [list(row) for row in GRID]

    def test_matches_case_insensitively(self) -> None:
        annotated = annotate(GRID, ["#E31432"], "hidden")
        assert exception_tokens(annotated) == ["#e31432", "#E31432"]
        assert annotated[0][0].disposition is Disposition.HIDDEN
        assert annotated[1][2].disposition is Disposition.HIDDEN

    def test_matches_across_notations(self) -> None:
        annotated = annotate(GRID, ["rgb(161, 86, 226)"])
        assert annotated[0][1].disposition is Disposition.DISABLED

    def test_default_mode_disables(self) -> None:
        annotated = annotate(GRID, ["#eca23e"])
        assert annotated[0][2].disposition is Disposition.DISABLED
        assert annotated[0][2].visible

    def test_malformed_exception_matches_literally(self) -> None:
        annotated = annotate(GRID, ["$ef86ff"], ExceptionMode.HIDDEN)
        assert annotated[1][1].is_exception

    def test_unmatched_exceptions_are_ignored(self) -> None:
        assert exception_tokens(annotate(GRID, ["#123456"])) == []

    def test_order_of_exceptions_does_not_matter(self) -> None:
        assert annotate(GRID, ["#a156e2", "#eca23e"]) == annotate(GRID, ["#eca23e", "#a156e2"])

    def test_idempotent(self) -> None:
        assert annotate(GRID, ["#a156e2"], "hidden") == annotate(GRID, ["#a156e2"], "hidden")

    def test_tokens_keep_original_spelling(self) -> None:
        annotated = annotate(GRID, ["#e31432"])
        assert annotated[1][2].token == "#E31432"


class TestHelpers:
    """Tests for visible_rows() and find()."""

    def test_visible_rows_keeps_empty_rows(self) -> None:
        annotated = annotate((("#000000",), ("#ffffff",)), ["#000"], "hidden")
        rows = visible_rows(annotated)
        assert len(rows) == 2
        assert rows[0] == ()
        assert rows[1][0].token == "#ffffff"

    def test_find_by_equivalent_color(self) -> None:
        annotated = annotate(GRID)
        assert find(annotated, "rgb(236, 162, 62)").token == "#eca23e"

    def test_find_first_occurrence(self) -> None:
        annotated = annotate(GRID)
        assert find(annotated, "#e31432") is annotated[0][0]

    def test_find_missing(self) -> None:
        assert find(annotate(GRID), "#000000") is None
