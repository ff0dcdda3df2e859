"""Tests for dot/bracket path parsing."""

import pytest

from workflow_data.paths import (
    ContainerKind,
    DocumentPath,
    IndexStep,
    KeyStep,
    flat_path,
    parse_path,
    resolve_path,
    split_segments,
)


def steps(raw: str):
    return list(parse_path(raw))


# =============================================================================
# Segment splitting
# =============================================================================


class TestSplitSegments:
    """Tests for splitting on dots outside brackets."""

    def test_simple_dots(self) -> None:
        assert split_segments("a.b.c") == ["a", "b", "c"]

    def test_dot_inside_brackets_is_kept(self) -> None:
        assert split_segments('a["b.c"].d') == ['a["b.c"]', "d"]

    def test_no_dots(self) -> None:
        assert split_segments("name") == ["name"]

    def test_empty_segments_are_kept(self) -> None:
        assert split_segments("a..b") == ["a", "", "b"]

    def test_unclosed_bracket_swallows_dots(self) -> None:
        assert split_segments("a[0.b") == ["a[0.b"]


# =============================================================================
# parse_path
# =============================================================================


class TestParsePath:
    """Tests for parse_path."""

    def test_single_key(self) -> None:
        assert steps("name") == [KeyStep("name")]

    def test_dotted_keys(self) -> None:
        assert steps("a.b.c") == [KeyStep("a"), KeyStep("b"), KeyStep("c")]

    def test_key_with_index(self) -> None:
        """Test the documented example path."""
        assert steps("data.person[0].name") == [
            KeyStep("data"),
            KeyStep("person"),
            IndexStep(0),
            KeyStep("name"),
        ]

    def test_multiple_indices(self) -> None:
        assert steps("grid[1][2]") == [KeyStep("grid"), IndexStep(1), IndexStep(2)]

    def test_leading_index(self) -> None:
        assert steps("[3].x") == [IndexStep(3), KeyStep("x")]

    def test_index_with_whitespace(self) -> None:
        assert steps("a[ 4 ]") == [KeyStep("a"), IndexStep(4)]

    def test_text_after_bracket_keeps_order(self) -> None:
        assert steps("a[0]b") == [KeyStep("a"), IndexStep(0), KeyStep("b")]

    def test_non_numeric_bracket_is_key(self) -> None:
        assert steps("a[name]") == [KeyStep("a"), KeyStep("name")]

    def test_quoted_bracket_key_is_unquoted(self) -> None:
        assert steps('a["x.y"]') == [KeyStep("a"), KeyStep("x.y")]
        assert steps("a['b']") == [KeyStep("a"), KeyStep("b")]

    def test_negative_index_is_key(self) -> None:
        assert steps("a[-1]") == [KeyStep("a"), KeyStep("-1")]

    def test_empty_brackets_are_empty_key(self) -> None:
        assert steps("a[]") == [KeyStep("a"), KeyStep("")]

    def test_unclosed_bracket_is_literal(self) -> None:
        assert steps("a[0") == [KeyStep("a[0")]

    def test_empty_string_is_one_empty_key(self) -> None:
        assert steps("") == [KeyStep("")]

    def test_double_dot_gives_empty_key(self) -> None:
        assert steps("a..b") == [KeyStep("a"), KeyStep(""), KeyStep("b")]

    def test_keeps_raw_text(self) -> None:
        path = parse_path("data.person[0]")
        assert path.raw == "data.person[0]"
        assert str(path) == "data.person[0]"

    def test_leaf(self) -> None:
        assert parse_path("a.b[2]").leaf == IndexStep(2)


# =============================================================================
# Flat keys and step kinds
# =============================================================================


class TestFlatPath:
    """Tests for flat key mode."""

    def test_flat_path_is_single_literal_key(self) -> None:
        assert list(flat_path("a.b[0]")) == [KeyStep("a.b[0]")]

    def test_resolve_path_dot_notation(self) -> None:
        assert len(resolve_path("a.b", dot_notation=True)) == 2

    def test_resolve_path_flat(self) -> None:
        assert list(resolve_path("a.b", dot_notation=False)) == [KeyStep("a.b")]


class TestSteps:
    """Tests for step types."""

    def test_container_kinds(self) -> None:
        assert KeyStep("a").container is ContainerKind.MAPPING
        assert IndexStep(0).container is ContainerKind.SEQUENCE

    def test_str(self) -> None:
        assert str(KeyStep("a")) == "a"
        assert str(IndexStep(2)) == "[2]"

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError):
            DocumentPath(())
