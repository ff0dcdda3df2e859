"""Tests for deep merge and raw JSON handling."""

from typing import Any, Dict

import pytest

from workflow_data.errors import InvalidRawJSONError, WorkflowDataError
from workflow_data.merge import deep_merge, merge_raw_json, parse_raw_json


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_adds_new_keys(self) -> None:
        assert deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_returns_same_target(self) -> None:
        target: Dict[str, Any] = {}
        assert deep_merge(target, {"a": 1}) is target

    def test_merges_nested_mappings(self) -> None:
        target = {"user": {"name": "Ann", "age": 30}}
        deep_merge(target, {"user": {"age": 31, "city": "Oslo"}})
        assert target == {"user": {"name": "Ann", "age": 31, "city": "Oslo"}}

    def test_concatenates_lists(self) -> None:
        assert deep_merge({"a": [1]}, {"a": [2]}) == {"a": [1, 2]}

    def test_scalar_last_write_wins(self) -> None:
        target: Dict[str, Any] = {"a": 0}
        deep_merge(target, {"a": 1})
        deep_merge(target, {"a": 1})
        assert target == {"a": 1}

    def test_scalar_replaces_mapping(self) -> None:
        assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}

    def test_mapping_replaces_list(self) -> None:
        assert deep_merge({"a": [1]}, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_list_replaces_scalar(self) -> None:
        assert deep_merge({"a": "x"}, {"a": [1]}) == {"a": [1]}

    def test_source_is_copied(self) -> None:
        source = {"a": {"b": [1]}}
        target: Dict[str, Any] = {}
        deep_merge(target, source)
        target["a"]["b"].append(2)
        assert source == {"a": {"b": [1]}}

    def test_rejects_non_mapping_source(self) -> None:
        with pytest.raises(TypeError):
            deep_merge({}, [1, 2])  # type: ignore[arg-type]


class TestParseRawJson:
    """Tests for parse_raw_json."""

    def test_parses_object_text(self) -> None:
        assert parse_raw_json('{"a": {"b": 1}}') == {"a": {"b": 1}}

    def test_accepts_mapping_as_is(self) -> None:
        data = {"a": 1}
        assert parse_raw_json(data) is data

    def test_invalid_text_raises(self) -> None:
        with pytest.raises(InvalidRawJSONError) as exc_info:
            parse_raw_json("not json")
        assert exc_info.value.raw == "not json"
        assert "rawJSON could not be parsed" in str(exc_info.value)

    @pytest.mark.parametrize("raw", ["[1, 2]", "42", "null", '"text"'])
    def test_non_object_json_raises(self, raw: str) -> None:
        with pytest.raises(InvalidRawJSONError):
            parse_raw_json(raw)

    def test_non_mapping_value_raises(self) -> None:
        with pytest.raises(InvalidRawJSONError):
            parse_raw_json(7)

    def test_is_workflow_data_error(self) -> None:
        with pytest.raises(WorkflowDataError):
            parse_raw_json("{")


class TestMergeRawJson:
    """Tests for merge_raw_json."""

    def test_merges_into_document(self) -> None:
        doc = {"a": [1], "b": {"c": 1}}
        merge_raw_json(doc, '{"a": [2], "b": {"d": 2}}')
        assert doc == {"a": [1, 2], "b": {"c": 1, "d": 2}}

    def test_failure_leaves_document_untouched(self) -> None:
        doc = {"a": 1}
        with pytest.raises(InvalidRawJSONError):
            merge_raw_json(doc, "not json")
        assert doc == {"a": 1}
