"""Unit tests for diff operation and result value types."""

import dataclasses
import json

import pytest

from textcompare.diff.models import (
    OPERATION_TYPES,
    ComparisonResult,
    DeleteOp,
    DiffStatistics,
    EqualOp,
    InsertOp,
    ReplaceOp,
    operation_from_dict,
)
from textcompare.diff.text_diff import compare_texts
from textcompare.exceptions import ValidationError


@pytest.mark.unit
class TestDiffOperations:
    """Tests for the four operation variants."""

    def test_tags(self):
        assert EqualOp.tag == "equal"
        assert InsertOp.tag == "insert"
        assert DeleteOp.tag == "delete"
        assert ReplaceOp.tag == "replace"
        assert set(OPERATION_TYPES) == {"equal", "insert", "delete", "replace"}

    def test_operations_are_frozen(self):
        op = InsertOp(new_value="x", new_line_number=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            op.new_value = "y"

    def test_insert_has_only_new_fields(self):
        assert InsertOp(new_value="x", new_line_number=3).to_dict() == {
            "type": "insert",
            "new_value": "x",
            "new_line_number": 3,
        }

    def test_delete_has_only_old_fields(self):
        assert DeleteOp(old_value="x", old_line_number=2).to_dict() == {
            "type": "delete",
            "old_value": "x",
            "old_line_number": 2,
        }

    def test_replace_has_both_sides(self):
        data = ReplaceOp(old_value="a", new_value="b", old_line_number=1, new_line_number=2).to_dict()
        assert data == {
            "type": "replace",
            "old_value": "a",
            "new_value": "b",
            "old_line_number": 1,
            "new_line_number": 2,
        }

    def test_operation_from_dict(self):
        op = EqualOp(old_value="a", new_value="a", old_line_number=4, new_line_number=5)
        assert operation_from_dict(op.to_dict()) == op

    def test_unknown_type(self):
        with pytest.raises(ValidationError, match="Unknown diff operation type"):
            operation_from_dict({"type": "move", "old_value": "a"})

    def test_missing_type(self):
        with pytest.raises(ValidationError):
            operation_from_dict({"new_value": "a", "new_line_number": 1})

    def test_missing_field(self):
        with pytest.raises(ValidationError, match="missing field 'new_line_number'") as exc_info:
            operation_from_dict({"type": "insert", "new_value": "a"})
        assert exc_info.value.parameter_name == "new_line_number"

    @pytest.mark.parametrize("data", ["x", ["insert"], None, 3])
    def test_not_a_mapping(self, data):
        with pytest.raises(ValidationError, match="must be a mapping"):
            operation_from_dict(data)

    @pytest.mark.parametrize(
        "data, field",
        [
            ({"type": "insert", "new_value": "a", "new_line_number": "x"}, "new_line_number"),
            ({"type": "insert", "new_value": "a", "new_line_number": True}, "new_line_number"),
            ({"type": "delete", "old_value": 7, "old_line_number": 1}, "old_value"),
            (
                {"type": "equal", "old_value": "a", "new_value": None, "old_line_number": 1, "new_line_number": 1},
                "new_value",
            ),
        ],
    )
    def test_wrong_field_type(self, data, field):
        with pytest.raises(ValidationError, match=f"Field '{field}'") as exc_info:
            operation_from_dict(data)
        assert exc_info.value.parameter_name == field


@pytest.mark.unit
class TestDiffStatistics:
    """Tests for the statistics record."""

    def test_to_dict_field_names(self):
        stats = DiffStatistics(
            total_lines=5, added_lines=1, deleted_lines=0, modified_lines=2, unchanged_lines=2, similarity=40.0
        )
        assert stats.to_dict() == {
            "total_lines": 5,
            "added_lines": 1,
            "deleted_lines": 0,
            "modified_lines": 2,
            "unchanged_lines": 2,
            "similarity": 40.0,
        }

    def test_from_dict_missing_fields(self):
        with pytest.raises(ValidationError, match="added_lines"):
            DiffStatistics.from_dict({"total_lines": 1})

    def test_from_dict_not_a_mapping(self):
        with pytest.raises(ValidationError, match="must be a mapping"):
            DiffStatistics.from_dict("total_lines")

    def test_from_dict_non_numeric(self):
        data = {
            "total_lines": "many",
            "added_lines": 0,
            "deleted_lines": 0,
            "modified_lines": 0,
            "unchanged_lines": 0,
            "similarity": 100.0,
        }
        with pytest.raises(ValidationError, match="non-numeric"):
            DiffStatistics.from_dict(data)


@pytest.mark.unit
class TestComparisonResult:
    """Tests for the comparison result container."""

    def test_has_changes(self):
        assert compare_texts("a\nb", "a\nc").has_changes
        assert not compare_texts("a\nb", "a\nb").has_changes

    def test_to_dict_keeps_equal_operations(self):
        data = compare_texts("a\nb", "a\nc").to_dict()
        assert [item["type"] for item in data["diffs"]] == ["equal", "replace"]
        assert data["statistics"]["similarity"] == 50.0

    def test_json_round_trip(self, basic_texts):
        result = compare_texts(*basic_texts)
        assert ComparisonResult.from_json(result.to_json()) == result

    def test_to_json_compact(self):
        payload = compare_texts("a", "b").to_json(indent=None)
        assert "\n" not in payload
        assert json.loads(payload)["statistics"]["modified_lines"] == 1

    def test_to_json_keeps_unicode(self):
        payload = compare_texts("café", "naïve").to_json()
        assert "café" in payload
        assert "naïve" in payload

    def test_from_json_invalid(self):
        with pytest.raises(ValidationError, match="Invalid comparison JSON"):
            ComparisonResult.from_json("{not json")

    def test_from_json_not_object(self):
        with pytest.raises(ValidationError, match="must be an object"):
            ComparisonResult.from_json("[]")

    def test_from_dict_requires_sections(self):
        with pytest.raises(ValidationError):
            ComparisonResult.from_dict({"diffs": []})

    def test_from_json_malformed_operation(self):
        payload = compare_texts("a", "a").to_dict()
        payload["diffs"] = ["x"]
        with pytest.raises(ValidationError, match="must be a mapping"):
            ComparisonResult.from_json(json.dumps(payload))

    def test_from_json_bad_line_number(self):
        payload = compare_texts("a", "a\nb").to_dict()
        payload["diffs"][1]["new_line_number"] = "x"
        with pytest.raises(ValidationError, match="new_line_number"):
            ComparisonResult.from_json(json.dumps(payload))

    def test_from_dict_diffs_must_be_list(self):
        stats = compare_texts("a", "a").statistics.to_dict()
        with pytest.raises(ValidationError, match="'diffs' must be a list"):
            ComparisonResult.from_dict({"statistics": stats, "diffs": "equal"})
