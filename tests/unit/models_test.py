"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from review_context.models import ContextResult, EnclosingContext, LineRange, ValidityResult


class TestLineRangeModel:
    """Tests for the LineRange model."""

    def test_creates_range(self) -> None:
        line_range = LineRange(start_line=3, end_line=7)
        assert line_range.start_line == 3
        assert line_range.end_line == 7

    def test_single_line(self) -> None:
        assert LineRange.single(4) == LineRange(start_line=4, end_line=4)

    def test_rejects_zero_line(self) -> None:
        with pytest.raises(ValidationError):
            LineRange(start_line=0, end_line=1)

    def test_rejects_reversed_range(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed"):
            LineRange(start_line=5, end_line=2)

    def test_validation_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            LineRange(start_line=5, end_line=2)

    def test_is_immutable(self) -> None:
        line_range = LineRange(start_line=1, end_line=2)
        with pytest.raises(ValidationError):
            line_range.start_line = 2  # type: ignore[misc]

    def test_within_is_inclusive(self) -> None:
        line_range = LineRange(start_line=2, end_line=4)
        assert line_range.within(2, 4)
        assert line_range.within(1, 10)
        assert not line_range.within(3, 4)
        assert not line_range.within(2, 3)


class TestEnclosingContextModel:
    def test_span(self) -> None:
        context = EnclosingContext(node_type="class_definition", name="C", start_line=1, end_line=4)
        assert context.span == 3

    def test_serializes_to_dict(self) -> None:
        context = EnclosingContext(node_type="function_definition", start_line=2, end_line=2, text="def f(): pass")
        assert context.model_dump() == {
            "node_type": "function_definition",
            "name": None,
            "start_line": 2,
            "end_line": 2,
            "text": "def f(): pass",
        }


class TestContextResultModel:
    def test_found(self) -> None:
        result = ContextResult(context=EnclosingContext(node_type="class_definition", start_line=1, end_line=2))
        assert result.found
        assert not result.failed
        assert result.status == "found"

    def test_none_is_not_a_failure(self) -> None:
        result = ContextResult()
        assert not result.found
        assert not result.failed
        assert result.status == "none"

    def test_failed(self) -> None:
        result = ContextResult(error="RuntimeError: boom")
        assert result.failed
        assert result.status == "error"

    def test_rejects_context_and_error_together(self) -> None:
        with pytest.raises(ValidationError):
            ContextResult(
                context=EnclosingContext(node_type="class_definition", start_line=1, end_line=2),
                error="boom",
            )


class TestValidityResultModel:
    def test_defaults_to_empty_error(self) -> None:
        assert ValidityResult(valid=True).error == ""

    def test_from_dict(self) -> None:
        result = ValidityResult.model_validate({"valid": False, "error": "Syntax error in Python code"})
        assert result.valid is False
        assert result.error == "Syntax error in Python code"
