"""Tests for the scalar field and routing architecture readers."""

import pytest

from fabarch.context import LoaderContext
from fabarch.define import FcType, Keyword, RouteType, SwitchBlockType
from fabarch.exceptions import MalformedLine, RangeViolation
from fabarch.parsers.fields import (
    parse_float,
    parse_int,
    read_fc_type,
    read_float_field,
    read_int_field,
    read_switch_block_type,
)
from fabarch.parsers.pins import ClassTable
from fabarch.tokens import LogicalLine, TokenCursor


def cursor_for(text: str, number: int = 1) -> TokenCursor:
    return TokenCursor(LogicalLine(number, tuple(text.split())))


@pytest.fixture
def ctx() -> LoaderContext:
    return LoaderContext("test.arch", RouteType.DETAILED, ClassTable([1]))


@pytest.mark.parametrize(("text", "expected"), [("io_rat 1", 1), ("io_rat 12", 12)])
def test_parse_int_valid(text: str, expected: int) -> None:
    """Test reading positive integers."""
    assert parse_int(cursor_for(text), Keyword.IO_RAT) == expected


@pytest.mark.parametrize("text", ["io_rat 0", "io_rat -3"])
def test_parse_int_not_positive(text: str) -> None:
    """Test that zero and negative integers are rejected."""
    with pytest.raises(RangeViolation, match="io_rat"):
        parse_int(cursor_for(text), Keyword.IO_RAT)


@pytest.mark.parametrize("text", ["io_rat", "io_rat two", "io_rat 2.5"])
def test_parse_int_malformed(text: str) -> None:
    """Test missing and non-integer values."""
    with pytest.raises(MalformedLine):
        parse_int(cursor_for(text), Keyword.IO_RAT)


def test_parse_float_bounds() -> None:
    """Test that the lower bound is open and the upper bound closed."""
    assert parse_float(cursor_for("x 5000"), Keyword.CHAN_WIDTH_IO, 0.0, 5000.0) == 5000
    with pytest.raises(RangeViolation, match="0 is outside"):
        parse_float(cursor_for("x 0"), Keyword.CHAN_WIDTH_IO, 0.0, 5000.0)
    with pytest.raises(RangeViolation, match="5000.5"):
        parse_float(cursor_for("x 5000.5"), Keyword.CHAN_WIDTH_IO, 0.0, 5000.0)


def test_parse_float_nan_rejected() -> None:
    """Test that NaN never satisfies a range."""
    with pytest.raises(RangeViolation):
        parse_float(cursor_for("x nan"), Keyword.FC_PAD, 0.0, 1e20)


def test_read_int_field_counts(ctx: LoaderContext) -> None:
    """Test that a successful read is counted."""
    assert read_int_field(cursor_for("io_rat 3"), Keyword.IO_RAT, ctx) == 3
    assert ctx.occurrences[Keyword.IO_RAT] == 1


def test_read_int_field_extra_characters(ctx: LoaderContext) -> None:
    """Test that trailing words are rejected and nothing is counted."""
    with pytest.raises(MalformedLine, match="Extra characters"):
        read_int_field(cursor_for("io_rat 3 4", 9), Keyword.IO_RAT, ctx)
    assert ctx.occurrences[Keyword.IO_RAT] == 0


def test_read_float_field_extra_characters(ctx: LoaderContext) -> None:
    """Test that float fields reject trailing words too."""
    with pytest.raises(MalformedLine, match="Extra characters"):
        read_float_field(cursor_for("Fc_pad 1 x"), Keyword.FC_PAD, ctx, 0.0, 1e20)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("absolute", FcType.ABSOLUTE), ("fractional", FcType.FRACTIONAL)],
)
def test_read_fc_type(ctx: LoaderContext, value: str, expected: FcType) -> None:
    """Test both Fc types."""
    assert read_fc_type(cursor_for(f"Fc_type {value}"), ctx) is expected
    assert ctx.occurrences[Keyword.FC_TYPE] == 1


@pytest.mark.parametrize("text", ["Fc_type", "Fc_type Absolute", "Fc_type absolute x"])
def test_read_fc_type_invalid(ctx: LoaderContext, text: str) -> None:
    """Test missing, unknown and trailing Fc type values."""
    with pytest.raises(MalformedLine):
        read_fc_type(cursor_for(text), ctx)


def test_read_fc_type_names_bad_value(ctx: LoaderContext) -> None:
    """Test that the error names the bad value and line."""
    with pytest.raises(MalformedLine, match=r"\(relative\)") as excinfo:
        read_fc_type(cursor_for("Fc_type relative", 12), ctx)
    assert excinfo.value.line == 12


@pytest.mark.parametrize(
    "value", [SwitchBlockType.SUBSET, SwitchBlockType.WILTON, SwitchBlockType.UNIVERSAL]
)
def test_read_switch_block_type(ctx: LoaderContext, value: SwitchBlockType) -> None:
    """Test every switch block type."""
    cursor = cursor_for(f"switch_block_type {value.value}")
    assert read_switch_block_type(cursor, ctx) is value


@pytest.mark.parametrize(
    "text", ["switch_block_type", "switch_block_type disjoint", "switch_block_type subset x"]
)
def test_read_switch_block_type_invalid(ctx: LoaderContext, text: str) -> None:
    """Test missing, unknown and trailing switch block values."""
    with pytest.raises(MalformedLine):
        read_switch_block_type(cursor_for(text), ctx)
    assert ctx.occurrences[Keyword.SWITCH_BLOCK_TYPE] == 0
