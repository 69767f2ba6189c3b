"""Readers for single-valued architecture fields.

``parse_int`` and ``parse_float`` read one bounded number from a line. The
``read_*`` functions read a complete field line: the value, the check that
nothing follows it, and the occurrence count in the loader context.
"""

from typing import TYPE_CHECKING

from fabarch.define import FcType, Keyword, SwitchBlockType
from fabarch.exceptions import MalformedLine, RangeViolation
from fabarch.tokens import TokenCursor

if TYPE_CHECKING:
    from fabarch.context import LoaderContext


def _next_value(cursor: TokenCursor, keyword: Keyword) -> str:
    token = cursor.next()
    if token is None:
        raise MalformedLine(
            f"Missing {keyword} value", keyword=str(keyword), line=cursor.number
        )
    return token


def parse_int(cursor: TokenCursor, keyword: Keyword) -> int:
    """Read the next word as an integer greater than zero.

    Raises
    ------
    MalformedLine
        If the value is missing or not an integer.
    RangeViolation
        If the value is not greater than zero.
    """
    token = _next_value(cursor, keyword)
    try:
        value = int(token)
    except ValueError:
        raise MalformedLine(
            f"Bad value. {keyword} = '{token}' is not an integer",
            keyword=str(keyword),
            line=cursor.number,
        ) from None
    if value <= 0:
        raise RangeViolation(
            f"Bad value. {keyword} = {value} must be greater than 0",
            keyword=str(keyword),
            line=cursor.number,
        )
    return value


def parse_float(
    cursor: TokenCursor,
    keyword: Keyword,
    low: float,
    high: float,
    parameter: str | None = None,
) -> float:
    """Read the next word as a float ``v`` with ``low < v <= high``.

    Parameters
    ----------
    cursor : TokenCursor
        Cursor of the line being parsed.
    keyword : Keyword
        Field being parsed, used in error messages.
    low : float
        Exclusive lower bound.
    high : float
        Inclusive upper bound.
    parameter : str | None, optional
        Name of the parameter within the field, for multi-value fields.

    Raises
    ------
    MalformedLine
        If the value is missing or not a number.
    RangeViolation
        If the value is outside ``(low, high]``.
    """
    name = f"{keyword} {parameter}" if parameter else str(keyword)
    token = cursor.next()
    if token is None:
        raise MalformedLine(
            f"Missing {name} value", keyword=str(keyword), line=cursor.number
        )
    try:
        value = float(token)
    except ValueError:
        raise MalformedLine(
            f"Bad value parsing {name}. '{token}' is not a number",
            keyword=str(keyword),
            line=cursor.number,
        ) from None
    if not low < value <= high:
        raise RangeViolation(
            f"Bad value parsing {name}. {value:g} is outside ({low:g}, {high:g}]",
            keyword=str(keyword),
            line=cursor.number,
        )
    return value


def read_int_field(
    cursor: TokenCursor, keyword: Keyword, ctx: "LoaderContext"
) -> int:
    """Read a positive integer field line and count it."""
    value = parse_int(cursor, keyword)
    cursor.expect_end()
    ctx.mark_read(keyword)
    return value


def read_float_field(
    cursor: TokenCursor,
    keyword: Keyword,
    ctx: "LoaderContext",
    low: float,
    high: float,
) -> float:
    """Read a bounded float field line and count it."""
    value = parse_float(cursor, keyword, low, high)
    cursor.expect_end()
    ctx.mark_read(keyword)
    return value


def read_fc_type(cursor: TokenCursor, ctx: "LoaderContext") -> FcType:
    """Read an ``Fc_type`` line: ``absolute`` or ``fractional``.

    Raises
    ------
    MalformedLine
        If the value is missing, unknown, or followed by more words.
    """
    token = _next_value(cursor, Keyword.FC_TYPE)
    try:
        fc_type = FcType(token)
    except ValueError:
        raise MalformedLine(
            f"Bad Fc_type value ({token})",
            keyword=str(Keyword.FC_TYPE),
            line=cursor.number,
        ) from None
    cursor.expect_end()
    ctx.mark_read(Keyword.FC_TYPE)
    return fc_type


def read_switch_block_type(
    cursor: TokenCursor, ctx: "LoaderContext"
) -> SwitchBlockType:
    """Read a ``switch_block_type`` line: ``subset``, ``wilton`` or ``universal``.

    Raises
    ------
    MalformedLine
        If the value is missing, unknown, or followed by more words.
    """
    token = _next_value(cursor, Keyword.SWITCH_BLOCK_TYPE)
    try:
        switch_block_type = SwitchBlockType(token)
    except ValueError:
        raise MalformedLine(
            f"Bad switch_block_type value ({token})",
            keyword=str(Keyword.SWITCH_BLOCK_TYPE),
            line=cursor.number,
        ) from None
    cursor.expect_end()
    ctx.mark_read(Keyword.SWITCH_BLOCK_TYPE)
    return switch_block_type
