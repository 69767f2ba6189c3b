"""Parser for ``chan_width_x`` and ``chan_width_y`` distribution lines.

Accepted forms::

    uniform  <peak>
    delta    <peak> <xpeak> <dc>
    gaussian <peak> <width> <xpeak> <dc>
    pulse    <peak> <width> <xpeak> <dc>
"""

import math

from fabarch.define import Keyword
from fabarch.exceptions import MalformedLine
from fabarch.model.channel import (
    ChannelDistribution,
    DeltaChannel,
    GaussianChannel,
    PulseChannel,
    UniformChannel,
)
from fabarch.parsers.fields import parse_float
from fabarch.tokens import TokenCursor

# Lower bound that still admits exactly 0.
_ZERO = -1e-30

# Exclusive bound that admits exactly -1e5.
_DELTA_LOW = math.nextafter(-1e5, -math.inf)

_PEAKED = (
    ("peak", -1.0, 1.0),
    ("width", 0.0, 1e10),
    ("xpeak", _ZERO, 1.0),
    ("dc", _ZERO, 1.0),
)

Parameters = tuple[tuple[str, float, float], ...]

# shape keyword -> (variant, parameters)
CHANNEL_SHAPES: dict[str, tuple[type[ChannelDistribution], Parameters]] = {
    "uniform": (UniformChannel, (("peak", 0.0, 1.0),)),
    "delta": (
        DeltaChannel,
        (("peak", _DELTA_LOW, 1e5), ("xpeak", _ZERO, 1.0), ("dc", _ZERO, 1.0)),
    ),
    "gaussian": (GaussianChannel, _PEAKED),
    "pulse": (PulseChannel, _PEAKED),
}


def read_channel(cursor: TokenCursor, keyword: Keyword) -> ChannelDistribution:
    """Parse the distribution of a channel width line.

    Parameters
    ----------
    cursor : TokenCursor
        Cursor positioned right after ``chan_width_x`` or ``chan_width_y``.
    keyword : Keyword
        The channel keyword being parsed.

    Returns
    -------
    ChannelDistribution
        The parsed distribution variant.

    Raises
    ------
    MalformedLine
        If the distribution keyword is missing or unknown, a parameter is
        missing, or the line has extra words.
    RangeViolation
        If a parameter is outside its range.
    """
    shape = cursor.next()
    if shape is None:
        raise MalformedLine(
            f"Missing {keyword} value", keyword=str(keyword), line=cursor.number
        )
    if shape not in CHANNEL_SHAPES:
        raise MalformedLine(
            f"{keyword} distribution keyword: {shape} unknown",
            keyword=str(keyword),
            line=cursor.number,
        )

    variant, parameters = CHANNEL_SHAPES[shape]
    values = {
        name: parse_float(cursor, keyword, low, high, parameter=name)
        for name, low, high in parameters
    }

    extra = cursor.next()
    if extra is not None:
        raise MalformedLine(
            f"Extra characters at end of {keyword} line: '{extra}'",
            keyword=str(keyword),
            line=cursor.number,
        )
    return variant(**values)
