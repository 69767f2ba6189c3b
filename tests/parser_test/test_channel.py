"""Tests for the channel width distribution parser."""

import pytest

from fabarch.define import ChannelType, Keyword
from fabarch.exceptions import MalformedLine, RangeViolation
from fabarch.model.channel import (
    DeltaChannel,
    GaussianChannel,
    PulseChannel,
    UniformChannel,
)
from fabarch.parsers.channel import read_channel
from fabarch.tokens import LogicalLine, TokenCursor


def parse(text: str) -> object:
    line = LogicalLine(3, tuple(f"chan_width_x {text}".split()))
    return read_channel(TokenCursor(line), Keyword.CHAN_WIDTH_X)


def test_uniform() -> None:
    """Test a uniform distribution."""
    chan = parse("uniform 0.5")
    assert chan == UniformChannel(peak=0.5)
    assert chan.type is ChannelType.UNIFORM


def test_uniform_closed_upper_bound() -> None:
    """Test that a peak of exactly 1 is accepted."""
    assert parse("uniform 1") == UniformChannel(peak=1.0)


@pytest.mark.parametrize("peak", [-1e5, 1e5])
def test_delta_peak_closed_bounds(peak: float) -> None:
    """Test that a delta peak of exactly -1e5 or 1e5 is accepted."""
    assert parse(f"delta {peak:g} 0.5 0.5") == DeltaChannel(peak=peak, xpeak=0.5, dc=0.5)


def test_delta_peak_below_range() -> None:
    with pytest.raises(RangeViolation, match="chan_width_x peak"):
        parse("delta -100001 0.5 0.5")


def test_uniform_open_lower_bound() -> None:
    """Test that a peak of exactly 0 is rejected."""
    with pytest.raises(RangeViolation, match="chan_width_x peak"):
        parse("uniform 0")


def test_delta() -> None:
    """Test a delta distribution, including zero xpeak and dc."""
    assert parse("delta 2.5 0 0") == DeltaChannel(peak=2.5, xpeak=0.0, dc=0.0)


@pytest.mark.parametrize(
    ("shape", "variant"), [("gaussian", GaussianChannel), ("pulse", PulseChannel)]
)
def test_peaked_shapes(shape: str, variant: type) -> None:
    """Test gaussian and pulse distributions."""
    chan = parse(f"{shape} 1 0.5 0.5 0.25")
    assert chan == variant(peak=1.0, width=0.5, xpeak=0.5, dc=0.25)


@pytest.mark.parametrize(
    ("text", "parameter"),
    [
        ("gaussian -1 0.5 0.5 0.5", "peak"),
        ("gaussian 1 0 0.5 0.5", "width"),
        ("pulse 1 0.5 1.5 0.5", "xpeak"),
        ("pulse 1 0.5 0.5 -0.1", "dc"),
        ("delta 1e6 0.5 0.5", "peak"),
    ],
)
def test_out_of_range_names_parameter(text: str, parameter: str) -> None:
    """Test that range errors name the field and the parameter."""
    with pytest.raises(RangeViolation, match=f"chan_width_x {parameter}") as excinfo:
        parse(text)
    assert excinfo.value.line == 3


def test_unknown_distribution() -> None:
    """Test an unknown distribution keyword."""
    with pytest.raises(MalformedLine, match="distribution keyword: triangle unknown"):
        parse("triangle 1")


def test_missing_distribution() -> None:
    """Test a channel line without a distribution."""
    with pytest.raises(MalformedLine, match="Missing chan_width_x value"):
        parse("")


def test_missing_parameter() -> None:
    """Test a gaussian line with too few values."""
    with pytest.raises(MalformedLine, match="Missing chan_width_x dc value"):
        parse("gaussian 1 0.5 0.5")


def test_extra_value() -> None:
    """Test a trailing value after the last parameter."""
    with pytest.raises(
        MalformedLine, match="Extra characters at end of chan_width_x line: '0.3'"
    ):
        parse("uniform 1 0.3")
