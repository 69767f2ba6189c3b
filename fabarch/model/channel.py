"""Channel width distributions along one grid axis."""

from dataclasses import dataclass
from typing import ClassVar

from fabarch.define import ChannelType


@dataclass(frozen=True)
class ChannelDistribution:
    """Distribution of routing tracks across the channels of one grid axis.

    Attributes
    ----------
    peak : float
        Peak channel width, relative to the widest core channel.
    """

    type: ClassVar[ChannelType]

    peak: float


@dataclass(frozen=True)
class UniformChannel(ChannelDistribution):
    """All channels along the axis have the same width."""

    type: ClassVar[ChannelType] = ChannelType.UNIFORM


@dataclass(frozen=True)
class DeltaChannel(ChannelDistribution):
    """A single channel at ``xpeak`` is ``peak`` wide, all others ``dc``."""

    type: ClassVar[ChannelType] = ChannelType.DELTA

    xpeak: float
    dc: float


@dataclass(frozen=True)
class GaussianChannel(ChannelDistribution):
    """Channel width follows a gaussian centred on ``xpeak`` over a ``dc`` floor."""

    type: ClassVar[ChannelType] = ChannelType.GAUSSIAN

    width: float
    xpeak: float
    dc: float


@dataclass(frozen=True)
class PulseChannel(ChannelDistribution):
    """Channels within ``width`` of ``xpeak`` are ``peak`` wide, others ``dc``."""

    type: ClassVar[ChannelType] = ChannelType.PULSE

    width: float
    xpeak: float
    dc: float
