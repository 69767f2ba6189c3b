"""Frozen result of loading an architecture description."""

from dataclasses import dataclass

from fabarch.define import FcType, PinSide, RouteType, SwitchBlockType
from fabarch.model.channel import ChannelDistribution
from fabarch.model.pin_class import PinClass


@dataclass(frozen=True)
class LogicBlockConfig:
    """Logic block and IO parameters of the architecture.

    Attributes
    ----------
    io_rat : int
        Number of IO pads that fit in the area of one logic block.
    chan_width_io : float
        Width of the channels between the pads and the core, relative to the
        widest core channel.
    max_subblocks_per_block : int
        Maximum number of LUT + flip-flop subblocks in a logic block.
    subblock_lut_size : int
        Number of LUT inputs of each subblock.
    """

    io_rat: int
    chan_width_io: float
    max_subblocks_per_block: int
    subblock_lut_size: int


@dataclass(frozen=True)
class RoutingArchConfig:
    """Detailed routing parameters.

    The values are only meaningful when the architecture was loaded for
    detailed routing; fields not present in the file are ``None``.
    """

    fc_type: FcType | None = None
    fc_output: float | None = None
    fc_input: float | None = None
    fc_pad: float | None = None
    switch_block_type: SwitchBlockType | None = None


@dataclass(frozen=True)
class IgnoredLine:
    """A line whose leading keyword is not part of the architecture format."""

    line: int
    keyword: str


@dataclass(frozen=True)
class Architecture:
    """Result of loading an architecture description.

    Attributes
    ----------
    source : str
        Name of the file (or stream) the architecture was read from.
    route_type : RouteType
        Route type the architecture was validated for.
    logic_block : LogicBlockConfig
        Logic block and IO parameters.
    routing : RoutingArchConfig
        Detailed routing parameters.
    chan_x_dist : ChannelDistribution
        Track distribution of the x-directed channels.
    chan_y_dist : ChannelDistribution
        Track distribution of the y-directed channels.
    pin_classes : tuple[PinClass, ...]
        Pin class table, indexed by class number.
    pin_class : tuple[int, ...]
        Class number of every logic block pin, indexed by pin number.
    pin_locations : tuple[PinSide, ...]
        Sides every logic block pin connects to, indexed by pin number.
    ignored_lines : tuple[IgnoredLine, ...]
        Lines skipped because of an unknown keyword.
    """

    source: str
    route_type: RouteType
    logic_block: LogicBlockConfig
    routing: RoutingArchConfig
    chan_x_dist: ChannelDistribution
    chan_y_dist: ChannelDistribution
    pin_classes: tuple[PinClass, ...]
    pin_class: tuple[int, ...]
    pin_locations: tuple[PinSide, ...]
    ignored_lines: tuple[IgnoredLine, ...] = ()

    @property
    def num_class(self) -> int:
        return len(self.pin_classes)

    @property
    def pins_per_clb(self) -> int:
        return len(self.pin_class)

    @property
    def io_rat(self) -> int:
        return self.logic_block.io_rat
