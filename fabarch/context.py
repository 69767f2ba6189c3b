"""Loader context - holds the state of one architecture load.

Every handler of the keyword dispatcher reads and writes this object instead of
module level state. A context is created at the start of a load, filled while
the file is scanned, checked by the validator and finally frozen into an
``Architecture``. It is never reused for a second load.
"""

from collections import Counter

from fabarch.define import FcType, Keyword, RouteType, SwitchBlockType
from fabarch.model.architecture import (
    Architecture,
    IgnoredLine,
    LogicBlockConfig,
    RoutingArchConfig,
)
from fabarch.model.channel import ChannelDistribution
from fabarch.parsers.pins import ClassTable


class LoaderContext:
    """Mutable state of one architecture load.

    Parameters
    ----------
    source : str
        Name of the architecture file, used in messages.
    route_type : RouteType
        Route type the architecture is loaded for.
    class_table : ClassTable
        Class table sized by the count pass.

    Attributes
    ----------
    occurrences : Counter[Keyword]
        How often each keyword has been matched.
    ignored_lines : list[IgnoredLine]
        Lines skipped because of an unknown keyword.
    """

    def __init__(
        self, source: str, route_type: RouteType, class_table: ClassTable
    ) -> None:
        self.source = source
        self.route_type = route_type
        self.class_table = class_table
        self.occurrences: Counter[Keyword] = Counter()
        self.ignored_lines: list[IgnoredLine] = []

        self.io_rat: int | None = None
        self.chan_width_io: float | None = None
        self.max_subblocks_per_block: int | None = None
        self.subblock_lut_size: int | None = None
        self.chan_x_dist: ChannelDistribution | None = None
        self.chan_y_dist: ChannelDistribution | None = None

        self.fc_type: FcType | None = None
        self.fc_output: float | None = None
        self.fc_input: float | None = None
        self.fc_pad: float | None = None
        self.switch_block_type: SwitchBlockType | None = None

    @property
    def detailed(self) -> bool:
        return self.route_type is RouteType.DETAILED

    def mark_read(self, keyword: Keyword) -> None:
        self.occurrences[keyword] += 1

    def freeze(self) -> Architecture:
        """Build the immutable architecture from a validated context.

        Raises
        ------
        RuntimeError
            If a mandatory field is unset, meaning validation was skipped.
        """
        if (
            self.io_rat is None
            or self.chan_width_io is None
            or self.max_subblocks_per_block is None
            or self.subblock_lut_size is None
            or self.chan_x_dist is None
            or self.chan_y_dist is None
        ):
            raise RuntimeError("Cannot freeze an architecture that was not validated")

        pin_classes, pin_class, pin_locations = self.class_table.freeze()
        return Architecture(
            source=self.source,
            route_type=self.route_type,
            logic_block=LogicBlockConfig(
                io_rat=self.io_rat,
                chan_width_io=self.chan_width_io,
                max_subblocks_per_block=self.max_subblocks_per_block,
                subblock_lut_size=self.subblock_lut_size,
            ),
            routing=RoutingArchConfig(
                fc_type=self.fc_type,
                fc_output=self.fc_output,
                fc_input=self.fc_input,
                fc_pad=self.fc_pad,
                switch_block_type=self.switch_block_type,
            ),
            chan_x_dist=self.chan_x_dist,
            chan_y_dist=self.chan_y_dist,
            pin_classes=pin_classes,
            pin_class=pin_class,
            pin_locations=pin_locations,
            ignored_lines=tuple(self.ignored_lines),
        )
