"""Architecture file reader - keyword dispatch and the two-pass load.

A load runs in fixed order: the count pass sizes the pin class table, the load
pass dispatches every line to the handler of its keyword, the validator checks
the result, and only then is the context frozen into an ``Architecture``.
"""

from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path

from loguru import logger

from fabarch.context import LoaderContext
from fabarch.define import Keyword, RouteType
from fabarch.model.architecture import Architecture, IgnoredLine
from fabarch.parsers.channel import read_channel
from fabarch.parsers.fields import (
    read_fc_type,
    read_float_field,
    read_int_field,
    read_switch_block_type,
)
from fabarch.parsers.pins import ClassTable, count_pass, pin_type_for
from fabarch.tokens import LogicalLine, TokenCursor, read_arch_lines, tokenize
from fabarch.validate import check_arch

Handler = Callable[[LoaderContext, TokenCursor], None]


class LineOutcome(Enum):
    HANDLED = "handled"
    IGNORED = "ignored"


def _io_rat(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.io_rat = read_int_field(cursor, Keyword.IO_RAT, ctx)


def _chan_width_x(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.chan_x_dist = read_channel(cursor, Keyword.CHAN_WIDTH_X)
    ctx.mark_read(Keyword.CHAN_WIDTH_X)


def _chan_width_y(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.chan_y_dist = read_channel(cursor, Keyword.CHAN_WIDTH_Y)
    ctx.mark_read(Keyword.CHAN_WIDTH_Y)


def _chan_width_io(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.chan_width_io = read_float_field(
        cursor, Keyword.CHAN_WIDTH_IO, ctx, 0.0, 5000.0
    )


def _pin(ctx: LoaderContext, cursor: TokenCursor) -> None:
    keyword = Keyword(cursor.keyword)
    ctx.class_table.load_pin(cursor, pin_type_for(keyword))
    ctx.mark_read(keyword)


def _subblocks_per_cluster(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.max_subblocks_per_block = read_int_field(
        cursor, Keyword.SUBBLOCKS_PER_CLUSTER, ctx
    )


def _subblock_lut_size(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.subblock_lut_size = read_int_field(cursor, Keyword.SUBBLOCK_LUT_SIZE, ctx)


def _fc_output(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.fc_output = read_float_field(cursor, Keyword.FC_OUTPUT, ctx, 0.0, 1e20)


def _fc_input(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.fc_input = read_float_field(cursor, Keyword.FC_INPUT, ctx, 0.0, 1e20)


def _fc_pad(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.fc_pad = read_float_field(cursor, Keyword.FC_PAD, ctx, 0.0, 1e20)


def _fc_type(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.fc_type = read_fc_type(cursor, ctx)


def _switch_block_type(ctx: LoaderContext, cursor: TokenCursor) -> None:
    ctx.switch_block_type = read_switch_block_type(cursor, ctx)


HANDLERS: dict[Keyword, Handler] = {
    Keyword.IO_RAT: _io_rat,
    Keyword.CHAN_WIDTH_X: _chan_width_x,
    Keyword.CHAN_WIDTH_Y: _chan_width_y,
    Keyword.CHAN_WIDTH_IO: _chan_width_io,
    Keyword.OUTPIN: _pin,
    Keyword.INPIN: _pin,
    Keyword.SUBBLOCKS_PER_CLUSTER: _subblocks_per_cluster,
    Keyword.SUBBLOCK_LUT_SIZE: _subblock_lut_size,
    Keyword.FC_OUTPUT: _fc_output,
    Keyword.FC_INPUT: _fc_input,
    Keyword.FC_PAD: _fc_pad,
    Keyword.FC_TYPE: _fc_type,
    Keyword.SWITCH_BLOCK_TYPE: _switch_block_type,
}


def dispatch(
    ctx: LoaderContext, line: LogicalLine, warn_unknown_keywords: bool = False
) -> LineOutcome:
    """Route one logical line to the handler of its leading keyword.

    Lines with an unknown keyword are not an error. They are recorded in the
    context and skipped.

    Parameters
    ----------
    ctx : LoaderContext
        Context of the running load.
    line : LogicalLine
        The line to handle.
    warn_unknown_keywords : bool, optional
        Log skipped lines as warnings instead of debug messages.

    Returns
    -------
    LineOutcome
        Whether the line was handled or ignored.
    """
    try:
        keyword = Keyword(line.keyword)
    except ValueError:
        ctx.ignored_lines.append(IgnoredLine(line.number, line.keyword))
        message = f"Ignoring unknown keyword '{line.keyword}' on line {line.number}"
        if warn_unknown_keywords:
            logger.warning(message)
        else:
            logger.debug(message)
        return LineOutcome.IGNORED

    HANDLERS[keyword](ctx, TokenCursor(line))
    return LineOutcome.HANDLED


class ArchReader:
    """Reader for architecture description files.

    Parameters
    ----------
    route_type : RouteType, optional
        Route type the architecture is validated for. DETAILED additionally
        requires the Fc and switch block fields. Default GLOBAL.
    warn_unknown_keywords : bool, optional
        Log lines with an unknown keyword as warnings. Default False.
    """

    def __init__(
        self,
        route_type: RouteType = RouteType.GLOBAL,
        warn_unknown_keywords: bool = False,
    ) -> None:
        self.route_type = route_type
        self.warn_unknown_keywords = warn_unknown_keywords

    def read(self, path: Path) -> Architecture:
        """Load and validate the architecture file at ``path``.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        ArchError
            If the description is malformed, incomplete or inconsistent.
        """
        logger.info(f"Reading architecture file {path}")
        return self.read_lines(read_arch_lines(path), source=str(path))

    def read_text(self, text: str, source: str = "<string>") -> Architecture:
        """Load and validate an architecture description held in a string."""
        return self.read_lines(list(tokenize(text.splitlines())), source=source)

    def read_lines(
        self, lines: Iterable[LogicalLine], source: str = "<lines>"
    ) -> Architecture:
        """Load and validate already tokenized logical lines."""
        lines = list(lines)

        class_table = ClassTable(count_pass(lines))
        ctx = LoaderContext(source, self.route_type, class_table)

        for line in lines:
            dispatch(ctx, line, self.warn_unknown_keywords)

        check_arch(ctx)
        arch = ctx.freeze()
        logger.debug(
            f"Loaded {arch.num_class} pin classes, {arch.pins_per_clb} pins per clb "
            f"from {source}"
        )
        return arch


def read_arch(
    path: str | Path,
    route_type: RouteType = RouteType.GLOBAL,
    warn_unknown_keywords: bool = False,
) -> Architecture:
    """Load and validate an architecture file.

    Parameters
    ----------
    path : str | Path
        Path to the architecture file.
    route_type : RouteType, optional
        Route type the architecture is validated for. Default GLOBAL.
    warn_unknown_keywords : bool, optional
        Log lines with an unknown keyword as warnings. Default False.

    Returns
    -------
    Architecture
        The frozen architecture description.
    """
    return ArchReader(route_type, warn_unknown_keywords).read(Path(path))
