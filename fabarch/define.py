"""Enumerations and constants shared by the architecture loader."""

from enum import Enum, Flag, auto


class Keyword(str, Enum):
    """Keywords recognised at the start of an architecture file line."""

    IO_RAT = "io_rat"
    CHAN_WIDTH_X = "chan_width_x"
    CHAN_WIDTH_Y = "chan_width_y"
    CHAN_WIDTH_IO = "chan_width_io"
    OUTPIN = "outpin"
    INPIN = "inpin"
    SUBBLOCKS_PER_CLUSTER = "subblocks_per_cluster"
    SUBBLOCK_LUT_SIZE = "subblock_lut_size"
    FC_OUTPUT = "Fc_output"
    FC_INPUT = "Fc_input"
    FC_PAD = "Fc_pad"
    FC_TYPE = "Fc_type"
    SWITCH_BLOCK_TYPE = "switch_block_type"

    def __str__(self) -> str:
        return self.value


PIN_KEYWORDS = (Keyword.OUTPIN, Keyword.INPIN)

# Only needed when the router builds a detailed routing resource graph.
DETAILED_ONLY_KEYWORDS = (
    Keyword.FC_OUTPUT,
    Keyword.FC_INPUT,
    Keyword.FC_PAD,
    Keyword.FC_TYPE,
    Keyword.SWITCH_BLOCK_TYPE,
)


class RouteType(str, Enum):
    GLOBAL = "global"
    DETAILED = "detailed"


class PinType(Enum):
    """Role of a pin class. OPEN marks a class that has not been seen yet."""

    OPEN = "OPEN"
    DRIVER = "DRIVER"
    RECEIVER = "RECEIVER"


class PinSide(Flag):
    """Sides of a logic block a pin can physically connect to."""

    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()


class ChannelType(Enum):
    UNIFORM = "UNIFORM"
    GAUSSIAN = "GAUSSIAN"
    PULSE = "PULSE"
    DELTA = "DELTA"


class FcType(Enum):
    ABSOLUTE = "absolute"
    FRACTIONAL = "fractional"


class SwitchBlockType(Enum):
    SUBSET = "subset"
    WILTON = "wilton"
    UNIVERSAL = "universal"


class CellType(Enum):
    IO = "IO"
    CLB = "CLB"
    ILLEGAL = "ILLEGAL"


# Router stores coordinates in 16 bit integers.
MAX_GRID_DIMENSION = 32766

# Empty pad slot.
OPEN = -1
