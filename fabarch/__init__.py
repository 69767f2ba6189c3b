"""fabarch - FPGA architecture description loader.

This package reads the architecture description of an island-style FPGA and
derives the device grid for a circuit.

Processing Pipeline
-------------------
1. **Tokenizer**: architecture file → logical lines
2. **Reader**: count pass sizes the pin class table, load pass dispatches every
   line to the parser of its keyword
3. **Validator**: completeness and cross-field checks → frozen Architecture
4. **Grid builder**: Architecture + circuit statistics → device Grid

Quick Start
-----------
::

    from fabarch import CircuitStats, RouteType, init_arch, read_arch

    arch = read_arch("k4-n1.arch", RouteType.DETAILED)
    grid = init_arch(arch, CircuitStats(num_clbs=100, num_p_inputs=8))
"""

from fabarch.define import (
    CellType,
    ChannelType,
    FcType,
    Keyword,
    PinSide,
    PinType,
    RouteType,
    SwitchBlockType,
)
from fabarch.exceptions import (
    ArchError,
    ClassConsistencyError,
    CrossFieldInconsistency,
    DuplicateDeclaration,
    FcRangeError,
    GridSizingError,
    IncompleteArchitecture,
    MalformedLine,
    MissingDeclaration,
    RangeViolation,
)
from fabarch.grid import build_grid, init_arch, size_grid
from fabarch.model import (
    Architecture,
    Cell,
    CircuitStats,
    Grid,
    LogicBlockConfig,
    PinClass,
    RoutingArchConfig,
)
from fabarch.reader import ArchReader, read_arch
from fabarch.report import format_echo, write_echo

__all__ = [
    # Loading
    "ArchReader",
    "read_arch",
    # Grid
    "build_grid",
    "init_arch",
    "size_grid",
    # Echo
    "format_echo",
    "write_echo",
    # Data model
    "Architecture",
    "Cell",
    "CircuitStats",
    "Grid",
    "LogicBlockConfig",
    "PinClass",
    "RoutingArchConfig",
    # Enums
    "CellType",
    "ChannelType",
    "FcType",
    "Keyword",
    "PinSide",
    "PinType",
    "RouteType",
    "SwitchBlockType",
    # Errors
    "ArchError",
    "ClassConsistencyError",
    "CrossFieldInconsistency",
    "DuplicateDeclaration",
    "FcRangeError",
    "GridSizingError",
    "IncompleteArchitecture",
    "MalformedLine",
    "MissingDeclaration",
    "RangeViolation",
]
