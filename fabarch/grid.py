"""Device grid sizing and construction.

The grid has ``nx`` columns and ``ny`` rows of logic blocks surrounded by a ring
of IO cells. Indexing is ``cells[x][y]`` with ``0 <= x <= nx + 1`` and
``0 <= y <= ny + 1``.

IO cells share one pool of ``2 * io_rat * (nx + ny)`` pad slots, ``io_rat`` per
cell. Downstream tools address pads by their position in the pool, so the carve
order is fixed:

1. for each row ``y = 1 .. ny``: the left cell ``(0, y)``, then the right cell
   ``(nx + 1, y)``
2. for each column ``x = 1 .. nx``: the bottom cell ``(x, 0)``, then the top cell
   ``(x, ny + 1)``
"""

import math

from loguru import logger

from fabarch.define import MAX_GRID_DIMENSION, OPEN, CellType
from fabarch.exceptions import GridSizingError
from fabarch.model.architecture import Architecture
from fabarch.model.grid import Cell, CircuitStats, Grid


def _ceil(value: float) -> int:
    # 50 * 1.1 == 55.000000000000014 must give 55.
    return math.ceil(round(value, 9))


def size_grid(
    io_rat: int,
    stats: CircuitStats,
    aspect_ratio: float = 1.0,
    dimensions: tuple[int, int] | None = None,
) -> tuple[int, int]:
    """Resolve the device dimensions for a circuit.

    Parameters
    ----------
    io_rat : int
        Number of pads per IO cell.
    stats : CircuitStats
        Block counts of the circuit.
    aspect_ratio : float, optional
        Target width / height ratio used when sizing automatically.
    dimensions : tuple[int, int] | None, optional
        User specified ``(nx, ny)``. When given only checked, not recomputed.

    Returns
    -------
    tuple[int, int]
        ``(nx, ny)``

    Raises
    ------
    GridSizingError
        If the user specified size is too small for the circuit, the grid has a
        single logic block location, or a dimension is out of bounds.
    """
    if io_rat <= 0:
        raise GridSizingError(f"io_rat must be greater than 0, got {io_rat}")

    if dimensions is not None:
        nx, ny = dimensions
        if stats.num_clbs > nx * ny or stats.num_pads > 2 * io_rat * (nx + ny):
            raise GridSizingError(
                f"User-specified size {nx}x{ny} is too small for circuit with "
                f"{stats.num_clbs} clbs and {stats.num_pads} pads"
            )
    else:
        if aspect_ratio <= 0:
            raise GridSizingError(
                f"Aspect ratio must be greater than 0, got {aspect_ratio:g}"
            )
        # Area = nx * ny = ny * ny * aspect_ratio
        # Perimeter = 2 * (nx + ny) = 2 * ny * (1 + aspect_ratio)
        ny = _ceil(math.sqrt(stats.num_clbs / aspect_ratio))
        io_lim = _ceil(stats.num_pads / (2 * io_rat * (1.0 + aspect_ratio)))
        ny = max(ny, io_lim)
        nx = _ceil(ny * aspect_ratio)

    # The placer needs a second location to move a lone clb to.
    if nx == 1 and ny == 1 and stats.num_clbs != 0:
        raise GridSizingError(
            "Cannot place a circuit with only one valid location for a logic block"
        )
    if nx < 1 or ny < 1:
        raise GridSizingError(f"Grid must be at least 1x1, got nx: {nx}, ny: {ny}")
    if nx > MAX_GRID_DIMENSION or ny > MAX_GRID_DIMENSION:
        raise GridSizingError(
            f"nx and ny must be at most {MAX_GRID_DIMENSION}, since the router "
            f"stores coordinates in 16 bits. nx: {nx}, ny: {ny}"
        )
    return nx, ny


def fill_grid(nx: int, ny: int, io_rat: int) -> Grid:
    """Build the cell grid and carve the pad slot pool for given dimensions."""
    cells: list[list[Cell]] = [
        [Cell(CellType.CLB) for _ in range(ny + 2)] for _ in range(nx + 2)
    ]

    offset = 0

    def io_cell() -> Cell:
        nonlocal offset
        cell = Cell(CellType.IO, range(offset, offset + io_rat))
        offset += io_rat
        return cell

    for y in range(1, ny + 1):
        cells[0][y] = io_cell()
        cells[nx + 1][y] = io_cell()
    for x in range(1, nx + 1):
        cells[x][0] = io_cell()
        cells[x][ny + 1] = io_cell()

    # Nothing goes in the corners.
    for x, y in ((0, 0), (nx + 1, 0), (0, ny + 1), (nx + 1, ny + 1)):
        cells[x][y] = Cell(CellType.ILLEGAL)

    return Grid(
        nx=nx,
        ny=ny,
        io_rat=io_rat,
        cells=tuple(tuple(column) for column in cells),
        pad_slots=(OPEN,) * offset,
    )


def build_grid(
    io_rat: int,
    stats: CircuitStats,
    aspect_ratio: float = 1.0,
    dimensions: tuple[int, int] | None = None,
) -> Grid:
    """Size the device for a circuit and build its grid.

    See ``size_grid`` for the parameters and errors.
    """
    nx, ny = size_grid(io_rat, stats, aspect_ratio, dimensions)
    logger.info(f"FPGA size: {nx} x {ny} logic blocks")
    return fill_grid(nx, ny, io_rat)


def init_arch(
    arch: Architecture,
    stats: CircuitStats,
    aspect_ratio: float = 1.0,
    dimensions: tuple[int, int] | None = None,
) -> Grid:
    """Build the device grid of a loaded architecture for a circuit."""
    return build_grid(arch.io_rat, stats, aspect_ratio, dimensions)
