"""Device grid, its cells and the circuit statistics used to size it."""

from dataclasses import dataclass

from fabarch.define import CellType


@dataclass(frozen=True)
class CircuitStats:
    """Block counts of the circuit that has to fit on the device.

    Attributes
    ----------
    num_clbs : int
        Number of logic blocks.
    num_p_inputs : int
        Number of primary input pads.
    num_p_outputs : int
        Number of primary output pads.
    """

    num_clbs: int
    num_p_inputs: int = 0
    num_p_outputs: int = 0

    @property
    def num_pads(self) -> int:
        return self.num_p_inputs + self.num_p_outputs


@dataclass(frozen=True)
class Cell:
    """One location of the device grid.

    Attributes
    ----------
    type : CellType
        IO on the perimeter, CLB in the interior, ILLEGAL in the corners.
    io_slots : range | None
        Offsets of the pad slots of an IO cell in ``Grid.pad_slots``.
    """

    type: CellType
    io_slots: range | None = None


@dataclass(frozen=True)
class Grid:
    """Device grid of ``(nx + 2) x (ny + 2)`` cells, indexed ``cells[x][y]``.

    Attributes
    ----------
    nx : int
        Number of logic block columns.
    ny : int
        Number of logic block rows.
    io_rat : int
        Pad slots per IO cell.
    cells : tuple[tuple[Cell, ...], ...]
        Grid cells, outer index is the column.
    pad_slots : tuple[int, ...]
        Shared pad slot pool of ``2 * io_rat * (nx + ny)`` entries. IO cells
        own consecutive slices of it; every slot starts as ``OPEN``.
    """

    nx: int
    ny: int
    io_rat: int
    cells: tuple[tuple[Cell, ...], ...]
    pad_slots: tuple[int, ...]

    def __getitem__(self, xy: tuple[int, int]) -> Cell:
        x, y = xy
        return self.cells[x][y]

    @property
    def width(self) -> int:
        return self.nx + 2

    @property
    def height(self) -> int:
        return self.ny + 2

    def io_blocks(self, x: int, y: int) -> tuple[int, ...]:
        """Return the pad slots of the IO cell at ``(x, y)``.

        Raises
        ------
        ValueError
            If the cell is not an IO cell.
        """
        cell = self.cells[x][y]
        if cell.io_slots is None:
            raise ValueError(f"Cell {x}/{y} is {cell.type.value}, not IO")
        return self.pad_slots[cell.io_slots.start : cell.io_slots.stop]
