"""Pin classes of a logic block."""

from dataclasses import dataclass

from fabarch.define import PinType


@dataclass(frozen=True)
class PinClass:
    """A group of logically equivalent logic block pins.

    All pins of a class are interchangeable for the router, such as all the
    inputs of a LUT. A class holds either only driver (output) pins or only
    receiver (input) pins.

    Attributes
    ----------
    index : int
        Class number as written after ``class:`` in the architecture file.
    type : PinType
        DRIVER for ``outpin`` classes, RECEIVER for ``inpin`` classes.
    pins : tuple[int, ...]
        Logic block pin numbers in the order they appear in the file.
    """

    index: int
    type: PinType
    pins: tuple[int, ...]

    @property
    def num_pins(self) -> int:
        return len(self.pins)
