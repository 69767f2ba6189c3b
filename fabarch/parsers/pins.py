"""Pin class table construction.

Pin classes are built in two passes over the architecture file. The count pass
finds how many classes exist and how many pins each holds, so that the class
table can be sized before the load pass fills it in file order.
"""

from collections.abc import Iterable

from loguru import logger

from fabarch.define import PIN_KEYWORDS, Keyword, PinSide, PinType
from fabarch.exceptions import ClassConsistencyError, MalformedLine, RangeViolation
from fabarch.model.pin_class import PinClass
from fabarch.tokens import LogicalLine, TokenCursor

CLASS_KEYWORD = "class:"

PIN_POSITIONS = {
    "top": PinSide.TOP,
    "bottom": PinSide.BOTTOM,
    "left": PinSide.LEFT,
    "right": PinSide.RIGHT,
}


def get_class(cursor: TokenCursor) -> int:
    """Consume ``class: <int>`` from a pin line and return the class number.

    Raises
    ------
    MalformedLine
        If the ``class:`` keyword or the class number is missing or not an
        integer.
    RangeViolation
        If the class number is negative.
    """
    if cursor.next() != CLASS_KEYWORD:
        raise MalformedLine(
            "Expected class: keyword", keyword=cursor.keyword, line=cursor.number
        )

    token = cursor.next()
    if token is None:
        raise MalformedLine(
            "Expected class number", keyword=cursor.keyword, line=cursor.number
        )
    try:
        pin_class = int(token)
    except ValueError:
        raise MalformedLine(
            f"Expected class number, got '{token}'",
            keyword=cursor.keyword,
            line=cursor.number,
        ) from None

    if pin_class < 0:
        raise RangeViolation(
            f"Expected class number >= 0, got {pin_class}",
            keyword=cursor.keyword,
            line=cursor.number,
        )
    return pin_class


def count_pass(lines: Iterable[LogicalLine]) -> list[int]:
    """Count the pins of every class declared by ``inpin`` and ``outpin`` lines.

    Parameters
    ----------
    lines : Iterable[LogicalLine]
        Logical lines of the architecture file.

    Returns
    -------
    list[int]
        Number of pins per class, indexed by class number.

    Raises
    ------
    ClassConsistencyError
        If a class number between 0 and the highest class used has no pins.
    """
    # There is always at least one class.
    pins_per_class = [0]

    for line in lines:
        if line.keyword not in PIN_KEYWORDS:
            continue
        pin_class = get_class(TokenCursor(line))
        if pin_class >= len(pins_per_class):
            pins_per_class.extend([0] * (pin_class + 1 - len(pins_per_class)))
        pins_per_class[pin_class] += 1

    for index, count in enumerate(pins_per_class):
        if count == 0:
            raise ClassConsistencyError(
                f"Class index {index} not used in architecture file. "
                "Specified class indices are not consecutive."
            )

    logger.debug(
        f"Found {len(pins_per_class)} pin classes with {sum(pins_per_class)} pins"
    )
    return pins_per_class


class ClassTable:
    """Pin class table filled during the load pass.

    Storage is sized from the counts of the count pass; ``load_pin`` then fills
    it one pin line at a time.

    Parameters
    ----------
    pins_per_class : list[int]
        Result of ``count_pass``.
    """

    def __init__(self, pins_per_class: list[int]) -> None:
        self.pins_per_class = tuple(pins_per_class)
        self.pins_per_clb = sum(pins_per_class)
        self.types = [PinType.OPEN] * len(pins_per_class)
        self.pins: list[list[int]] = [[] for _ in pins_per_class]
        self.pin_class = [-1] * self.pins_per_clb
        self.pin_locations = [PinSide(0)] * self.pins_per_clb
        self._next_pin = 0

    @property
    def num_class(self) -> int:
        return len(self.pins_per_class)

    def load_pin(self, cursor: TokenCursor, pin_type: PinType) -> int:
        """Parse the rest of an ``inpin``/``outpin`` line into the table.

        Parameters
        ----------
        cursor : TokenCursor
            Cursor positioned right after the pin keyword.
        pin_type : PinType
            DRIVER for ``outpin`` lines, RECEIVER for ``inpin`` lines.

        Returns
        -------
        int
            The logic block pin number assigned to this line.

        Raises
        ------
        ClassConsistencyError
            If the class already holds pins of the other type, or the line has
            no or an unknown position word.
        """
        pin_class = get_class(cursor)
        if pin_class >= self.num_class:
            raise ClassConsistencyError(
                f"Class {pin_class} was not seen while counting pin classes",
                keyword=cursor.keyword,
                line=cursor.number,
            )

        if self.types[pin_class] is PinType.OPEN:
            self.types[pin_class] = pin_type
        elif self.types[pin_class] is not pin_type:
            raise ClassConsistencyError(
                f"Class {pin_class} contains both input and output pins",
                keyword=cursor.keyword,
                line=cursor.number,
            )

        pin = self._next_pin
        self._next_pin += 1
        self.pins[pin_class].append(pin)
        self.pin_class[pin] = pin_class

        positions = cursor.rest()
        if not positions:
            raise ClassConsistencyError(
                "Pin statement specifies no locations",
                keyword=cursor.keyword,
                line=cursor.number,
            )
        for position in positions:
            side = PIN_POSITIONS.get(position)
            if side is None:
                raise ClassConsistencyError(
                    f"Bad pin location '{position}'",
                    keyword=cursor.keyword,
                    line=cursor.number,
                )
            self.pin_locations[pin] |= side

        return pin

    def freeze(
        self,
    ) -> tuple[tuple[PinClass, ...], tuple[int, ...], tuple[PinSide, ...]]:
        """Return the immutable class table, pin classes and pin locations."""
        classes = tuple(
            PinClass(index, pin_type, tuple(pins))
            for index, (pin_type, pins) in enumerate(
                zip(self.types, self.pins, strict=True)
            )
        )
        return classes, tuple(self.pin_class), tuple(self.pin_locations)


def pin_type_for(keyword: Keyword) -> PinType:
    """Map a pin keyword to the type of its class."""
    if keyword is Keyword.OUTPIN:
        return PinType.DRIVER
    if keyword is Keyword.INPIN:
        return PinType.RECEIVER
    raise ValueError(f"{keyword} is not a pin keyword")
