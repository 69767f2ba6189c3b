"""Exceptions raised while loading an architecture description or sizing a grid.

Every error is fatal for the load that raised it. The loader never terminates the
process; callers (such as the CLI) decide what to do with the error.
"""


class ArchError(Exception):
    """Base class for all architecture loading errors.

    Parameters
    ----------
    message : str
        Human readable description of the problem.
    keyword : str | None, optional
        Architecture file keyword (field) the error relates to.
    line : int | None, optional
        Line number in the architecture file where the error was detected.
    """

    def __init__(
        self, message: str, *, keyword: str | None = None, line: int | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.keyword = keyword
        self.line = line

    @property
    def kind(self) -> str:
        """Name of the error category."""
        return type(self).__name__

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.message} (line {self.line})"
        return self.message


class MalformedLine(ArchError):
    """A line is missing an expected token or carries an unexpected one."""


class RangeViolation(ArchError):
    """A numeric value is outside the allowed bound for its field."""


class DuplicateDeclaration(ArchError):
    """A field that must be set once was set more than once."""


class MissingDeclaration(ArchError):
    """A mandatory field was never set."""


class ClassConsistencyError(ArchError):
    """The pin class table is inconsistent."""


class CrossFieldInconsistency(ArchError):
    """Fields are individually valid but do not agree with each other."""


class FcRangeError(CrossFieldInconsistency, RangeViolation):
    """An Fc value is outside the legal range for the selected Fc type."""


class GridSizingError(ArchError):
    """The device grid cannot be built for the given circuit."""


class IncompleteArchitecture(ArchError):
    """One or more fields are missing or declared more than once.

    Parameters
    ----------
    source : str
        Name of the architecture file that was checked.
    errors : list[ArchError]
        Every individual declaration error found.
    """

    def __init__(self, source: str, errors: list[ArchError]) -> None:
        self.errors = errors
        details = "\n".join(f"  {e}" for e in errors)
        super().__init__(
            f"{len(errors)} declaration error(s) in architecture file {source}:\n"
            f"{details}"
        )
