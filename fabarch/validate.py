"""Completeness and consistency checks of a loaded architecture."""

from typing import TYPE_CHECKING

from loguru import logger

from fabarch.define import (
    DETAILED_ONLY_KEYWORDS,
    PIN_KEYWORDS,
    ChannelType,
    FcType,
    Keyword,
)
from fabarch.exceptions import (
    ArchError,
    CrossFieldInconsistency,
    DuplicateDeclaration,
    FcRangeError,
    IncompleteArchitecture,
    MissingDeclaration,
)

if TYPE_CHECKING:
    from fabarch.context import LoaderContext


def mandatory_keywords(detailed: bool) -> list[Keyword]:
    """Return the keywords an architecture file has to contain."""
    if detailed:
        return list(Keyword)
    return [k for k in Keyword if k not in DETAILED_ONLY_KEYWORDS]


def check_declarations(ctx: "LoaderContext") -> None:
    """Check that every mandatory field was set the right number of times.

    Pin keywords must appear at least once, every other mandatory keyword exactly
    once. All violations are collected before raising.

    Raises
    ------
    IncompleteArchitecture
        Holding a ``MissingDeclaration`` or ``DuplicateDeclaration`` per
        offending keyword.
    """
    errors: list[ArchError] = []
    for keyword in mandatory_keywords(ctx.detailed):
        count = ctx.occurrences[keyword]
        if keyword in PIN_KEYWORDS:
            if count < 1:
                errors.append(
                    MissingDeclaration(
                        f"Clb has {count} {keyword}(s) in file {ctx.source}",
                        keyword=str(keyword),
                    )
                )
        elif count == 0:
            errors.append(
                MissingDeclaration(
                    f"{keyword} not set in file {ctx.source}", keyword=str(keyword)
                )
            )
        elif count > 1:
            errors.append(
                DuplicateDeclaration(
                    f"{keyword} set {count} times in file {ctx.source}",
                    keyword=str(keyword),
                )
            )

    if errors:
        for error in errors:
            logger.error(str(error))
        raise IncompleteArchitecture(ctx.source, errors)


def check_detailed_routing(ctx: "LoaderContext") -> None:
    """Check the cross-field rules that apply to detailed routing.

    Raises
    ------
    CrossFieldInconsistency
        If the channels are not uniform and of the same width as the IO
        channels.
    FcRangeError
        If an Fc value is illegal for the selected Fc type.
    """
    x, y = ctx.chan_x_dist, ctx.chan_y_dist
    if (
        x.type is not ChannelType.UNIFORM
        or y.type is not ChannelType.UNIFORM
        or x.peak != y.peak
        or x.peak != ctx.chan_width_io
    ):
        raise CrossFieldInconsistency(
            "Detailed routing is only supported on FPGAs with uniform channels "
            "of equal width (chan_width_x, chan_width_y and chan_width_io)"
        )

    fc_values = {
        Keyword.FC_OUTPUT: ctx.fc_output,
        Keyword.FC_INPUT: ctx.fc_input,
        Keyword.FC_PAD: ctx.fc_pad,
    }
    if ctx.fc_type is FcType.ABSOLUTE:
        for keyword, value in fc_values.items():
            if value < 1:
                raise FcRangeError(
                    "Fc values must be >= 1 in absolute mode, "
                    f"{keyword} is {value:g}",
                    keyword=str(keyword),
                )
    else:
        for keyword, value in fc_values.items():
            if value > 1:
                raise FcRangeError(
                    "Fc values must be <= 1 in fractional mode, "
                    f"{keyword} is {value:g}",
                    keyword=str(keyword),
                )


def check_arch(ctx: "LoaderContext") -> None:
    """Check that the loaded architecture is complete and makes sense.

    The cross-field rules are only checked when loading for detailed routing.

    Raises
    ------
    IncompleteArchitecture
        If mandatory fields are missing or duplicated.
    CrossFieldInconsistency
        If the fields contradict each other.
    """
    check_declarations(ctx)
    if ctx.detailed:
        check_detailed_routing(ctx)
