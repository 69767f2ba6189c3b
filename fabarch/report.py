"""Human readable echo of a loaded architecture, for checking what was parsed."""

from pathlib import Path

from loguru import logger

from fabarch.define import FcType, PinSide, RouteType
from fabarch.model.architecture import Architecture
from fabarch.model.channel import ChannelDistribution

_SIDES = (PinSide.TOP, PinSide.BOTTOM, PinSide.LEFT, PinSide.RIGHT)


def _format_channel(chan: ChannelDistribution) -> str:
    fields = [f"type: {chan.type.value}", f"peak: {chan.peak:g}"]
    for name in ("width", "xpeak", "dc"):
        if hasattr(chan, name):
            fields.append(f"{name}: {getattr(chan, name):g}")
    return "  ".join(fields)


def format_echo(arch: Architecture) -> str:
    """Render every parsed architecture parameter as text."""
    lb = arch.logic_block
    lines = [
        f"Input architecture file: {arch.source}",
        "",
        f"io_rat: {lb.io_rat}.",
        f"chan_width_io: {lb.chan_width_io:g}  pins_per_clb (pins per clb): "
        f"{arch.pins_per_clb}",
        "",
        "chan_width_x:",
        _format_channel(arch.chan_x_dist),
        "",
        "chan_width_y:",
        _format_channel(arch.chan_y_dist),
        "",
        "Pin #\tclass\ttop\tbottom\tleft\tright",
    ]
    for pin, (pin_class, sides) in enumerate(
        zip(arch.pin_class, arch.pin_locations, strict=True)
    ):
        flags = "\t".join("1" if side in sides else "0" for side in _SIDES)
        lines.append(f"{pin}\t{pin_class}\t{flags}")

    lines += ["", "Class\tType\tNumpins\tPins"]
    for pin_class in arch.pin_classes:
        pins = "\t".join(str(p) for p in pin_class.pins)
        lines.append(
            f"{pin_class.index}\t{pin_class.type.value}\t{pin_class.num_pins}\t{pins}"
        )

    lines += [
        "",
        f"subblocks_per_cluster (maximum): {lb.max_subblocks_per_block}",
        f"subblock_lut_size: {lb.subblock_lut_size}",
    ]

    if arch.route_type is RouteType.DETAILED:
        routing = arch.routing
        lines.append("")
        if routing.fc_type is FcType.ABSOLUTE:
            lines.append("Fc value is absolute number of tracks.")
        else:
            lines.append("Fc value is fraction of tracks in a channel.")
        lines.append(
            f"Fc_output: {routing.fc_output:g}.  Fc_input: {routing.fc_input:g}.  "
            f"Fc_pad: {routing.fc_pad:g}."
        )
        lines.append(
            f"switch_block_type: {routing.switch_block_type.value.upper()}."
        )

    return "\n".join(lines) + "\n"


def write_echo(arch: Architecture, path: Path) -> None:
    """Write the echo of ``arch`` to ``path``."""
    logger.info(f"Writing architecture echo to {path}")
    path.write_text(format_echo(arch))
