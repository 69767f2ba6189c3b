"""Command line interface of fabarch.

Commands
--------
check : load and validate an architecture file
echo  : load an architecture file and write the parameter echo
grid  : load an architecture file and size the device for a circuit
"""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError

from fabarch.define import RouteType
from fabarch.exceptions import ArchError
from fabarch.grid import init_arch
from fabarch.model.architecture import Architecture
from fabarch.model.grid import CircuitStats
from fabarch.reader import read_arch
from fabarch.report import write_echo
from fabarch.settings import get_context, init_context

app = typer.Typer(help="FPGA architecture description loader", no_args_is_help=True)

RouteTypeOption = Annotated[
    RouteType | None,
    typer.Option(
        "--route-type",
        "-r",
        case_sensitive=False,
        help="Route type to validate for. Default from FABARCH_ROUTE_TYPE",
    ),
]
ArchArgument = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, help="Architecture file"),
]


def setup_logger(level: str) -> None:
    """Replace the default loguru sink with one at ``level``."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level:<8}</level> | <level>{message}</level>",
        colorize=True,
    )


@app.callback()
def main_callback(
    env_file: Annotated[
        Path | None, typer.Option("--env-file", help="Read settings from this .env")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    try:
        settings = init_context(env_file)
    except ValidationError as e:
        logger.error(f"Invalid fabarch settings: {e}")
        raise typer.Exit(code=1) from e
    setup_logger("DEBUG" if verbose else settings.log_level)


def _load(arch_file: Path, route_type: RouteType | None) -> Architecture:
    settings = get_context()
    try:
        return read_arch(
            arch_file,
            route_type or settings.route_type,
            settings.warn_unknown_keywords,
        )
    except ArchError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e
    except UnicodeDecodeError as e:
        logger.error(f"{arch_file} is not a UTF-8 text file: {e}")
        raise typer.Exit(code=1) from e


@app.command()
def check(arch_file: ArchArgument, route_type: RouteTypeOption = None) -> None:
    """Load and validate an architecture file."""
    arch = _load(arch_file, route_type)
    logger.info(
        f"{arch_file} is valid: {arch.num_class} pin classes, "
        f"{arch.pins_per_clb} pins per clb"
    )
    for ignored in arch.ignored_lines:
        logger.info(
            f"Skipped unknown keyword '{ignored.keyword}' on line {ignored.line}"
        )


@app.command()
def echo(
    arch_file: ArchArgument,
    route_type: RouteTypeOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output", "-o", help="Echo file. Default from FABARCH_ECHO_FILE"
        ),
    ] = None,
) -> None:
    """Load an architecture file and write every parsed parameter to a file."""
    arch = _load(arch_file, route_type)
    write_echo(arch, output or get_context().echo_file)


@app.command()
def grid(
    arch_file: ArchArgument,
    clbs: Annotated[int, typer.Option("--clbs", min=0, help="Number of logic blocks")],
    inputs: Annotated[
        int, typer.Option("--inputs", min=0, help="Number of input pads")
    ] = 0,
    outputs: Annotated[
        int, typer.Option("--outputs", min=0, help="Number of output pads")
    ] = 0,
    aspect_ratio: Annotated[
        float | None,
        typer.Option("--aspect-ratio", help="Width / height. Default from settings"),
    ] = None,
    nx: Annotated[int | None, typer.Option("--nx", help="Number of columns")] = None,
    ny: Annotated[int | None, typer.Option("--ny", help="Number of rows")] = None,
    route_type: RouteTypeOption = None,
) -> None:
    """Size the device grid of an architecture for a circuit."""
    if (nx is None) != (ny is None):
        raise typer.BadParameter("--nx and --ny must be given together")

    arch = _load(arch_file, route_type)
    stats = CircuitStats(num_clbs=clbs, num_p_inputs=inputs, num_p_outputs=outputs)
    dimensions = (nx, ny) if nx is not None and ny is not None else None
    try:
        device = init_arch(
            arch,
            stats,
            aspect_ratio if aspect_ratio is not None else get_context().aspect_ratio,
            dimensions,
        )
    except ArchError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    typer.echo(f"nx: {device.nx}  ny: {device.ny}  pad slots: {len(device.pad_slots)}")


def main() -> None:
    app()
