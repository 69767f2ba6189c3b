"""Fixtures shared by all fabarch tests."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from fabarch.settings import reset_context

MINIMAL_ARCH = """\
# Minimal single-LUT architecture
io_rat 2
chan_width_io 1
chan_width_x uniform 1
chan_width_y uniform 1

inpin class: 0 bottom
outpin class: 1 top

subblocks_per_cluster 1
subblock_lut_size 4
"""

DETAILED_ARCH = """\
io_rat 2
chan_width_io 1
chan_width_x uniform 1
chan_width_y uniform 1

# Four LUT inputs, one output, one clock
inpin class: 0 bottom
inpin class: 0 left
inpin class: 0 top
inpin class: 0 right
outpin class: 1 top bottom
inpin class: 2 top   # clock

subblocks_per_cluster 1
subblock_lut_size 4

Fc_type fractional
Fc_output 1
Fc_input 1
Fc_pad 1
switch_block_type subset
"""


@pytest.fixture(autouse=True)
def clean_context() -> Generator[None]:
    """Reset the settings context before and after each test."""
    reset_context()
    yield
    reset_context()


@pytest.fixture
def write_arch(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes architecture text to a temporary file."""

    def _write(text: str, name: str = "test.arch") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def minimal_arch() -> str:
    return MINIMAL_ARCH


@pytest.fixture
def detailed_arch() -> str:
    return DETAILED_ARCH
