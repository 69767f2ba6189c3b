"""fabarch data model.

This module contains the data structures produced by the architecture loader
and the grid builder:

- Architecture: frozen result of loading an architecture file
- LogicBlockConfig / RoutingArchConfig: scalar parameters of the architecture
- ChannelDistribution and its variants: track distribution per grid axis
- PinClass: group of logically equivalent logic block pins
- Grid / Cell / CircuitStats: the device grid and its sizing input
"""

from fabarch.model.architecture import (
    Architecture,
    IgnoredLine,
    LogicBlockConfig,
    RoutingArchConfig,
)
from fabarch.model.channel import (
    ChannelDistribution,
    DeltaChannel,
    GaussianChannel,
    PulseChannel,
    UniformChannel,
)
from fabarch.model.grid import Cell, CircuitStats, Grid
from fabarch.model.pin_class import PinClass

__all__ = [
    "Architecture",
    "Cell",
    "ChannelDistribution",
    "CircuitStats",
    "DeltaChannel",
    "GaussianChannel",
    "Grid",
    "IgnoredLine",
    "LogicBlockConfig",
    "PinClass",
    "PulseChannel",
    "RoutingArchConfig",
    "UniformChannel",
]
