"""fabarch line parsers.

Parsers for the individual statements of an architecture file:
- fields: bounded integer and float fields, Fc type and switch block type
- channel: channel width distributions
- pins: pin class counting and loading
"""

from fabarch.parsers.channel import CHANNEL_SHAPES, read_channel
from fabarch.parsers.fields import (
    parse_float,
    parse_int,
    read_fc_type,
    read_float_field,
    read_int_field,
    read_switch_block_type,
)
from fabarch.parsers.pins import ClassTable, count_pass, get_class, pin_type_for

__all__ = [
    "CHANNEL_SHAPES",
    "ClassTable",
    "count_pass",
    "get_class",
    "parse_float",
    "parse_int",
    "pin_type_for",
    "read_channel",
    "read_fc_type",
    "read_float_field",
    "read_int_field",
    "read_switch_block_type",
]
