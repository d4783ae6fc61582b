"""Data models for JSON netlists"""

from .common import Bit, BitConstant, Direction, decode_bit, decode_flag, encode_bit, encode_flag
from .netlist import Cell, Memory, Module, Net, Netlist, NetlistEntity, Port

__all__ = [
    "Bit",
    "BitConstant",
    "Direction",
    "decode_bit",
    "encode_bit",
    "decode_flag",
    "encode_flag",
    "NetlistEntity",
    "Netlist",
    "Module",
    "Port",
    "Cell",
    "Memory",
    "Net",
]
