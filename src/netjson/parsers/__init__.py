"""Parsers for netlist documents"""

from .base import BaseParser
from .netlist_json import NetlistJSONParser

__all__ = [
    "BaseParser",
    "NetlistJSONParser",
]
