"""Writers for netlist documents"""

from .netlist_json import NetlistJSONWriter

__all__ = [
    "NetlistJSONWriter",
]
