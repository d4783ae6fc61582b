"""
Netlist JSON Writer

Encodes ``netjson.models`` back into the JSON netlist format. Each entity is
written as its recognised fields in canonical order, followed by its
passthrough members in the order they were stored.
"""

import copy
import gzip
import json
import logging
from pathlib import Path
from typing import IO, Any, Optional

from ..models.common import Bit, encode_bit, encode_flag
from ..models.netlist import Cell, Memory, Module, Net, Netlist, Port

logger = logging.getLogger(__name__)


class NetlistJSONWriter:
    """Writer for JSON netlist documents.

    Args:
        indent: None for compact single-line output (the default), or the
            number of spaces to indent nested members by.
    """

    def __init__(self, indent: Optional[int] = None):
        self.indent = indent

    def to_value(self, netlist: Netlist) -> dict[str, Any]:
        """Encode a netlist as a generic JSON value (dicts, lists, scalars).

        The result shares nothing with the model.
        """
        return copy.deepcopy(self._netlist_value(netlist))

    def _netlist_value(self, netlist: Netlist) -> dict[str, Any]:
        return self._with_passthrough(
            {
                "creator": netlist.creator,
                "modules": {
                    name: self._module_value(module) for name, module in netlist.modules.items()
                },
            },
            netlist.passthrough,
        )

    def to_string(self, netlist: Netlist) -> str:
        """Encode a netlist as a JSON string"""
        separators = (",", ":") if self.indent is None else (",", ": ")
        return json.dumps(
            self._netlist_value(netlist),
            indent=self.indent,
            separators=separators,
            ensure_ascii=False,
        )

    def to_writer(self, netlist: Netlist, stream: IO[str]) -> None:
        """Encode a netlist onto a writable text stream"""
        stream.write(self.to_string(netlist))

    def write(self, netlist: Netlist, path: Path) -> None:
        """Write a netlist to a .json file, gzip-compressed when the suffix is .gz"""
        logger.info(f"Writing netlist file: {path}")
        content = self.to_string(netlist)
        if path.suffix == ".gz":
            with gzip.open(path, mode="wt", encoding="utf-8") as f:
                f.write(content)
        else:
            path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {len(content)} characters, {len(netlist.modules)} module(s)")

    def _with_passthrough(self, known: dict[str, Any], passthrough: dict[str, Any]) -> dict[str, Any]:
        """Append passthrough members after the recognised fields.

        A passthrough key naming a recognised field (possible only when the
        dict was changed after construction) never replaces the field's value.
        """
        for key, value in passthrough.items():
            if key in known:
                logger.warning(f"Ignoring passthrough member {key!r}: it names a recognised field")
                continue
            known[key] = value
        return known

    def _module_value(self, module: Module) -> dict[str, Any]:
        return self._with_passthrough(
            {
                "attributes": module.attributes,
                "ports": {name: self._port_value(p) for name, p in module.ports.items()},
                "cells": {name: self._cell_value(c) for name, c in module.cells.items()},
                "memories": {name: self._memory_value(m) for name, m in module.memories.items()},
                "netnames": {name: self._net_value(n) for name, n in module.nets.items()},
            },
            module.passthrough,
        )

    def _port_value(self, port: Port) -> dict[str, Any]:
        return self._with_passthrough(
            {
                "direction": port.direction.value,
                "bits": self._bits_value(port.bits),
                "offset": port.offset,
                "upto": port.upto,
                "signed": encode_flag(port.signed),
            },
            port.passthrough,
        )

    def _cell_value(self, cell: Cell) -> dict[str, Any]:
        return self._with_passthrough(
            {
                "hide_name": encode_flag(cell.hide_name),
                "type": cell.cell_type,
                "attributes": cell.attributes,
                "parameters": cell.parameters,
                "port_directions": {
                    port: direction.value for port, direction in cell.port_directions.items()
                },
                "connections": {
                    port: self._bits_value(bits) for port, bits in cell.connections.items()
                },
            },
            cell.passthrough,
        )

    def _memory_value(self, memory: Memory) -> dict[str, Any]:
        return self._with_passthrough(
            {
                "hide_name": encode_flag(memory.hide_name),
                "attributes": memory.attributes,
                "width": memory.width,
                "size": memory.size,
                "start_offset": memory.start_offset,
            },
            memory.passthrough,
        )

    def _net_value(self, net: Net) -> dict[str, Any]:
        return self._with_passthrough(
            {
                "hide_name": encode_flag(net.hide_name),
                "attributes": net.attributes,
                "bits": self._bits_value(net.bits),
                "offset": net.offset,
                "upto": net.upto,
                "signed": encode_flag(net.signed),
            },
            net.passthrough,
        )

    def _bits_value(self, bits: list[Bit]) -> list[Any]:
        return [encode_bit(bit) for bit in bits]
