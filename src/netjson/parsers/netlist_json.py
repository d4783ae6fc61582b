"""
Netlist JSON Parser

Parses the JSON netlist documents written by logic-synthesis tools
(e.g. Yosys ``write_json``) into the typed models of ``netjson.models``.

Every object is decoded against a fixed set of recognised keys. Each
recognised key is removed from a working copy of the object as it is
consumed; whatever is left afterwards becomes the entity's passthrough, in
its original order.
"""

import copy
import json
import logging
from pathlib import Path
from typing import IO, Any, Callable, TypeVar

from ..exceptions import MalformedDocument, TypeMismatch
from ..models.common import Bit, Direction, decode_bit, decode_flag
from ..models.netlist import Cell, Memory, Module, Net, Netlist, Port
from .base import BaseParser, FieldPath

logger = logging.getLogger(__name__)

V = TypeVar("V")

_DIRECTIONS = {d.value: d for d in Direction}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


class NetlistJSONParser(BaseParser[Netlist]):
    """
    Parser for JSON netlist documents.

    The document is expected to look like:
    - "creator": "Yosys 0.9 (git sha1 1979e0b)"
    - "modules": { "top": { "ports": {...}, "cells": {...}, "netnames": {...} } }

    Unknown members at any level are kept in the ``passthrough`` of the
    entity they belong to.
    """

    def parse(self, path: Path) -> Netlist:
        """Parse a .json or .json.gz netlist file"""
        logger.info(f"Parsing netlist file: {path}")
        content = self._read_file(path, encoding="utf-8")
        netlist = self.parse_string(content)

        warnings = self.validate(netlist)
        if warnings:
            logger.warning(f"Validation warnings for {path.name}: {warnings}")
        return netlist

    def parse_stream(self, stream: IO) -> Netlist:
        """Parse a netlist from a readable text or binary stream"""
        content = stream.read()
        if isinstance(content, (bytes, bytearray)):
            return self.parse_bytes(bytes(content))
        return self.parse_string(content)

    def parse_bytes(self, data: bytes) -> Netlist:
        """Parse a netlist from UTF-8 encoded bytes"""
        try:
            content = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocument(e) from e
        return self.parse_string(content)

    def parse_string(self, content: str) -> Netlist:
        """Parse a netlist from a JSON string"""
        logger.debug(f"Parsing netlist content string, length: {len(content)}")
        try:
            data = json.loads(content, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise MalformedDocument(e) from e
        return self._build_netlist(data)

    def parse_value(self, value: Any) -> Netlist:
        """Parse a netlist from an already decoded JSON value.

        The value is copied first; the caller's tree is neither modified nor
        shared with the returned model.
        """
        return self._build_netlist(copy.deepcopy(value))

    def _build_netlist(self, data: Any) -> Netlist:
        path: FieldPath = ()
        obj = dict(self._expect_object(data, path))

        creator = self._expect_string(self._take(obj, "creator", path), ("creator",))
        modules = self._build_mapping(
            self._take(obj, "modules", path), ("modules",), self._build_module
        )

        logger.debug(f"Decoded {len(modules)} module(s) from {creator!r}")
        return Netlist(creator=creator, modules=modules, passthrough=obj)

    def _build_mapping(
        self, value: Any, path: FieldPath, build: Callable[[Any, FieldPath], V]
    ) -> dict[str, V]:
        """Decode an object of named entities, keeping document order"""
        items = self._expect_object(value, path)
        return {name: build(item, path + (name,)) for name, item in items.items()}

    def _build_module(self, data: Any, path: FieldPath) -> Module:
        obj = dict(self._expect_object(data, path))

        attributes = self._take_object(obj, "attributes", path)
        ports = self._build_mapping(
            self._take(obj, "ports", path, {}), path + ("ports",), self._build_port
        )
        cells = self._build_mapping(
            self._take(obj, "cells", path, {}), path + ("cells",), self._build_cell
        )
        memories = self._build_mapping(
            self._take(obj, "memories", path, {}), path + ("memories",), self._build_memory
        )
        nets = self._build_mapping(
            self._take(obj, "netnames", path, {}), path + ("netnames",), self._build_net
        )

        return Module(
            attributes=attributes,
            ports=ports,
            cells=cells,
            memories=memories,
            nets=nets,
            passthrough=obj,
        )

    def _build_port(self, data: Any, path: FieldPath) -> Port:
        obj = dict(self._expect_object(data, path))
        return Port(
            direction=self._build_direction(self._take(obj, "direction", path), path + ("direction",)),
            bits=self._build_bits(self._take(obj, "bits", path), path + ("bits",)),
            offset=self._take_uint(obj, "offset", path),
            upto=self._take_uint(obj, "upto", path),
            signed=self._take_flag(obj, "signed", path),
            passthrough=obj,
        )

    def _build_cell(self, data: Any, path: FieldPath) -> Cell:
        obj = dict(self._expect_object(data, path))

        hide_name = self._take_flag(obj, "hide_name", path)
        cell_type = self._expect_string(self._take(obj, "type", path), path + ("type",))
        attributes = self._take_object(obj, "attributes", path)
        parameters = self._take_object(obj, "parameters", path)

        directions_path = path + ("port_directions",)
        port_directions = {
            port: self._build_direction(value, directions_path + (port,))
            for port, value in self._take_object(obj, "port_directions", path).items()
        }

        connections_path = path + ("connections",)
        connections = {
            port: self._build_bits(value, connections_path + (port,))
            for port, value in self._take_object(obj, "connections", path).items()
        }

        return Cell(
            hide_name=hide_name,
            cell_type=cell_type,
            attributes=attributes,
            parameters=parameters,
            port_directions=port_directions,
            connections=connections,
            passthrough=obj,
        )

    def _build_memory(self, data: Any, path: FieldPath) -> Memory:
        obj = dict(self._expect_object(data, path))

        hide_name = self._take_flag(obj, "hide_name", path)
        attributes = self._take_object(obj, "attributes", path)
        width = self._expect_uint(self._take(obj, "width", path), path + ("width",))
        size = self._expect_uint(self._take(obj, "size", path), path + ("size",))

        return Memory(
            hide_name=hide_name,
            attributes=attributes,
            width=width,
            size=size,
            start_offset=self._take_uint(obj, "start_offset", path),
            passthrough=obj,
        )

    def _build_net(self, data: Any, path: FieldPath) -> Net:
        obj = dict(self._expect_object(data, path))

        hide_name = self._take_flag(obj, "hide_name", path)
        attributes = self._take_object(obj, "attributes", path)
        bits = self._build_bits(self._take(obj, "bits", path), path + ("bits",))

        return Net(
            hide_name=hide_name,
            attributes=attributes,
            bits=bits,
            offset=self._take_uint(obj, "offset", path),
            upto=self._take_uint(obj, "upto", path),
            signed=self._take_flag(obj, "signed", path),
            passthrough=obj,
        )

    def _build_bits(self, value: Any, path: FieldPath) -> list[Bit]:
        items = self._expect_array(value, path)
        return [decode_bit(item, path + (i,)) for i, item in enumerate(items)]

    def _build_direction(self, value: Any, path: FieldPath) -> Direction:
        direction = _DIRECTIONS.get(value) if isinstance(value, str) else None
        if direction is None:
            raise TypeMismatch('one of "input", "output", "inout"', value, path)
        return direction

    def _take_object(self, obj: dict[str, Any], key: str, path: FieldPath) -> dict[str, Any]:
        return self._expect_object(self._take(obj, key, path, {}), path + (key,))

    def _take_uint(self, obj: dict[str, Any], key: str, path: FieldPath) -> int:
        return self._expect_uint(self._take(obj, key, path, 0), path + (key,))

    def _take_flag(self, obj: dict[str, Any], key: str, path: FieldPath) -> bool:
        return decode_flag(self._take(obj, key, path, 0), path + (key,))

    def validate(self, data: Netlist) -> list[str]:
        """Sanity checks a caller may want on tool output; never fatal"""
        warnings = []

        if data.passthrough:
            warnings.append(f"Unrecognised top-level fields: {list(data.passthrough)}")

        for name, module in data.modules.items():
            if not module.ports:
                warnings.append(f"Module {name} has no ports")
            if not module.nets:
                warnings.append(f"Module {name} has no nets")
            if module.passthrough:
                warnings.append(f"Module {name} has unrecognised fields: {list(module.passthrough)}")

            for kind, entities in (
                ("port", module.ports),
                ("cell", module.cells),
                ("memory", module.memories),
                ("net", module.nets),
            ):
                for entity_name, entity in entities.items():
                    if entity.passthrough:
                        warnings.append(
                            f"{name}: {kind} {entity_name} has unrecognised fields: "
                            f"{list(entity.passthrough)}"
                        )

        return warnings
