"""Netlist data models.

This module defines the Pydantic models for the JSON netlist format written
by logic-synthesis tools: the netlist itself, its modules, and the ports,
cells, memories and nets inside each module.

All named collections are plain dicts and keep the order in which the
producing tool emitted them. Every entity also carries a ``passthrough``
dict holding the JSON members the schema does not recognise, so that
re-encoding a document does not drop vendor-specific data.
"""

from pathlib import Path
from typing import IO, Any, ClassVar, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .common import Bit, Direction


class NetlistEntity(BaseModel):
    """Base for every object-shaped entity of the format.

    Attributes:
        passthrough: Unrecognised JSON members, verbatim and in document order.
    """

    # Recognised wire keys, in canonical output order
    WIRE_FIELDS: ClassVar[tuple[str, ...]] = ()

    passthrough: dict[str, Any] = Field(
        default_factory=dict, description="Unrecognised members, kept for re-encoding"
    )

    @field_validator("passthrough")
    @classmethod
    def _no_recognised_keys(cls, value: dict[str, Any]) -> dict[str, Any]:
        clashes = [key for key in value if key in cls.WIRE_FIELDS]
        if clashes:
            raise ValueError(f"passthrough keys clash with recognised fields: {clashes}")
        return value


class Port(NetlistEntity):
    """A module port.

    Attributes:
        direction: Port direction.
        bits: One bit per port bit, least significant first.
        offset: Index of the least significant bit.
        upto: Non-zero when the port is declared with ascending indices.
        signed: Whether the port is signed.
    """

    WIRE_FIELDS: ClassVar[tuple[str, ...]] = ("direction", "bits", "offset", "upto", "signed")

    direction: Direction
    bits: list[Bit]
    offset: int = Field(default=0, ge=0)
    upto: int = Field(default=0, ge=0)
    signed: bool = False

    @property
    def width(self) -> int:
        return len(self.bits)


class Cell(NetlistEntity):
    """An instance of another module or of a primitive.

    Attributes:
        hide_name: Whether the instance name was generated by the tool.
        cell_type: Name of the instantiated module or primitive (wire key ``type``).
        attributes: Arbitrary attribute values.
        parameters: Parameter values (strings, numbers, or bit-vector strings).
        port_directions: Declared direction of each connected port.
        connections: Bits connected to each port, least significant first.
    """

    WIRE_FIELDS: ClassVar[tuple[str, ...]] = (
        "hide_name",
        "type",
        "attributes",
        "parameters",
        "port_directions",
        "connections",
    )

    hide_name: bool = False
    cell_type: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    parameters: dict[str, Any] = Field(default_factory=dict)
    port_directions: dict[str, Direction] = Field(default_factory=dict)
    connections: dict[str, list[Bit]] = Field(default_factory=dict)


class Memory(NetlistEntity):
    """A memory inferred by the synthesis tool.

    Attributes:
        hide_name: Whether the memory name was generated by the tool.
        attributes: Arbitrary attribute values.
        width: Word width in bits.
        size: Number of words.
        start_offset: Address of the first word.
    """

    WIRE_FIELDS: ClassVar[tuple[str, ...]] = (
        "hide_name",
        "attributes",
        "width",
        "size",
        "start_offset",
    )

    hide_name: bool = False
    attributes: dict[str, Any] = Field(default_factory=dict)
    width: int = Field(ge=0, description="Word width in bits")
    size: int = Field(ge=0, description="Number of words")
    start_offset: int = Field(default=0, ge=0)


class Net(NetlistEntity):
    """A named wire or wire vector.

    A net may reference the same signal ids as a port; nothing here
    cross-checks them.
    """

    WIRE_FIELDS: ClassVar[tuple[str, ...]] = (
        "hide_name",
        "attributes",
        "bits",
        "offset",
        "upto",
        "signed",
    )

    hide_name: bool = False
    attributes: dict[str, Any] = Field(default_factory=dict)
    bits: list[Bit]
    offset: int = Field(default=0, ge=0)
    upto: int = Field(default=0, ge=0)
    signed: bool = False


class Module(NetlistEntity):
    """A named circuit definition.

    Attributes:
        attributes: Arbitrary attribute values.
        ports: Port name to Port.
        cells: Instance name to Cell.
        memories: Memory name to Memory.
        nets: Net name to Net (wire key ``netnames``).
    """

    WIRE_FIELDS: ClassVar[tuple[str, ...]] = (
        "attributes",
        "ports",
        "cells",
        "memories",
        "netnames",
    )

    attributes: dict[str, Any] = Field(default_factory=dict)
    ports: dict[str, Port] = Field(default_factory=dict)
    cells: dict[str, Cell] = Field(default_factory=dict)
    memories: dict[str, Memory] = Field(default_factory=dict)
    nets: dict[str, Net] = Field(default_factory=dict)

    def signals(self) -> set[int]:
        """Returns the signal ids referenced by ports, nets and connections."""
        ids = set()
        for bits in self._bit_vectors():
            ids.update(bit.signal for bit in bits if bit.is_signal)
        return ids

    def _bit_vectors(self):
        for port in self.ports.values():
            yield port.bits
        for net in self.nets.values():
            yield net.bits
        for cell in self.cells.values():
            yield from cell.connections.values()


class Netlist(NetlistEntity):
    """Top level of a netlist document.

    Attributes:
        creator: Identifier of the tool that wrote the document.
        modules: Module name to Module, in emission order.
    """

    WIRE_FIELDS: ClassVar[tuple[str, ...]] = ("creator", "modules")

    creator: str
    modules: dict[str, Module] = Field(default_factory=dict)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Netlist":
        """Load a netlist from a .json (or .json.gz) file."""
        from ..parsers.netlist_json import NetlistJSONParser

        return NetlistJSONParser().parse(Path(path))

    @classmethod
    def from_reader(cls, stream: IO) -> "Netlist":
        from ..parsers.netlist_json import NetlistJSONParser

        return NetlistJSONParser().parse_stream(stream)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Netlist":
        from ..parsers.netlist_json import NetlistJSONParser

        return NetlistJSONParser().parse_bytes(data)

    @classmethod
    def from_str(cls, content: str) -> "Netlist":
        from ..parsers.netlist_json import NetlistJSONParser

        return NetlistJSONParser().parse_string(content)

    @classmethod
    def from_value(cls, value: Any) -> "Netlist":
        from ..parsers.netlist_json import NetlistJSONParser

        return NetlistJSONParser().parse_value(value)

    def to_value(self) -> dict[str, Any]:
        from ..writers.netlist_json import NetlistJSONWriter

        return NetlistJSONWriter().to_value(self)

    def to_str(self, indent: Optional[int] = None) -> str:
        from ..writers.netlist_json import NetlistJSONWriter

        return NetlistJSONWriter(indent=indent).to_string(self)

    def to_writer(self, stream: IO[str], indent: Optional[int] = None) -> None:
        from ..writers.netlist_json import NetlistJSONWriter

        NetlistJSONWriter(indent=indent).to_writer(self, stream)
