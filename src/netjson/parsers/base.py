"""Base parser module with shared input handling.

Provides the abstract base class for netlist document parsers, including
file reading with transparent gzip support and the typed field readers used
while walking a decoded JSON tree.
"""

import gzip
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, TypeVar

from ..exceptions import MissingRequiredField, PathElement, TypeMismatch

T = TypeVar("T")

FieldPath = tuple[PathElement, ...]

_MISSING = object()


class BaseParser(ABC, Generic[T]):
    """Abstract base class for netlist document parsers.

    Parsers keep no state between calls; one instance may decode any number
    of documents, including from several threads.

    Attributes:
        Generic[T]: The type of the model returned by the parser (e.g., Netlist).
    """

    def _read_file(self, path: Path, encoding: str = "utf-8", errors: str = "strict") -> str:
        """Reads file content, automatically handling .gz compression.

        Args:
            path: Path to the file.
            encoding: Text encoding (default: utf-8).
            errors: Error handling scheme for encoding errors (default: strict).

        Returns:
            The content of the file as a string.
        """
        if path.suffix == ".gz":
            with gzip.open(path, mode="rt", encoding=encoding, errors=errors) as f:
                return f.read()
        return path.read_text(encoding=encoding, errors=errors)

    def _take(self, obj: dict[str, Any], key: str, path: FieldPath, default: Any = _MISSING) -> Any:
        """Removes ``key`` from the working object and returns its value.

        Raises:
            MissingRequiredField: If the key is absent and no default is given.
        """
        if key in obj:
            return obj.pop(key)
        if default is _MISSING:
            raise MissingRequiredField(key, path)
        return default

    def _expect_object(self, value: Any, path: FieldPath) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise TypeMismatch("an object", value, path)
        return value

    def _expect_array(self, value: Any, path: FieldPath) -> list[Any]:
        if not isinstance(value, list):
            raise TypeMismatch("an array", value, path)
        return value

    def _expect_string(self, value: Any, path: FieldPath) -> str:
        if not isinstance(value, str):
            raise TypeMismatch("a string", value, path)
        return value

    def _expect_uint(self, value: Any, path: FieldPath) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise TypeMismatch("a non-negative integer", value, path)
        return value

    @abstractmethod
    def parse(self, path: Path) -> T:
        """Parses a document from a given path.

        Args:
            path: Path to the document.

        Returns:
            The parsed and validated data model.
        """
        ...

    @abstractmethod
    def parse_string(self, content: str) -> T:
        """Parses a document from string content.

        Args:
            content: The raw content string.

        Returns:
            The parsed and validated data model.
        """
        ...

    def validate(self, data: T) -> list[str]:
        """Validates the parsed data model.

        Subclasses should override this to provide format-specific validation logic.

        Args:
            data: The parsed data model.

        Returns:
            A list of warning messages (empty list if valid).
        """
        return []
