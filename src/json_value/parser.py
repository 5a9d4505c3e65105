"""JSON parsing into value trees."""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .types import ParseError
from .values import JsonValue


def _reject_constant(name: str) -> Any:
    raise ParseError(f"{name} is not a valid JSON number", context=name)


def _ordered_object(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    # dict keeps the first position of a repeated key and its last value
    return dict(pairs)


class JsonParser:
    """
    Parser producing JsonValue trees.

    Grammar and tokenizing are left to the standard library ``json``
    module; this class configures it so numbers become ``Decimal`` and key
    order is kept, then wraps the resulting generic tree.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, source: Union[str, bytes, bytearray, Path, Any]) -> JsonValue:
        """
        Parse JSON from any supported source.

        Args:
            source: JSON text, bytes, a ``pathlib.Path`` or a readable
                binary/text stream

        Returns:
            The parsed JsonValue tree

        Raises:
            ParseError: If the content is not valid JSON
            TypeError: If the source type is not supported
        """
        if isinstance(source, str):
            return self.parse_string(source)
        elif isinstance(source, (bytes, bytearray)):
            return self.parse_bytes(source)
        elif isinstance(source, Path):
            return self.parse_path(source)
        elif hasattr(source, "read"):
            return self.parse_stream(source)
        raise TypeError(f"Cannot parse JSON from {type(source).__name__}")

    def parse_string(self, json_string: str) -> JsonValue:
        return JsonValue.of(self.parse_tree(json_string))

    def parse_bytes(self, data: Union[bytes, bytearray]) -> JsonValue:
        return JsonValue.of(self.parse_tree(data))

    def parse_path(self, path: Union[str, Path]) -> JsonValue:
        """Read and parse the file at path (UTF-8, UTF-16 or UTF-32)."""
        path = Path(path)
        self.logger.debug(f"Parsing JSON file {path}")
        return self.parse_bytes(path.read_bytes())

    def parse_stream(self, stream: Any) -> JsonValue:
        """Parse everything remaining in a binary or text stream."""
        return JsonValue.of(self.parse_tree(stream.read()))

    def parse_tree(self, content: Union[str, bytes, bytearray]) -> Any:
        """
        Parse content into the generic tree of dict/list/str/Decimal/bool/None.

        Args:
            content: JSON text or encoded bytes

        Returns:
            Generic parse tree

        Raises:
            ParseError: If the content is empty or not valid JSON
        """
        if not content.strip():
            raise ParseError("JSON string is empty", context="input")

        try:
            return json.loads(
                content,
                parse_float=Decimal,
                parse_int=Decimal,
                parse_constant=_reject_constant,
                object_pairs_hook=_ordered_object
            )
        except json.JSONDecodeError as e:
            raise ParseError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                             context=f"line {e.lineno}, column {e.colno}") from e
        except UnicodeDecodeError as e:
            raise ParseError(f"JSON parsing failed: {e}") from e

