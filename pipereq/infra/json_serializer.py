import json
from typing import Any

from pipereq.core.errors import DecodingError, EncodingError
from pipereq.core.ports.serializer import Serializer


class JsonSerializer(Serializer):
    """
    JSON implementation of the Serializer interface.

    - non-ASCII text is emitted as-is, quotes and control characters escaped
    - compact separators unless an indent is requested
    - NaN/Infinity are refused, they are not valid JSON
    """
    name = "json"

    def __init__(self, indent: int | None = None, sort_keys: bool = False) -> None:
        self._indent = indent
        self._sort_keys = sort_keys
        self._separators = (",", ":") if indent is None else (",", ": ")

    def serialize(self, data: dict[str, Any]) -> str:
        try:
            return json.dumps(
                data,
                ensure_ascii=False,
                allow_nan=False,
                indent=self._indent,
                separators=self._separators,
                sort_keys=self._sort_keys,
            )
        except (TypeError, ValueError) as ex:
            raise EncodingError(f"Cannot encode to JSON: {ex}") from ex

    def deserialize(self, text: str | bytes) -> Any:
        try:
            return json.loads(text)
        except (ValueError, RecursionError) as ex:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise DecodingError(f"Malformed JSON: {ex}") from ex
