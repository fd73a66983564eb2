from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for converting plain mappings to and from
    a textual interchange format.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - safe against malformed input: failures are reported as
      EncodingError / DecodingError, never as library exceptions
    """

    name: str
    """
    Short format name, e.g. "json"
    """

    def serialize(self, data: dict[str, Any]) -> str:
        """Encode a plain mapping into text."""

    def deserialize(self, text: str | bytes) -> Any:
        """Decode text into plain Python objects."""
