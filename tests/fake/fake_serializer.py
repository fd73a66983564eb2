from typing import Any


class FakeSerializer:
    """
    In-memory Serializer for tests.

    serialize() records the mapping it was given and returns a fixed
    marker; deserialize() returns whatever document was preloaded,
    regardless of the input text.
    """
    name = "fake"

    def __init__(self, document: Any = None) -> None:
        self.document = document
        self.serialized: list[dict[str, Any]] = []

    def serialize(self, data: dict[str, Any]) -> str:
        self.serialized.append(data)
        return "<fake>"

    def deserialize(self, text: str | bytes) -> Any:
        return self.document
