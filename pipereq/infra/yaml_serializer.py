from typing import Any

import yaml

from pipereq.core.errors import DecodingError, EncodingError
from pipereq.core.ports.serializer import Serializer

# Unicode line breaks that YAML folds inside plain and single-quoted scalars
LINE_BREAKS = ("\x85", "\u2028", "\u2029")


class RequestDumper(yaml.SafeDumper):
    """SafeDumper emitting strings with unicode line breaks double-quoted, where they are escaped."""

    def represent_str(self, data: str) -> yaml.ScalarNode:
        if any(ch in data for ch in LINE_BREAKS):
            return self.represent_scalar("tag:yaml.org,2002:str", data, style='"')
        return super().represent_str(data)


RequestDumper.add_representer(str, RequestDumper.represent_str)


class YamlSerializer(Serializer):
    """
    YAML implementation of the Serializer interface, restricted to the
    safe subset of the format (plain mappings, sequences and scalars).
    """
    name = "yaml"

    def __init__(self, sort_keys: bool = False) -> None:
        self._sort_keys = sort_keys

    def serialize(self, data: dict[str, Any]) -> str:
        try:
            return yaml.dump(
                data,
                Dumper=RequestDumper,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=self._sort_keys,
            )
        except yaml.YAMLError as ex:
            raise EncodingError(f"Cannot encode to YAML: {ex}") from ex

    def deserialize(self, text: str | bytes) -> Any:
        try:
            return yaml.safe_load(text)
        except (yaml.YAMLError, UnicodeDecodeError, RecursionError) as ex:
            raise DecodingError(f"Malformed YAML: {ex}") from ex
