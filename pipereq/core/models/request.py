from dataclasses import dataclass, asdict, fields
from collections.abc import Mapping
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class GetPipelineRequest:
    """
    Identifies a pipeline within an organization.
    Instances are immutable values: two requests are equivalent when
    their fields are equal.
    """
    organization: str
    """
    Organization owning the pipeline, e.g. "cloudbees"
    """

    pipeline: str
    """
    Name of the pipeline, e.g. "test1"
    """

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        values = {}
        for name in FIELDS:
            if name not in data:
                raise KeyError(f"Missing '{name}' key")
            value = data[name]
            if not isinstance(value, str):
                raise TypeError(
                    f"'{name}' must be a string, got {type(value).__name__}"
                )
            values[name] = value
        return cls(**values)


FIELDS: tuple[str, ...] = tuple(f.name for f in fields(GetPipelineRequest))
