import json
from functools import lru_cache

from pydantic import ValidationError

from pipereq.bootstrap.config.settings import PipereqConfig, CodecSettings
from pipereq.core.codec import RequestCodec
from pipereq.core.ports.serializer import Serializer
from pipereq.infra.json_serializer import JsonSerializer
from pipereq.infra.yaml_serializer import YamlSerializer


@lru_cache
def get_config() -> PipereqConfig:
    return load_config()


def load_config(**overrides) -> PipereqConfig:
    try:
        return PipereqConfig(**overrides)
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


def get_serializer(settings: CodecSettings) -> Serializer:
    if settings.format == "yaml":
        return YamlSerializer(sort_keys=settings.sort_keys)
    return JsonSerializer(indent=settings.indent, sort_keys=settings.sort_keys)


def get_codec(config: PipereqConfig | None = None) -> RequestCodec:
    config = config or get_config()
    return RequestCodec(
        serializer=get_serializer(config.codec),
        strict=config.codec.strict
    )
