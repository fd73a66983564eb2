from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from pipereq.bootstrap.config.loader import get_configfile


class CodecSettings(BaseModel):
    format: Annotated[
        Literal["json", "yaml"],
        Field(
            description="Textual interchange format used to encode and decode requests.",
            default="json"
        )
    ]

    indent: Annotated[
        int | None,
        Field(
            description=(
                "Indentation of encoded JSON documents.\n"
                "Leave unset for the compact single-line form."
            ),
            default=None,
            ge=0
        )
    ]

    sort_keys: Annotated[
        bool,
        Field(
            description="Emit keys in sorted order instead of field order.",
            default=False
        )
    ]

    strict: Annotated[
        bool,
        Field(
            description=(
                "Reject documents carrying keys other than the request fields.\n"
                "When disabled, unknown keys are ignored."
            ),
            default=False
        )
    ]


class LogSettings(BaseModel):
    level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Logging verbosity.",
            default="WARNING"
        )
    ]


class PipereqConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PIPEREQ_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    codec: Annotated[
        CodecSettings,
        Field(
            description="Interchange format and decoding policy.",
            default_factory=CodecSettings
        )
    ]

    log: Annotated[
        LogSettings,
        Field(
            description="Logging configuration.",
            default_factory=LogSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=get_configfile()),
        )
