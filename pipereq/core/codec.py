import logging
from collections.abc import Mapping

from pipereq.core.errors import DecodingError, EncodingError
from pipereq.core.models.request import GetPipelineRequest, FIELDS
from pipereq.core.ports.serializer import Serializer


class RequestCodec:
    """
    Converts GetPipelineRequest values to text and back.

    The textual document holds exactly the request fields, keyed by
    field name. decode(encode(request)) == request for every request
    whose fields are strings.

    Unknown keys are ignored on decode unless ``strict`` is set, in
    which case they are rejected.
    """

    def __init__(self, serializer: Serializer, strict: bool = False) -> None:
        self._serializer = serializer
        self._strict = strict
        self._logger = logging.getLogger("core.codec")

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    @property
    def strict(self) -> bool:
        return self._strict

    def encode(self, request: GetPipelineRequest) -> str:
        data = request.to_dict()
        for name, value in data.items():
            if not isinstance(value, str):
                raise EncodingError(
                    f"Field '{name}' must be a string, got {type(value).__name__}"
                )

        text = self._serializer.serialize(data)
        self._logger.debug(f"Encoded {request} as {self._serializer.name}")
        return text

    def decode(self, text: str | bytes) -> GetPipelineRequest:
        try:
            request = self._decode(text)
        except DecodingError as ex:
            self._logger.warning(f"Rejected {self._serializer.name} request: {ex}")
            raise

        self._logger.debug(f"Decoded {request} from {self._serializer.name}")
        return request

    def _decode(self, text: str | bytes) -> GetPipelineRequest:
        data = self._serializer.deserialize(text)

        if not isinstance(data, Mapping):
            raise DecodingError(
                f"Expected a key/value document, got {type(data).__name__}"
            )

        if self._strict:
            unknown = sorted(str(key) for key in data if key not in FIELDS)
            if unknown:
                raise DecodingError(f"Unknown keys: {', '.join(unknown)}")

        try:
            return GetPipelineRequest.from_dict(data)
        except KeyError as ex:
            raise DecodingError(ex.args[0]) from ex
        except TypeError as ex:
            raise DecodingError(str(ex)) from ex
