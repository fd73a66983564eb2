class CodecError(Exception):
    """Base class for failures while converting requests to or from text."""


class EncodingError(CodecError):
    """A request could not be rendered to the interchange format."""


class DecodingError(CodecError):
    """
    The input text is malformed, is not a key/value document,
    or does not carry the expected fields with string values.
    """
