import argparse
import sys
from pathlib import Path

from pipectl.bootstrap.deps import get_ctl
from pipereq.core.codec import RequestCodec
from pipereq.core.errors import CodecError
from pipereq.core.models.request import GetPipelineRequest

ctl = get_ctl()


@ctl.command("encode")
def encode(codec: RequestCodec, namespace: argparse.Namespace) -> str:
    request = GetPipelineRequest(
        organization=namespace.organization,
        pipeline=namespace.pipeline
    )
    return codec.encode(request)


@ctl.command("decode")
def decode(codec: RequestCodec, namespace: argparse.Namespace) -> str:
    if namespace.file == "-":
        text = sys.stdin.buffer.read()
    else:
        text = Path(namespace.file).read_bytes()

    request = codec.decode(text)
    return codec.encode(request)


@ctl.command("roundtrip")
def roundtrip(codec: RequestCodec, namespace: argparse.Namespace) -> str:
    request = GetPipelineRequest(
        organization=namespace.organization,
        pipeline=namespace.pipeline
    )

    text = codec.encode(request)
    decoded = codec.decode(text)
    if decoded != request:
        raise CodecError(f"Round-trip mismatch: {request} != {decoded}")

    return (
        f"Encoded:\n{text.rstrip()}\n"
        f"Decoded:\n{codec.encode(decoded).rstrip()}"
    )
