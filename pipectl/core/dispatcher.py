import argparse
import functools
from typing import Protocol

from pipereq.core.codec import RequestCodec


class CommandHandler(Protocol):
    def __call__(
        self,
        codec: RequestCodec,
        namespace: argparse.Namespace,
    ) -> str:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[tuple[str, ...], CommandHandler] = {}

    def dispatch(
        self,
        *arguments: str,
        codec: RequestCodec,
        namespace: argparse.Namespace
    ) -> str:
        command = self._commands.get(arguments)
        if command is None:
            raise RuntimeError(f"Unknown '{' '.join(arguments)}' Command")
        return command(codec, namespace)

    def command(self, *arguments: str):
        def decorator(func: CommandHandler):

            @functools.wraps(func)
            def wrapper(
                codec: RequestCodec,
                namespace: argparse.Namespace,
            ) -> str:
                return func(codec, namespace)

            self._commands[arguments] = wrapper

            return wrapper

        return decorator
