import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pipectl.core.dispatcher import CommandDispatcher, CommandHandler
from pipereq.bootstrap.config.settings import PipereqConfig
from pipereq.bootstrap.deps import load_config, get_codec
from pipereq.core.errors import CodecError
from pipereq.core.helpers.utils import setup_logging


class PipeCtl:
    """
    Command line front end for the request codec.

    Global options override the settings loaded from the environment
    and the configuration file; the selected command is dispatched with
    a codec built from the merged configuration.
    """

    def __init__(self) -> None:
        self._argparser = self._argparse()
        self._dispatcher = CommandDispatcher()
        self._logger = logging.getLogger("pipectl.ctl")

    def command(self, *arguments: str) -> CommandHandler:
        return self._dispatcher.command(*arguments)

    def run(self, argv: Sequence[str] | None = None) -> int:
        args = self._argparser.parse_args(argv)
        config = load_config(**self._overrides(args))

        setup_logging(config.log.level)
        self._logger.debug(f"Running '{args.command}' with {config.codec}")

        codec = get_codec(config)
        try:
            output = self._dispatcher.dispatch(args.command, codec=codec, namespace=args)
        except (CodecError, OSError) as ex:
            print(f"error: {ex}", file=sys.stderr)
            return 1

        print(output.rstrip("\n"))
        return 0

    @staticmethod
    def _overrides(args: argparse.Namespace) -> dict[str, Any]:
        codec = {
            key: getattr(args, key)
            for key in ("format", "indent", "sort_keys", "strict")
            if getattr(args, key) is not None
        }
        overrides: dict[str, Any] = {}
        if codec:
            overrides["codec"] = codec
        if args.log_level is not None:
            overrides["log"] = {"level": args.log_level}
        return overrides

    @staticmethod
    def _argparse() -> argparse.ArgumentParser:
        global_opts = argparse.ArgumentParser(
            prog="pipectl",
            description="Encode and decode pipeline requests."
        )
        global_opts.add_argument("--format", choices=["json", "yaml"])
        global_opts.add_argument("--indent", type=int)
        global_opts.add_argument("--sort-keys", action="store_true", default=None)
        global_opts.add_argument("--strict", action="store_true", default=None)
        global_opts.add_argument(
            "-l", "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        )

        sub = global_opts.add_subparsers(dest="command", required=True)

        encode = sub.add_parser("encode", help="Print the encoded form of a request.")
        encode.add_argument("-o", "--organization", required=True)
        encode.add_argument("-p", "--pipeline", required=True)

        decode = sub.add_parser("decode", help="Decode a request from a file or stdin.")
        decode.add_argument("file", nargs="?", default="-")

        roundtrip = sub.add_parser(
            "roundtrip",
            help="Encode a request, decode it back and compare."
        )
        roundtrip.add_argument("-o", "--organization", required=True)
        roundtrip.add_argument("-p", "--pipeline", required=True)

        return global_opts
