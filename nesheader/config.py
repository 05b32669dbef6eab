"""Run configuration — built once from the command line and passed explicitly."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Sequence

PROG = "nes-header-decoder"


class _ArgumentParser(argparse.ArgumentParser):
    """Raises instead of printing usage and exiting; the driver picks the exit code."""

    def error(self, message: str) -> NoReturn:
        raise ValueError(message)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the decoder.

    ``-h`` is a plain flag rather than argparse's help action: alone it
    prints help and exits, combined with other flags it prints help and
    the run continues. Every token that is not a known flag is taken as
    a file name; the last one wins.
    """
    parser = _ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("-h", dest="show_help", action="store_true")
    parser.add_argument("-v", dest="show_version", action="store_true")
    parser.add_argument("-d", dest="debug", action="store_true")
    parser.add_argument("--log-dir", dest="log_dir", type=Path, default=None)
    return parser


@dataclass(frozen=True)
class RunConfig:
    """Immutable settings for one decoder run."""

    filename: str = ""
    debug: bool = False
    show_version: bool = False
    show_help: bool = False
    help_only: bool = False
    log_dir: Path | None = None

    @classmethod
    def from_args(cls, argv: Sequence[str]) -> RunConfig:
        """Parse *argv* (without the program name).

        Raises ``ValueError`` when a known flag is malformed, e.g.
        ``--log-dir`` without a directory.
        """
        args, files = build_parser().parse_known_args(list(argv))
        return cls(
            filename=files[-1] if files else "",
            debug=args.debug,
            show_version=args.show_version,
            show_help=args.show_help,
            help_only=list(argv) == ["-h"],
            log_dir=args.log_dir,
        )
