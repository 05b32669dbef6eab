"""Command-line driver — resolve the file, decode it, print the report."""

from __future__ import annotations

import sys
from enum import IntEnum
from pathlib import Path
from typing import Sequence

from loguru import logger

from nesheader import __version__
from nesheader.config import PROG, RunConfig
from nesheader.core.decoder import decode
from nesheader.core.report import render_debug_dump, render_report
from nesheader.errors import DecodeError
from nesheader.logger import setup_logger
from nesheader.utils import format_size


class ExitCode(IntEnum):
    OK = 0
    NO_ARGS = 1
    NO_FILENAME = 2
    FILE_NOT_FOUND = 3
    DECODE_FAILED = 4
    BAD_ARGS = 5


USAGE_SHORT = f"Usage:\t{PROG} [flags] [file]\n"

HELP_TEXT = f"""Usage:

\t{PROG} [flags] [file]

The flags are:

\t-h\tShow this help message.
\t-v\tShow version.
\t-d\tShow debug messages.
\t--log-dir DIR\tAlso write a debug log file to DIR.

The file is:

\tAn NES file to decode.

Examples:

\t{PROG} ./zelda.nes
\t{PROG} -v
\t{PROG} -d -v
\t{PROG} -d -v -h
\t{PROG} -d -v -h ./zelda.nes
"""


def decode_file(config: RunConfig) -> ExitCode:
    """Open ``config.filename``, decode its header and print the report."""
    path = Path(config.filename)
    logger.info("Opening File.")
    logger.debug(f"Filename = {path}")

    if not path.exists():
        logger.error("File Does Not Exist.")
        return ExitCode.FILE_NOT_FOUND
    logger.success("File Exists.")

    try:
        with open(path, "rb") as f:
            logger.debug(f"File Size = {format_size(path.stat().st_size)}")
            header = decode(f)
    except DecodeError as e:
        logger.error(f"Decoding Header: {e}")
        return ExitCode.DECODE_FAILED
    except OSError as e:
        logger.error(f"Opening File: {e}")
        return ExitCode.DECODE_FAILED

    if config.debug:
        print(render_debug_dump(header))

    logger.success("Decoded Header.")
    for line in render_report(header):
        print(line)

    if not header.padding_is_clean():
        logger.warning(f"Header padding is not zero: {header.padding.hex(' ').upper()}")
    return ExitCode.OK


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    if not argv:
        setup_logger()
        logger.error("No Args.")
        print(USAGE_SHORT)
        return ExitCode.NO_ARGS

    try:
        config = RunConfig.from_args(argv)
    except ValueError as e:
        setup_logger()
        logger.error(f"Bad Args: {e}")
        print(USAGE_SHORT)
        return ExitCode.BAD_ARGS

    setup_logger(config.debug, config.log_dir)
    logger.success("=== NES Header Decoder ===")

    if config.help_only:
        print(HELP_TEXT)
        return ExitCode.OK

    for n, arg in enumerate([PROG, *argv]):
        logger.debug(f"#{n} - Args: {arg}")

    if not config.filename:
        logger.error("No Filename.")
        print(USAGE_SHORT)
        return ExitCode.NO_FILENAME

    if config.show_version:
        logger.info(f"Version = {__version__}")
    if config.show_help:
        print(HELP_TEXT)
    logger.debug("Debug enabled.")

    return decode_file(config)


if __name__ == "__main__":
    sys.exit(main())
