"""Application entry point — decode the header of one NES file."""

from __future__ import annotations

import sys

from nesheader.cli import main

if __name__ == "__main__":
    sys.exit(main())
