"""Header decoding failures."""

from __future__ import annotations


class DecodeError(Exception):
    """Base class for every way a header decode can fail."""


class TruncatedInput(DecodeError):
    """The source ended before a full header could be read."""

    def __init__(self, observed: int, expected: int = 16) -> None:
        self.observed = observed
        self.expected = expected
        super().__init__(f"Truncated header: got {observed} of {expected} bytes")


class InvalidMagic(DecodeError):
    """The first four bytes are not the iNES tag."""

    def __init__(self, expected: bytes, actual: bytes) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid magic: expected {expected.hex(' ').upper()}, "
            f"got {actual.hex(' ').upper()}"
        )


class SourceReadFailure(DecodeError):
    """The byte source raised an I/O error while the header was being read."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"Failed to read header: {cause}")
