"""
Domain exceptions — one class per failure of parsing or consuming PEM input.

The first four describe why parse_pems failed; they travel on the failure
track as FailureDescription.exception and are raised only when a caller
leaves the railway with Result.get_or_raise().

EmptyResultSet and UnexpectedVariant signal misuse of a ParsedPems
(pulling past the end, asserting the wrong type) and are raised directly.

Each class also derives from the closest builtin exception so callers that
catch TypeError, ValueError, LookupError or IndexError keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from better_pem.domain.models import PemKind


class PemError(Exception):
    """Base class for every better_pem error."""


class UnsupportedInputFormat(PemError, TypeError):
    """Input was not bytes, text, or a readable stream."""

    def __init__(self, input_type: type) -> None:
        self.input_type = input_type
        super().__init__(
            f"PEM input must be bytes, str, or a readable stream, got {input_type.__name__}"
        )


class StreamReadFailure(PemError):
    """Draining a readable-stream input failed; the I/O error is the __cause__."""


class BlockParseFailure(PemError, ValueError):
    """A recognized PEM block did not parse as the structure its label promises."""

    def __init__(self, block_type: str, cause: BaseException) -> None:
        self.block_type = block_type
        self.cause = cause
        super().__init__(f"Failed to parse {block_type!r} PEM block: {cause}")


class NoRecognizedPemBlocks(PemError, LookupError):
    """Input held no PEM block of a recognized type (possibly no PEM at all)."""

    def __init__(self, skipped_block_types: tuple[str, ...] = ()) -> None:
        self.skipped_block_types = skipped_block_types
        if skipped_block_types:
            detail = "only unsupported block types found: " + ", ".join(skipped_block_types)
        else:
            detail = "no PEM blocks found"
        super().__init__(f"No recognized PEM blocks in input ({detail})")


class EmptyResultSet(PemError, IndexError):
    """A consumption call was made on a drained ParsedPems."""

    def __init__(self) -> None:
        super().__init__("No parsed PEM objects remain to be consumed")


class UnexpectedVariant(PemError, TypeError):
    """A typed consumption call asserted a kind that the front object does not have."""

    def __init__(self, expected: PemKind, actual: PemKind) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected next PEM object to be {expected.name}, but it is {actual.name}"
        )
