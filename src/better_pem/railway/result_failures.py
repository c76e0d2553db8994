"""
Convenience factory methods for the failures parse_pems can return.

Each factory builds the domain exception, picks its ErrorCode and message,
and wraps all three into a Failure — so adapters never assemble a
FailureDescription by hand.

Usage:
    from better_pem.railway.result_failures import ResultFailures

    # Instead of:
    Result.failure(
        ErrorCode.BLOCK_PARSE_FAILURE,
        "Failed to parse 'CERTIFICATE' PEM block: ...",
        BlockParseFailure("CERTIFICATE", exc),
    )

    # Write:
    ResultFailures.block_parse_failure("CERTIFICATE", exc)
"""

from __future__ import annotations

from collections.abc import Iterable

from better_pem.domain.errors import (
    BlockParseFailure,
    NoRecognizedPemBlocks,
    StreamReadFailure,
    UnsupportedInputFormat,
)
from better_pem.railway.failure import ErrorCode
from better_pem.railway.result import Result


class ResultFailures:
    """Factory methods, one per failure of parse_pems."""

    @staticmethod
    def unsupported_input_format(source: object) -> Result:
        """Input was not bytes, text, or a readable stream."""
        error = UnsupportedInputFormat(type(source))
        return Result.failure(ErrorCode.UNSUPPORTED_INPUT_FORMAT, str(error), error)

    @staticmethod
    def stream_read_failure(cause: BaseException) -> Result:
        """Draining the input stream failed; `cause` is kept as __cause__."""
        error = StreamReadFailure(f"Failed to drain input stream: {cause}")
        error.__cause__ = cause
        return Result.failure(ErrorCode.STREAM_READ_FAILURE, str(error), error)

    @staticmethod
    def block_parse_failure(block_type: str, cause: BaseException) -> Result:
        """A recognized block's DER body did not parse."""
        error = BlockParseFailure(block_type, cause)
        error.__cause__ = cause
        return Result.failure(ErrorCode.BLOCK_PARSE_FAILURE, str(error), error)

    @staticmethod
    def no_recognized_pem_blocks(skipped_block_types: Iterable[str] = ()) -> Result:
        """Nothing recognized; `skipped_block_types` lists the labels that were ignored."""
        error = NoRecognizedPemBlocks(tuple(skipped_block_types))
        return Result.failure(ErrorCode.NO_RECOGNIZED_PEM_BLOCKS, str(error), error)

