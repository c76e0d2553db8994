"""
Failure description — structured error information for the failure track.

Every Failure produced by better_pem carries a FailureDescription: an
ErrorCode naming the failed stage, a human-readable message, and the domain
exception describing the failure (see better_pem.domain.errors).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    """
    Error codes for the failure track of parse_pems.

    One code per recoverable failure; misuse of a ParsedPems
    (underrun, wrong accessor) is raised, not returned.
    """

    UNSUPPORTED_INPUT_FORMAT = "UNSUPPORTED_INPUT_FORMAT"
    """Input was not bytes, text, or a readable stream."""

    STREAM_READ_FAILURE = "STREAM_READ_FAILURE"
    """Draining a readable stream failed."""

    BLOCK_PARSE_FAILURE = "BLOCK_PARSE_FAILURE"
    """A recognized PEM block did not contain valid DER for its type."""

    NO_RECOGNIZED_PEM_BLOCKS = "NO_RECOGNIZED_PEM_BLOCKS"
    """The input held no PEM block of a recognized type."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    Immutable failure descriptor carrying error code, message and optional exception.

    >>> desc = FailureDescription(ErrorCode.NO_RECOGNIZED_PEM_BLOCKS, "No PEM blocks")
    >>> desc.code
    <ErrorCode.NO_RECOGNIZED_PEM_BLOCKS: 'NO_RECOGNIZED_PEM_BLOCKS'>
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False)
