"""
better_pem — ergonomic extraction of certificates and private keys from PEM.

Accepts bytes, text, or a readable stream, parses every CERTIFICATE,
RSA PRIVATE KEY, EC PRIVATE KEY and PRIVATE KEY block it contains (other
block types are skipped), and returns the parsed objects in input order as
a ParsedPems the caller consumes one typed object at a time.

Built on Railway-Oriented Programming: parse_pems returns a Result.
"""

from better_pem.api import parse_pems
from better_pem.config import ParserSettings
from better_pem.domain.errors import (
    BlockParseFailure,
    EmptyResultSet,
    NoRecognizedPemBlocks,
    PemError,
    StreamReadFailure,
    UnexpectedVariant,
    UnsupportedInputFormat,
)
from better_pem.domain.models import ParsedPems, PemKind, PemObject
from better_pem.logconfig import configure_structlog
from better_pem.railway import ErrorCode, Failure, Result, Success

__version__ = "0.1.0"

__all__ = [
    "parse_pems",
    "ParserSettings",
    "configure_structlog",
    "ParsedPems",
    "PemKind",
    "PemObject",
    "PemError",
    "UnsupportedInputFormat",
    "StreamReadFailure",
    "BlockParseFailure",
    "NoRecognizedPemBlocks",
    "EmptyResultSet",
    "UnexpectedVariant",
    "ErrorCode",
    "Result",
    "Success",
    "Failure",
]
