"""
Ports — Protocol-based interfaces for the collaborators of the demultiplexer.

These define WHAT the demultiplexer needs without specifying HOW:

  PemDemultiplexer ← Ports (protocols) ← Adapters (asn1crypto, cryptography)

Each port is a Protocol (structural typing) so adapters and test fakes
satisfy the contract simply by implementing the methods.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable

from better_pem.domain.models import PemBlock
from better_pem.railway.result import Result


@runtime_checkable
class ReadableStream(Protocol):
    """
    Any object that can be drained with read(size): files, sockets' makefile(),
    io.BytesIO, io.StringIO, ...

    Chunks may be bytes-like (binary streams) or str (text streams).
    """

    def read(self, size: int = -1, /) -> Any: ...


@runtime_checkable
class PemBlockDecoder(Protocol):
    """
    Port: split a byte buffer into PEM blocks, in textual order.

    Iteration ending is the normal termination, whether or not any block
    was found; bytes outside of BEGIN/END framing are ignored.
    """

    def decode(self, data: bytes) -> Iterator[PemBlock]: ...


@runtime_checkable
class DerParser(Protocol):
    """
    Port: parse the DER body of one recognized PEM block type.

    Returns Result[raw object] — the value cryptography produced — or a
    BLOCK_PARSE_FAILURE when the body is not valid for that type.
    """

    def parse(self, der_bytes: bytes) -> Result[Any]: ...
