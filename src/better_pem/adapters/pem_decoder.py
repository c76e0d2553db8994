"""
PEM block decoder adapter — PEM framing via asn1crypto.

Adapter layer — implements the PemBlockDecoder port. Each candidate block
is located in the buffer (a BEGIN line at the start of a line, then the
first END line after it), and the isolated block is handed to
asn1crypto.pem.unarmor(), which parses RFC 1421 headers and decodes the
base64 body.

A malformed candidate is skipped and scanning resumes after its BEGIN line:
  - no END line after the BEGIN line
  - another BEGIN line before the END line (unterminated block)
  - END label different from the BEGIN label
  - body unarmor() rejects (e.g. undecodable base64)
Skipping is never a failure; the demultiplexer decides whether anything
recognized was found.
"""

from __future__ import annotations

from collections.abc import Iterator

import structlog
from asn1crypto import pem

from better_pem.domain.models import PemBlock

log = structlog.get_logger()

_BEGIN = b"-----BEGIN "
_END = b"-----END "
_DASHES = b"-----"


def _line_end(data: bytes, start: int) -> int:
    """Offset just past the line starting at `start` (or len(data))."""
    newline = data.find(b"\n", start)
    return len(data) if newline == -1 else newline + 1


def _at_line_start(data: bytes, offset: int) -> bool:
    return offset == 0 or data[offset - 1 : offset] in (b"\n", b"\r")


class Asn1CryptoPemDecoder:
    """
    Decode PEM blocks in textual order.

    Implements the PemBlockDecoder port.
    """

    def decode(self, data: bytes) -> Iterator[PemBlock]:
        position = 0
        while True:
            start = data.find(_BEGIN, position)
            if start == -1:
                return
            if not _at_line_start(data, start):
                position = start + len(_BEGIN)
                continue
            block, position = self._decode_at(data, start)
            if block is not None:
                yield block

    def _decode_at(self, data: bytes, start: int) -> tuple[PemBlock | None, int]:
        """Decode the candidate block at `start`; return it (or None) and where to resume."""
        after_begin = _line_end(data, start)
        begin_line = data[start:after_begin].strip()
        if not begin_line.endswith(_DASHES) or len(begin_line) <= len(_BEGIN) + len(_DASHES):
            return self._skip(start, "malformed BEGIN line", after_begin)
        label = begin_line[len(_BEGIN) : -len(_DASHES)]

        end_at = data.find(_END, after_begin)
        if end_at == -1:
            return self._skip(start, "no END line", after_begin)
        next_begin = data.find(_BEGIN, after_begin)
        if next_begin != -1 and next_begin < end_at:
            return self._skip(start, "unterminated block", next_begin)

        after_end = _line_end(data, end_at)
        if data[end_at:after_end].strip() != _END + label + _DASHES:
            return self._skip(start, "END label does not match BEGIN label", after_begin)

        try:
            block_type, headers, der_bytes = pem.unarmor(data[start:after_end])
        except ValueError as e:
            return self._skip(start, str(e), after_begin)
        return PemBlock(block_type=block_type, der_bytes=der_bytes, headers=dict(headers)), after_end

    @staticmethod
    def _skip(offset: int, reason: str, resume: int) -> tuple[None, int]:
        log.debug("decoder.block_skipped", offset=offset, reason=reason)
        return None, resume
