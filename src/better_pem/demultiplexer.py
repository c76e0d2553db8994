"""
PEM block demultiplexer — decode, dispatch by label, accumulate.

Domain layer — pure logic over injected ports. The decoder supplies blocks
in textual order; each block whose label is in the dispatch table goes to
its DerParser, every other block is skipped.

  decode → PemBlock ─┬─ recognized label   → parser.parse(der) → PemObject
                     └─ unrecognized label → skipped (logged)

Outcomes:
  - any parser failure   → that BLOCK_PARSE_FAILURE, nothing else returned
  - ≥ 1 parsed object    → Success(ParsedPems) in textual order
  - 0 parsed objects     → NO_RECOGNIZED_PEM_BLOCKS
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from better_pem.domain.models import ParsedPems, PemKind, PemObject
from better_pem.domain.ports import DerParser, PemBlockDecoder
from better_pem.railway.result import Failure, Result, Success
from better_pem.railway.result_failures import ResultFailures

log = structlog.get_logger()


class PemDemultiplexer:
    """Turn a PEM byte buffer into a ParsedPems result set."""

    def __init__(
        self,
        decoder: PemBlockDecoder,
        parsers: Mapping[PemKind, DerParser],
    ) -> None:
        self._decoder = decoder
        self._parsers = dict(parsers)

    def parse_all(self, data: bytes) -> Result[ParsedPems]:
        objects: list[PemObject] = []
        skipped: list[str] = []

        for index, block in enumerate(self._decoder.decode(data)):
            kind = PemKind.from_block_type(block.block_type)
            parser = self._parsers.get(kind) if kind is not None else None
            if kind is None or parser is None:
                log.debug("demux.block_skipped", block_type=block.block_type, index=index)
                skipped.append(block.block_type)
                continue

            match parser.parse(block.der_bytes):
                case Success(raw):
                    objects.append(PemObject(kind=kind, raw=raw))
                case Failure(err):
                    log.warning(
                        "demux.block_parse_failed",
                        block_type=block.block_type,
                        index=index,
                        error=err.message,
                    )
                    return Failure(err)

        if not objects:
            log.info("demux.no_recognized_blocks", skipped=skipped)
            return ResultFailures.no_recognized_pem_blocks(skipped)

        log.debug("demux.complete", objects=len(objects), skipped=len(skipped))
        return Result.success(ParsedPems(objects))
