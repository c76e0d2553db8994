"""
Pipeline — the ROP pipeline behind parse_pems.

Domain layer — no I/O of its own; the normalizer and demultiplexer are
injected. The two stages are connected via flat_map, forming a railway:

  normalize(source)        bytes | str | stream → bytes
    → parse_all(bytes)     bytes → ParsedPems

A failure in the first stage short-circuits the second.
"""

from __future__ import annotations

from typing import Protocol

from better_pem.demultiplexer import PemDemultiplexer
from better_pem.domain.models import ParsedPems
from better_pem.railway.result import Result


class SourceNormalizer(Protocol):
    def normalize(self, source: object) -> Result[bytes]: ...


def run_pipeline(
    source: object,
    normalizer: SourceNormalizer,
    demultiplexer: PemDemultiplexer,
) -> Result[ParsedPems]:
    """
    Normalize `source` and demultiplex its PEM blocks.

    Returns Result[ParsedPems] on success, or the failure of the first
    failing stage.
    """
    return normalizer.normalize(source).flat_map(demultiplexer.parse_all)
