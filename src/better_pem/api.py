"""
Public entry point — wires the default adapters and runs the pipeline.

Composition root: this is the only place where the concrete normalizer,
decoder, and DER parsers are instantiated. Everything else depends on the
ports in better_pem.domain.ports.
"""

from __future__ import annotations

import structlog

from better_pem.adapters.der_parsers import default_parsers
from better_pem.adapters.input_normalizer import InputNormalizer
from better_pem.adapters.pem_decoder import Asn1CryptoPemDecoder
from better_pem.config import ParserSettings
from better_pem.demultiplexer import PemDemultiplexer
from better_pem.domain.models import ParsedPems
from better_pem.pipeline import run_pipeline
from better_pem.railway.result import Result


def _create_adapters(settings: ParserSettings) -> tuple[InputNormalizer, PemDemultiplexer]:
    """Instantiate the normalizer and a demultiplexer over the default dispatch table."""
    normalizer = InputNormalizer(chunk_size=settings.stream_chunk_size)
    demultiplexer = PemDemultiplexer(
        decoder=Asn1CryptoPemDecoder(),
        parsers=default_parsers(),
    )
    return normalizer, demultiplexer


def parse_pems(source: object, settings: ParserSettings | None = None) -> Result[ParsedPems]:
    """
    Parse every recognized PEM block in `source`, in order.

    `source` may be bytes (or bytearray/memoryview), a str, or a readable
    binary or text stream, which is drained. Recognized block types are
    CERTIFICATE, RSA PRIVATE KEY, EC PRIVATE KEY and PRIVATE KEY; any other
    block is skipped.

    Returns Result[ParsedPems] on success. Failures carry one of
    UNSUPPORTED_INPUT_FORMAT, STREAM_READ_FAILURE, BLOCK_PARSE_FAILURE or
    NO_RECOGNIZED_PEM_BLOCKS, with the matching better_pem exception attached.

        pems = parse_pems(open("bundle.pem", "rb")).get_or_raise()
        cert = pems.take_certificate()
    """
    normalizer, demultiplexer = _create_adapters(settings or ParserSettings())
    with structlog.contextvars.bound_contextvars(input_type=type(source).__name__):
        return run_pipeline(source, normalizer, demultiplexer)
