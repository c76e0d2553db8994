"""
Input normalizer — turn bytes, text, or a readable stream into one bytes buffer.

Accepted shapes (closed set, anything else is UNSUPPORTED_INPUT_FORMAT):
  bytes                    returned unchanged
  bytearray / memoryview   copied into bytes
  str                      UTF-8 encoded
  readable stream          drained with read(chunk_size) until an empty chunk;
                           binary and text streams are both accepted

Draining consumes the stream; it is not rewound or closed.
"""

from __future__ import annotations

import structlog

from better_pem.domain.ports import ReadableStream
from better_pem.railway.result import Result
from better_pem.railway.result_failures import ResultFailures

log = structlog.get_logger()

DEFAULT_CHUNK_SIZE = 64 * 1024


class InputNormalizer:
    """Normalize a polymorphic PEM source into bytes."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    def normalize(self, source: object) -> Result[bytes]:
        match source:
            case bytes():
                return Result.success(source)
            case bytearray() | memoryview():
                return Result.success(bytes(source))
            case str():
                return Result.success(source.encode("utf-8"))
            case ReadableStream():
                return self._drain(source)
            case _:
                return ResultFailures.unsupported_input_format(source)

    def _drain(self, stream: ReadableStream) -> Result[bytes]:
        """Read the stream to exhaustion; any read problem becomes STREAM_READ_FAILURE."""
        buffer = bytearray()
        try:
            while True:
                chunk = stream.read(self._chunk_size)
                match chunk:
                    case bytes() | bytearray() | memoryview():
                        if not chunk:
                            break
                        buffer += chunk
                    case str():
                        if not chunk:
                            break
                        buffer += chunk.encode("utf-8")
                    case None:
                        raise BlockingIOError("stream has no data available (non-blocking read)")
                    case _:
                        raise TypeError(
                            f"stream read() returned {type(chunk).__name__}, expected bytes or str"
                        )
        except Exception as e:
            return ResultFailures.stream_read_failure(e)

        log.debug("input.stream_drained", bytes=len(buffer))
        return Result.success(bytes(buffer))
