"""
Domain models — the parsed objects and the result set handed to callers.

  PemKind     closed set of recognized PEM labels (the tagged-union tag)
  PemBlock    one decoded PEM block, before dispatch
  PemObject   one parsed object: its kind plus the value cryptography returned
  ParsedPems  ordered, destructive queue of PemObjects returned by parse_pems

PemBlock and PemObject are frozen dataclasses. ParsedPems is the only
mutable model: it shrinks as the caller consumes it and is never extended.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Any, cast

from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from better_pem.domain.errors import EmptyResultSet, UnexpectedVariant


@unique
class PemKind(Enum):
    """
    The four recognized variants, valued by the PEM label they are decoded from.

    PRIVATE_KEY is the algorithm-generic PKCS#8 variant; the key it wraps
    may be RSA, EC, Ed25519, ... depending on the encoded algorithm.
    """

    CERTIFICATE = "CERTIFICATE"
    RSA_PRIVATE_KEY = "RSA PRIVATE KEY"
    EC_PRIVATE_KEY = "EC PRIVATE KEY"
    PRIVATE_KEY = "PRIVATE KEY"

    @property
    def block_type(self) -> str:
        return self.value

    @classmethod
    def from_block_type(cls, block_type: str) -> PemKind | None:
        """Exact-match lookup of a PEM label; None for unrecognized labels."""
        try:
            return cls(block_type)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class PemBlock:
    """A PEM block as framed in the input: label, DER body, and RFC 1421 headers."""

    block_type: str
    der_bytes: bytes = field(repr=False)
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PemObject:
    """
    Opaque parsed object — a tagged union over the four PemKind variants.

    `raw` is exactly what the external parser returned:
      CERTIFICATE      → cryptography.x509.Certificate
      RSA_PRIVATE_KEY  → rsa.RSAPrivateKey
      EC_PRIVATE_KEY   → ec.EllipticCurvePrivateKey
      PRIVATE_KEY      → any cryptography private key type
    """

    kind: PemKind
    raw: Any

    def as_raw(self) -> Any:
        return self.raw


class ParsedPems:
    """
    Ordered result set of parsed PEM objects, consumed from the front.

    Objects appear in the order their blocks were found in the input.
    Every take_* call removes the front object; remaining_count() does not.
    A typed take that asserts the wrong kind raises UnexpectedVariant and
    leaves the object in place, so the caller can retry with the right
    accessor. Taking from an empty set raises EmptyResultSet.

    Not safe for concurrent consumption; callers must serialize access.

        pems = parse_pems(bundle).get_or_raise()
        cert = pems.take_certificate()
        key = pems.take_rsa_private_key()
    """

    __slots__ = ("_objects",)

    def __init__(self, objects: Iterable[PemObject]) -> None:
        self._objects: deque[PemObject] = deque(objects)
        if not self._objects:
            raise ValueError("ParsedPems requires at least one parsed object")

    # ──────────────────────── Queries ────────────────────────

    def remaining_count(self) -> int:
        return len(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def kinds(self) -> tuple[PemKind, ...]:
        """Kinds of the remaining objects, front first."""
        return tuple(obj.kind for obj in self._objects)

    def peek_kind(self) -> PemKind:
        """Kind of the front object, without consuming it."""
        return self._front().kind

    # ──────────────────────── Consumption ────────────────────────

    def take_next_any(self) -> PemObject:
        """Remove and return the front object, whatever its kind."""
        self._front()
        return self._objects.popleft()

    def take_next_as(self, kind: PemKind) -> Any:
        """
        Remove the front object and return its raw value, asserting its kind.

        Raises UnexpectedVariant (without consuming) when the front object
        is of another kind. `kind` must be a PemKind member (TypeError
        otherwise, even on an empty set).
        """
        if not isinstance(kind, PemKind):
            raise TypeError(f"take_next_as expects a PemKind, got {kind!r}")
        front = self._front()
        if front.kind is not kind:
            raise UnexpectedVariant(expected=kind, actual=front.kind)
        self._objects.popleft()
        return front.raw

    def take_certificate(self) -> x509.Certificate:
        return cast(x509.Certificate, self.take_next_as(PemKind.CERTIFICATE))

    def take_rsa_private_key(self) -> rsa.RSAPrivateKey:
        return cast(rsa.RSAPrivateKey, self.take_next_as(PemKind.RSA_PRIVATE_KEY))

    def take_ec_private_key(self) -> ec.EllipticCurvePrivateKey:
        return cast(ec.EllipticCurvePrivateKey, self.take_next_as(PemKind.EC_PRIVATE_KEY))

    def take_private_key(self) -> PrivateKeyTypes:
        """Take a PKCS#8 ("PRIVATE KEY") object; the key may be of any algorithm."""
        return cast(PrivateKeyTypes, self.take_next_as(PemKind.PRIVATE_KEY))

    def drain(self) -> Iterator[PemObject]:
        """Lazily consume every remaining object, front first."""
        while self._objects:
            yield self._objects.popleft()

    # ──────────────────────── Internals ────────────────────────

    def _front(self) -> PemObject:
        if not self._objects:
            raise EmptyResultSet()
        return self._objects[0]

    def __repr__(self) -> str:
        kinds = ", ".join(kind.name for kind in self.kinds())
        return f"ParsedPems([{kinds}])"
