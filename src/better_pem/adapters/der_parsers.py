"""
DER parser adapters — one per recognized PEM block type.

Adapter layer — implements the DerParser port using:
  - cryptography (PyCA): loads the certificate / private key objects callers receive
  - asn1crypto: checks that a key body has the ASN.1 shape its label promises

Pipeline for a key block:
  der bytes
    → asn1crypto: RSAPrivateKey / ECPrivateKey / PKCS#8 envelope .load(strict=True)
    → cryptography: serialization.load_der_private_key()
    → algorithm check (RSA label → RSA key, EC label → EC key)

Key design decision: cryptography's loader auto-detects PKCS#1, SEC1 and
PKCS#8, so on its own it would accept a PKCS#8 body under an
"RSA PRIVATE KEY" label. The asn1crypto shape check pins each label to
exactly one encoding.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from asn1crypto import core, keys
from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from better_pem.domain.models import PemKind
from better_pem.domain.ports import DerParser
from better_pem.railway.result import Result
from better_pem.railway.result_failures import ResultFailures

# ─────────────────────── PKCS#8 ASN.1 Schema ───────────────────────
# RFC 5958:
#
# OneAsymmetricKey ::= SEQUENCE {
#     version                   Version,
#     privateKeyAlgorithm       AlgorithmIdentifier,
#     privateKey                OCTET STRING,
#     attributes            [0] IMPLICIT Attributes OPTIONAL,
#     publicKey             [1] IMPLICIT BIT STRING OPTIONAL
# }
#
# asn1crypto's keys.PrivateKeyInfo picks the privateKey schema from the
# algorithm and fails on algorithms it has no schema for, so the envelope
# is declared here with the key left as opaque octets.


class _AlgorithmIdentifier(core.Sequence):  # type: ignore[misc]
    _fields = [
        ("algorithm", core.ObjectIdentifier),
        ("parameters", core.Any, {"optional": True}),
    ]


class _Attributes(core.SetOf):  # type: ignore[misc]
    _child_spec = core.Any


class _Pkcs8Envelope(core.Sequence):  # type: ignore[misc]
    _fields = [
        ("version", core.Integer),
        ("private_key_algorithm", _AlgorithmIdentifier),
        ("private_key", core.OctetString),
        ("attributes", _Attributes, {"implicit": 0, "optional": True}),
        ("public_key", core.BitString, {"implicit": 1, "optional": True}),
    ]


# ─────────────────────── Loaders (may raise) ───────────────────────


def _load_certificate(der_bytes: bytes) -> x509.Certificate:
    return x509.load_der_x509_certificate(der_bytes)


def _load_private_key(der_bytes: bytes, expected: type | None = None) -> PrivateKeyTypes:
    """Load a private key and, when `expected` is given, insist on its algorithm."""
    key = serialization.load_der_private_key(der_bytes, password=None)
    if expected is not None and not isinstance(key, expected):
        raise TypeError(f"Expected {expected.__name__}, got {type(key).__name__}")
    return key


def _load_pkcs1_rsa_key(der_bytes: bytes) -> rsa.RSAPrivateKey:
    """PKCS#1 RSAPrivateKey ::= SEQUENCE { version, modulus, publicExponent, ... }"""
    # .native walks every field, so a body of another shape raises here
    keys.RSAPrivateKey.load(der_bytes, strict=True).native
    return _load_private_key(der_bytes, rsa.RSAPrivateKey)  # type: ignore[return-value]


def _load_sec1_ec_key(der_bytes: bytes) -> ec.EllipticCurvePrivateKey:
    """SEC1 ECPrivateKey ::= SEQUENCE { version, privateKey, [0] parameters, [1] publicKey }"""
    keys.ECPrivateKey.load(der_bytes, strict=True).native
    return _load_private_key(der_bytes, ec.EllipticCurvePrivateKey)  # type: ignore[return-value]


def _load_pkcs8_key(der_bytes: bytes) -> PrivateKeyTypes:
    """
    PKCS#8 PrivateKeyInfo, checked against the algorithm-agnostic envelope above.

    The inner key is left to cryptography, which also rejects algorithms
    it does not support.
    """
    _Pkcs8Envelope.load(der_bytes, strict=True).native
    return _load_private_key(der_bytes)


# ─────────────────────── Public Parser Class ───────────────────────


class CryptographyDerParser:
    """
    Parse the DER body of one PEM block type.

    Implements the DerParser port.
    All exceptions are caught at this adapter boundary and become
    BLOCK_PARSE_FAILURE failures naming the block type.
    """

    def __init__(self, kind: PemKind, loader: Callable[[bytes], Any]) -> None:
        self._kind = kind
        self._loader = loader

    @property
    def kind(self) -> PemKind:
        return self._kind

    def parse(self, der_bytes: bytes) -> Result[Any]:
        try:
            return Result.success(self._loader(der_bytes))
        except Exception as e:
            return ResultFailures.block_parse_failure(self._kind.block_type, e)

    def __repr__(self) -> str:
        return f"CryptographyDerParser({self._kind.name})"


def default_parsers() -> dict[PemKind, DerParser]:
    """The dispatch table: every recognized block type and the parser it is sent to."""
    return {
        PemKind.CERTIFICATE: CryptographyDerParser(PemKind.CERTIFICATE, _load_certificate),
        PemKind.RSA_PRIVATE_KEY: CryptographyDerParser(PemKind.RSA_PRIVATE_KEY, _load_pkcs1_rsa_key),
        PemKind.EC_PRIVATE_KEY: CryptographyDerParser(PemKind.EC_PRIVATE_KEY, _load_sec1_ec_key),
        PemKind.PRIVATE_KEY: CryptographyDerParser(PemKind.PRIVATE_KEY, _load_pkcs8_key),
    }
