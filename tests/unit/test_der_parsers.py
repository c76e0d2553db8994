"""
Unit tests for the DER parser adapters and the default dispatch table.

Test categories:
  - Happy path: each parser on a body of its own encoding
  - Label/encoding mismatch: a valid key body under the wrong label fails
  - Garbage: malformed DER → BLOCK_PARSE_FAILURE naming the block type
"""

from __future__ import annotations

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from better_pem.adapters.der_parsers import CryptographyDerParser, default_parsers
from better_pem.domain.errors import BlockParseFailure
from better_pem.domain.models import PemKind
from better_pem.domain.ports import DerParser
from better_pem.railway import ErrorCode, ResultAssertions
from tests.conftest import spki


def _der(key: PrivateKeyTypes, fmt: serialization.PrivateFormat) -> bytes:
    return key.private_bytes(serialization.Encoding.DER, fmt, serialization.NoEncryption())


def _parser(kind: PemKind) -> DerParser:
    return default_parsers()[kind]


@pytest.fixture(scope="module")
def pkcs1_der(rsa_key: rsa.RSAPrivateKey) -> bytes:
    return _der(rsa_key, serialization.PrivateFormat.TraditionalOpenSSL)


@pytest.fixture(scope="module")
def sec1_der(ec_key: ec.EllipticCurvePrivateKey) -> bytes:
    return _der(ec_key, serialization.PrivateFormat.TraditionalOpenSSL)


@pytest.fixture(scope="module")
def pkcs8_rsa_der(rsa_key: rsa.RSAPrivateKey) -> bytes:
    return _der(rsa_key, serialization.PrivateFormat.PKCS8)


@pytest.fixture(scope="module")
def pkcs8_ec_der(ec_key: ec.EllipticCurvePrivateKey) -> bytes:
    return _der(ec_key, serialization.PrivateFormat.PKCS8)


class TestDispatchTable:
    def test_covers_every_kind(self) -> None:
        parsers = default_parsers()
        assert set(parsers) == set(PemKind)
        for kind, parser in parsers.items():
            assert isinstance(parser, DerParser)
            assert isinstance(parser, CryptographyDerParser)
            assert parser.kind is kind

    def test_repr(self) -> None:
        assert repr(_parser(PemKind.EC_PRIVATE_KEY)) == "CryptographyDerParser(EC_PRIVATE_KEY)"


class TestHappyPath:
    def test_certificate(self, rsa_cert: x509.Certificate) -> None:
        der = rsa_cert.public_bytes(serialization.Encoding.DER)
        cert = ResultAssertions.assert_success(_parser(PemKind.CERTIFICATE).parse(der))
        assert isinstance(cert, x509.Certificate)
        assert cert.serial_number == rsa_cert.serial_number

    def test_pkcs1_rsa_key(self, pkcs1_der: bytes, rsa_key: rsa.RSAPrivateKey) -> None:
        key = ResultAssertions.assert_success(_parser(PemKind.RSA_PRIVATE_KEY).parse(pkcs1_der))
        assert isinstance(key, rsa.RSAPrivateKey)
        assert key.private_numbers() == rsa_key.private_numbers()

    def test_sec1_ec_key(self, sec1_der: bytes, ec_key: ec.EllipticCurvePrivateKey) -> None:
        key = ResultAssertions.assert_success(_parser(PemKind.EC_PRIVATE_KEY).parse(sec1_der))
        assert isinstance(key, ec.EllipticCurvePrivateKey)
        assert key.private_numbers() == ec_key.private_numbers()

    def test_pkcs8_rsa_key(self, pkcs8_rsa_der: bytes, rsa_key: rsa.RSAPrivateKey) -> None:
        key = ResultAssertions.assert_success(_parser(PemKind.PRIVATE_KEY).parse(pkcs8_rsa_der))
        assert isinstance(key, rsa.RSAPrivateKey)
        assert spki(key.public_key()) == spki(rsa_key.public_key())

    def test_pkcs8_ec_key(self, pkcs8_ec_der: bytes) -> None:
        key = ResultAssertions.assert_success(_parser(PemKind.PRIVATE_KEY).parse(pkcs8_ec_der))
        assert isinstance(key, ec.EllipticCurvePrivateKey)

    def test_pkcs8_ed25519_key(self, ed25519_key: ed25519.Ed25519PrivateKey) -> None:
        """
        GIVEN a PKCS#8 body for an algorithm that is neither RSA nor EC
        WHEN parsed as PRIVATE KEY
        THEN the key cryptography loaded is returned as-is.
        """
        der = _der(ed25519_key, serialization.PrivateFormat.PKCS8)
        key = ResultAssertions.assert_success(_parser(PemKind.PRIVATE_KEY).parse(der))
        assert isinstance(key, ed25519.Ed25519PrivateKey)
        assert spki(key.public_key()) == spki(ed25519_key.public_key())


class TestLabelEncodingMismatch:
    """Each label accepts exactly one encoding, even when the bytes are a valid key."""

    @pytest.mark.parametrize(
        ("kind", "body"),
        [
            (PemKind.RSA_PRIVATE_KEY, "pkcs8_rsa_der"),
            (PemKind.RSA_PRIVATE_KEY, "sec1_der"),
            (PemKind.EC_PRIVATE_KEY, "pkcs1_der"),
            (PemKind.EC_PRIVATE_KEY, "pkcs8_ec_der"),
            (PemKind.PRIVATE_KEY, "pkcs1_der"),
            (PemKind.PRIVATE_KEY, "sec1_der"),
            (PemKind.CERTIFICATE, "pkcs1_der"),
        ],
    )
    def test_wrong_encoding_fails(
        self, kind: PemKind, body: str, request: pytest.FixtureRequest
    ) -> None:
        der = request.getfixturevalue(body)
        result = _parser(kind).parse(der)
        ResultAssertions.assert_failure(result, ErrorCode.BLOCK_PARSE_FAILURE)
        error = ResultAssertions.assert_failure_exception(result, BlockParseFailure)
        assert error.block_type == kind.block_type


class TestMalformedDer:
    @pytest.mark.parametrize("kind", list(PemKind))
    @pytest.mark.parametrize(
        "der",
        [b"", b"not DER at all", b"\x30\x03\x02\x01\x01", b"\x30\x82\xff\xff\x02"],
    )
    def test_garbage_fails_with_block_type(self, kind: PemKind, der: bytes) -> None:
        """
        GIVEN bytes that are not a valid structure for the label
        WHEN parsed
        THEN BLOCK_PARSE_FAILURE names the block type and keeps the cause.
        """
        result = _parser(kind).parse(der)
        error = ResultAssertions.assert_failure_exception(result, BlockParseFailure)
        assert error.block_type == kind.block_type
        assert error.__cause__ is error.cause
        ResultAssertions.assert_failure_message_contains(result, kind.block_type)

    def test_trailing_bytes_after_key_fail(self, pkcs1_der: bytes) -> None:
        result = _parser(PemKind.RSA_PRIVATE_KEY).parse(pkcs1_der + b"\x00\x00")
        ResultAssertions.assert_failure(result, ErrorCode.BLOCK_PARSE_FAILURE)
