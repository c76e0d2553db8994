"""
Shared test fixtures and helpers for the better-pem test suite.

Key and certificate material is generated once per session with
cryptography, then PEM-encoded the way openssl would write it:
  - "CERTIFICATE"            self-signed X.509 certificates
  - "RSA PRIVATE KEY"        PKCS#1 (TraditionalOpenSSL)
  - "EC PRIVATE KEY"         SEC1 (TraditionalOpenSSL)
  - "PRIVATE KEY"            PKCS#8
  - "CERTIFICATE REQUEST"    PKCS#10, a block type better_pem skips
"""

from __future__ import annotations

import base64
import textwrap
from datetime import UTC, datetime, timedelta

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from cryptography.hazmat.primitives.asymmetric.types import (
    CertificateIssuerPrivateKeyTypes,
    PrivateKeyTypes,
    PublicKeyTypes,
)
from cryptography.x509.oid import NameOID

# ─────────────────────── Helpers ───────────────────────


def make_pem(block_type: str, der_bytes: bytes) -> bytes:
    """Wrap arbitrary bytes in PEM framing with the given label."""
    body = "\n".join(textwrap.wrap(base64.b64encode(der_bytes).decode("ascii"), 64))
    return f"-----BEGIN {block_type}-----\n{body}\n-----END {block_type}-----\n".encode("ascii")


def spki(public_key: PublicKeyTypes) -> bytes:
    """DER SubjectPublicKeyInfo — a stable value for comparing public keys."""
    return public_key.public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def join_pems(*pems: bytes) -> bytes:
    return b"\n".join(pems)


def _name(common_name: str) -> x509.Name:
    return x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])


def _self_signed(key: CertificateIssuerPrivateKeyTypes, common_name: str) -> x509.Certificate:
    now = datetime.now(UTC)
    return (
        x509.CertificateBuilder()
        .subject_name(_name(common_name))
        .issuer_name(_name(common_name))
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(key, hashes.SHA256())
    )


def _traditional_pem(key: PrivateKeyTypes) -> bytes:
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.TraditionalOpenSSL,
        serialization.NoEncryption(),
    )


def _pkcs8_pem(key: PrivateKeyTypes) -> bytes:
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


# ─────────────────────── Key material ───────────────────────


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ca_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ed25519_key() -> ed25519.Ed25519PrivateKey:
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture(scope="session")
def rsa_cert(rsa_key: rsa.RSAPrivateKey) -> x509.Certificate:
    return _self_signed(rsa_key, "rsa.example.test")


@pytest.fixture(scope="session")
def ca_cert(ca_key: rsa.RSAPrivateKey) -> x509.Certificate:
    return _self_signed(ca_key, "Example Test CA")


@pytest.fixture(scope="session")
def ec_cert(ec_key: ec.EllipticCurvePrivateKey) -> x509.Certificate:
    return _self_signed(ec_key, "ec.example.test")


# ─────────────────────── PEM encodings ───────────────────────


@pytest.fixture(scope="session")
def rsa_cert_pem(rsa_cert: x509.Certificate) -> bytes:
    return rsa_cert.public_bytes(serialization.Encoding.PEM)


@pytest.fixture(scope="session")
def ca_cert_pem(ca_cert: x509.Certificate) -> bytes:
    return ca_cert.public_bytes(serialization.Encoding.PEM)


@pytest.fixture(scope="session")
def ec_cert_pem(ec_cert: x509.Certificate) -> bytes:
    return ec_cert.public_bytes(serialization.Encoding.PEM)


@pytest.fixture(scope="session")
def rsa_key_pem(rsa_key: rsa.RSAPrivateKey) -> bytes:
    return _traditional_pem(rsa_key)


@pytest.fixture(scope="session")
def ca_key_pem(ca_key: rsa.RSAPrivateKey) -> bytes:
    return _traditional_pem(ca_key)


@pytest.fixture(scope="session")
def ec_key_pem(ec_key: ec.EllipticCurvePrivateKey) -> bytes:
    return _traditional_pem(ec_key)


@pytest.fixture(scope="session")
def pkcs8_rsa_key_pem(rsa_key: rsa.RSAPrivateKey) -> bytes:
    return _pkcs8_pem(rsa_key)


@pytest.fixture(scope="session")
def pkcs8_ec_key_pem(ec_key: ec.EllipticCurvePrivateKey) -> bytes:
    return _pkcs8_pem(ec_key)


@pytest.fixture(scope="session")
def pkcs8_ed25519_key_pem(ed25519_key: ed25519.Ed25519PrivateKey) -> bytes:
    return _pkcs8_pem(ed25519_key)


@pytest.fixture(scope="session")
def csr_pem(rsa_key: rsa.RSAPrivateKey) -> bytes:
    csr = (
        x509.CertificateSigningRequestBuilder()
        .subject_name(_name("rsa.example.test"))
        .sign(rsa_key, hashes.SHA256())
    )
    return csr.public_bytes(serialization.Encoding.PEM)
