"""
X.509 Certificate Parser
=========================

Loads a PEM or DER encoded certificate with ``cryptography`` and turns
its subject public key and signature hash into Rampart primitives so
they can be assessed against a standard.

Key mapping:
    - EC keys: by curve name through the Ecc name mapping
    - Ed25519, Ed448, X25519, X448 keys: by key type
    - RSA keys: modulus size (Ifc)
    - DSA and DH keys: bit lengths of p and q (Ffc); DH groups without
      q are treated as safe-prime groups, q = (p - 1) / 2

References:
    - RFC 5280 (2008). Internet X.509 Public Key Infrastructure
      Certificate and CRL Profile.
    - cryptography X.509 reference.
      https://cryptography.io/en/latest/x509/reference/
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import (
    dh,
    dsa,
    ec,
    ed448,
    ed25519,
    rsa,
    x448,
    x25519,
)

from rampart.context import Context
from rampart.primitives import ECC_NAMES, HASH_NAMES, Asymmetric, Ffc, Hash, Ifc
from rampart.primitives import ecc
from rampart.standards.base import Standard, Verdict

_PEM_MARKER = b"-----BEGIN CERTIFICATE-----"

_EDWARDS_KEYS = (
    (ed25519.Ed25519PublicKey, ecc.ED25519),
    (ed448.Ed448PublicKey, ecc.ED448),
    (x25519.X25519PublicKey, ecc.X25519),
    (x448.X448PublicKey, ecc.X448),
)


class CertificateError(Exception):
    """A certificate could not be read or its key is not supported."""


@dataclass(frozen=True, slots=True)
class CertificateReport:
    """Assessment of one certificate.

    Attributes:
        path: Source file.
        subject: RFC 4514 subject string.
        key: Subject public key.
        key_verdict: Verdict for the key.
        signature_hash: Hash used by the signature, None for
            signature schemes without a separate hash (EdDSA).
        hash_verdict: Verdict for the signature hash, if any.
    """

    path: str
    subject: str
    key: Asymmetric
    key_verdict: Verdict[Asymmetric]
    signature_hash: Optional[Hash]
    hash_verdict: Optional[Verdict[Hash]]

    @property
    def compliant(self) -> bool:
        return self.key_verdict.compliant and (
            self.hash_verdict is None or self.hash_verdict.compliant
        )


def load_certificate(path: Union[str, Path]) -> x509.Certificate:
    """Read a PEM or DER certificate from *path*.

    Raises:
        CertificateError: If the file cannot be read or parsed.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise CertificateError(f"cannot read {path}: {exc}") from exc

    try:
        if _PEM_MARKER in data:
            return x509.load_pem_x509_certificate(data)
        return x509.load_der_x509_certificate(data)
    except ValueError as exc:
        raise CertificateError(f"{path} is not a valid X.509 certificate: {exc}") from exc


def public_key_primitive(cert: x509.Certificate) -> Asymmetric:
    """Map the certificate's subject public key to a primitive.

    Raises:
        CertificateError: If the key type is not supported.
    """
    try:
        key = cert.public_key()
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise CertificateError(f"unsupported public key: {exc}") from exc

    if isinstance(key, ec.EllipticCurvePublicKey):
        return Asymmetric(ECC_NAMES.lookup(key.curve.name))
    for key_type, curve in _EDWARDS_KEYS:
        if isinstance(key, key_type):
            return Asymmetric(curve)
    if isinstance(key, rsa.RSAPublicKey):
        return Asymmetric(Ifc(key.key_size))
    if isinstance(key, dsa.DSAPublicKey):
        numbers = key.parameters().parameter_numbers()
        return Asymmetric(Ffc(numbers.p.bit_length(), numbers.q.bit_length()))
    if isinstance(key, dh.DHPublicKey):
        numbers = key.parameters().parameter_numbers()
        q = numbers.q if numbers.q is not None else (numbers.p - 1) // 2
        return Asymmetric(Ffc(numbers.p.bit_length(), q.bit_length()))

    raise CertificateError(f"unsupported public key type: {type(key).__name__}")


def signature_hash(cert: x509.Certificate) -> Optional[Hash]:
    """Hash function of the certificate signature, or None for EdDSA."""
    try:
        algorithm = cert.signature_hash_algorithm
    except UnsupportedAlgorithm as exc:
        raise CertificateError(f"unsupported signature algorithm: {exc}") from exc
    if algorithm is None:
        return None
    return HASH_NAMES.lookup(algorithm.name)


def assess_certificate(
    standard: Standard, ctx: Context, path: Union[str, Path]
) -> CertificateReport:
    """Assess the key and signature hash of the certificate at *path*.

    Args:
        standard: Standard to assess against.
        ctx: Assessment context.
        path: PEM or DER certificate file.

    Returns:
        CertificateReport with both verdicts.

    Raises:
        CertificateError: If the certificate cannot be loaded or its
            key type is not supported.
    """
    cert = load_certificate(path)
    key = public_key_primitive(cert)
    hash_func = signature_hash(cert)

    return CertificateReport(
        path=str(path),
        subject=cert.subject.rfc4514_string(),
        key=key,
        key_verdict=standard.validate_asymmetric(ctx, key),
        signature_hash=hash_func,
        hash_verdict=None if hash_func is None else standard.validate_hash(ctx, hash_func),
    )
