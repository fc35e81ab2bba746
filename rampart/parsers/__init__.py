"""
Rampart Parsers
================

Input parsing: X.509 certificates to primitives.
"""

from rampart.parsers.certificate import (
    CertificateError,
    CertificateReport,
    assess_certificate,
    load_certificate,
    public_key_primitive,
    signature_hash,
)

__all__ = [
    "CertificateError",
    "CertificateReport",
    "assess_certificate",
    "load_certificate",
    "public_key_primitive",
    "signature_hash",
]
