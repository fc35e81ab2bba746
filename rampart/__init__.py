"""
Rampart -- Cryptographic Compliance Engine
===========================================

Assesses cryptographic primitives (elliptic curves, finite field and
integer factorisation keys, hash functions and symmetric ciphers)
against published standards, returning a compliance verdict together
with a recommended alternative.

Modules:
    - rampart.primitives: Primitive types and the fixed catalogs
    - rampart.context: Assessment context (security floor, year)
    - rampart.standards: Standard contract, tier tables and the
      bundled standards (NIST, BSI, CNSA, ECRYPT, Lenstra, testing)
    - rampart.core: Engine facade and Pydantic result models
    - rampart.parsers: X.509 certificate key extraction
    - rampart.ffi: C-compatible validation functions
    - rampart.output: Console and report output
    - rampart.cli: Click-based command-line interface

References:
    - NIST SP 800-57 Part 1 Rev. 5 (2020). Recommendation for
      Key Management.
    - NIST SP 800-131A Rev. 2 (2019). Transitioning the Use of
      Cryptographic Algorithms and Key Lengths.
    - BSI TR-02102-1 (2024). Cryptographic Mechanisms:
      Recommendations and Key Lengths.
"""

__version__ = "1.0.0"
__tool_name__ = "rampart"
