"""
Symmetric Cipher Primitives
============================

Block and stream ciphers with their effective security strength in
bits. Two-key triple DES is credited with 80 bits and three-key
triple DES with 112 bits, following SP 800-57.

References:
    - NIST SP 800-57 Part 1 Rev. 5 (2020), Table 2.
    - NIST SP 800-67 Rev. 2 (2017). Recommendation for the Triple
      Data Encryption Algorithm (TDEA) Block Cipher.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class Symmetric:
    """A symmetric cipher.

    Attributes:
        id: Catalog identifier.
        name: Canonical cipher name.
        security: Effective security strength in bits.
    """

    id: int
    name: str
    security: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symmetric):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((Symmetric, self.id))

    @classmethod
    def from_id(cls, cipher_id: int) -> Symmetric:
        """Return the catalog cipher for *cipher_id*, or ``SYMMETRIC_NOT_SUPPORTED``."""
        return SYMMETRIC_CATALOG.get(cipher_id, SYMMETRIC_NOT_SUPPORTED)


SYMMETRIC_NOT_SUPPORTED = Symmetric(0xFFFF, "unsupported", 0)

DES = Symmetric(1, "des", 56)
TDEA2 = Symmetric(2, "des-ede", 80)
TDEA3 = Symmetric(3, "des-ede3", 112)
IDEA = Symmetric(4, "idea", 126)
AES128 = Symmetric(5, "aes128", 128)
AES192 = Symmetric(6, "aes192", 192)
AES256 = Symmetric(7, "aes256", 256)
CAMELLIA128 = Symmetric(8, "camellia128", 128)
CAMELLIA192 = Symmetric(9, "camellia192", 192)
CAMELLIA256 = Symmetric(10, "camellia256", 256)
CHACHA20 = Symmetric(11, "chacha20", 256)


SYMMETRIC_CATALOG: dict[int, Symmetric] = {
    cipher.id: cipher
    for cipher in (
        DES, TDEA2, TDEA3, IDEA,
        AES128, AES192, AES256,
        CAMELLIA128, CAMELLIA192, CAMELLIA256,
        CHACHA20,
    )
}
