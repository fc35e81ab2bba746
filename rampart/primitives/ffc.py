"""
Finite Field Cryptography Keys
===============================

DSA and Diffie-Hellman keys described by the size of the public key
``l`` (bits of the prime modulus p) and the size of the private key
``n`` (bits of the subgroup order q).

References:
    - NIST SP 800-56A Rev. 3 (2018). Pair-Wise Key-Establishment
      Schemes Using Discrete Logarithm Cryptography.
    - FIPS 186-4 (2013). Digital Signature Standard.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ffc:
    """A finite field key size pair.

    Attributes:
        l: Public key (modulus) size in bits.
        n: Private key (subgroup order) size in bits.

    Raises:
        ValueError: If either size is not positive or ``n`` exceeds ``l``.
    """

    l: int  # noqa: E741
    n: int

    def __post_init__(self) -> None:
        if self.l <= 0 or self.n <= 0:
            raise ValueError(f"key sizes must be positive, got l={self.l}, n={self.n}")
        if self.n > self.l:
            raise ValueError(f"private key size n={self.n} exceeds public key size l={self.l}")

    def __str__(self) -> str:
        return f"{self.l}/{self.n}"


FFC_1024_160 = Ffc(1024, 160)
FFC_2048_224 = Ffc(2048, 224)
FFC_2048_256 = Ffc(2048, 256)
FFC_3072_256 = Ffc(3072, 256)
FFC_7680_384 = Ffc(7680, 384)
FFC_15360_512 = Ffc(15360, 512)

FFC_CATALOG: tuple[Ffc, ...] = (
    FFC_1024_160,
    FFC_2048_224,
    FFC_2048_256,
    FFC_3072_256,
    FFC_7680_384,
    FFC_15360_512,
)
