"""
Integer Factorisation Cryptography Keys
========================================

RSA keys described by the bit length of the modulus.

References:
    - NIST SP 800-56B Rev. 2 (2019). Recommendation for Pair-Wise Key
      Establishment Using Integer Factorization Cryptography.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ifc:
    """An RSA modulus size.

    Attributes:
        k: Modulus size in bits.

    Raises:
        ValueError: If the size is not positive.
    """

    k: int

    def __post_init__(self) -> None:
        if self.k <= 0:
            raise ValueError(f"modulus size must be positive, got k={self.k}")

    def __str__(self) -> str:
        return f"RSA-{self.k}"


IFC_1024 = Ifc(1024)
IFC_1536 = Ifc(1536)
IFC_2048 = Ifc(2048)
IFC_3072 = Ifc(3072)
IFC_4096 = Ifc(4096)
IFC_7680 = Ifc(7680)
IFC_8192 = Ifc(8192)
IFC_15360 = Ifc(15360)

IFC_CATALOG: tuple[Ifc, ...] = (
    IFC_1024,
    IFC_1536,
    IFC_2048,
    IFC_3072,
    IFC_4096,
    IFC_7680,
    IFC_8192,
    IFC_15360,
)
