"""
Elliptic Curve Primitives
==========================

Elliptic curves are identified by a numeric id drawn from a fixed
catalog. Each curve carries its nominal security strength in bits,
which is roughly half the bit length of the group order (NIST curves
use the strengths assigned by SP 800-57).

Two curves are the same primitive when their ids match; the name and
strength are descriptive only.

References:
    - NIST SP 800-186 (2023). Recommendations for Discrete
      Logarithm-based Cryptography: Elliptic Curve Domain Parameters.
    - SEC 2 v2 (2010). Recommended Elliptic Curve Domain Parameters.
    - RFC 5639 (2010). ECC Brainpool Standard Curves and Curve
      Generation.
    - RFC 7748 (2016). Elliptic Curves for Security.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class Ecc:
    """An elliptic curve.

    Attributes:
        id: Catalog identifier.
        name: Canonical (OpenSSL style) curve name.
        security: Nominal security strength in bits.
    """

    id: int
    name: str
    security: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ecc):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((Ecc, self.id))

    @classmethod
    def from_id(cls, ecc_id: int) -> Ecc:
        """Return the catalog curve for *ecc_id*, or ``ECC_NOT_SUPPORTED``."""
        return ECC_CATALOG.get(ecc_id, ECC_NOT_SUPPORTED)


ECC_NOT_SUPPORTED = Ecc(0xFFFF, "unsupported", 0)

# X9.62 prime curves
PRIME192V1 = Ecc(1, "prime192v1", 96)
PRIME192V2 = Ecc(2, "prime192v2", 96)
PRIME192V3 = Ecc(3, "prime192v3", 96)
PRIME239V1 = Ecc(4, "prime239v1", 119)
PRIME239V2 = Ecc(5, "prime239v2", 119)
PRIME239V3 = Ecc(6, "prime239v3", 119)
PRIME256V1 = Ecc(7, "prime256v1", 128)

# SEC 2 prime curves
SECP112R1 = Ecc(8, "secp112r1", 56)
SECP112R2 = Ecc(9, "secp112r2", 55)
SECP128R1 = Ecc(10, "secp128r1", 64)
SECP128R2 = Ecc(11, "secp128r2", 63)
SECP160K1 = Ecc(12, "secp160k1", 80)
SECP160R1 = Ecc(13, "secp160r1", 80)
SECP160R2 = Ecc(14, "secp160r2", 80)
SECP192K1 = Ecc(15, "secp192k1", 96)
SECP224K1 = Ecc(16, "secp224k1", 112)
SECP224R1 = Ecc(17, "secp224r1", 112)
SECP256K1 = Ecc(18, "secp256k1", 128)
SECP384R1 = Ecc(19, "secp384r1", 192)
SECP521R1 = Ecc(20, "secp521r1", 256)

# SEC 2 binary curves
SECT113R1 = Ecc(21, "sect113r1", 56)
SECT113R2 = Ecc(22, "sect113r2", 56)
SECT131R1 = Ecc(23, "sect131r1", 65)
SECT131R2 = Ecc(24, "sect131r2", 65)
SECT163K1 = Ecc(25, "sect163k1", 80)
SECT163R1 = Ecc(26, "sect163r1", 80)
SECT163R2 = Ecc(27, "sect163r2", 80)
SECT193R1 = Ecc(28, "sect193r1", 96)
SECT193R2 = Ecc(29, "sect193r2", 96)
SECT233K1 = Ecc(30, "sect233k1", 112)
SECT233R1 = Ecc(31, "sect233r1", 112)
SECT239K1 = Ecc(32, "sect239k1", 119)
SECT283K1 = Ecc(33, "sect283k1", 128)
SECT283R1 = Ecc(34, "sect283r1", 128)
SECT409K1 = Ecc(35, "sect409k1", 192)
SECT409R1 = Ecc(36, "sect409r1", 192)
SECT571K1 = Ecc(37, "sect571k1", 256)
SECT571R1 = Ecc(38, "sect571r1", 256)

# Brainpool curves
BRAINPOOLP160R1 = Ecc(39, "brainpoolP160r1", 80)
BRAINPOOLP160T1 = Ecc(40, "brainpoolP160t1", 80)
BRAINPOOLP192R1 = Ecc(41, "brainpoolP192r1", 96)
BRAINPOOLP192T1 = Ecc(42, "brainpoolP192t1", 96)
BRAINPOOLP224R1 = Ecc(43, "brainpoolP224r1", 112)
BRAINPOOLP224T1 = Ecc(44, "brainpoolP224t1", 112)
BRAINPOOLP256R1 = Ecc(45, "brainpoolP256r1", 128)
BRAINPOOLP256T1 = Ecc(46, "brainpoolP256t1", 128)
BRAINPOOLP320R1 = Ecc(47, "brainpoolP320r1", 160)
BRAINPOOLP320T1 = Ecc(48, "brainpoolP320t1", 160)
BRAINPOOLP384R1 = Ecc(49, "brainpoolP384r1", 192)
BRAINPOOLP384T1 = Ecc(50, "brainpoolP384t1", 192)
BRAINPOOLP512R1 = Ecc(51, "brainpoolP512r1", 256)
BRAINPOOLP512T1 = Ecc(52, "brainpoolP512t1", 256)

# Edwards and Montgomery curves
ED25519 = Ecc(53, "ed25519", 128)
ED448 = Ecc(54, "ed448", 224)
X25519 = Ecc(55, "x25519", 128)
X448 = Ecc(56, "x448", 224)

SM2 = Ecc(57, "sm2", 128)


ECC_CATALOG: dict[int, Ecc] = {
    curve.id: curve
    for curve in (
        PRIME192V1, PRIME192V2, PRIME192V3,
        PRIME239V1, PRIME239V2, PRIME239V3, PRIME256V1,
        SECP112R1, SECP112R2, SECP128R1, SECP128R2,
        SECP160K1, SECP160R1, SECP160R2, SECP192K1,
        SECP224K1, SECP224R1, SECP256K1, SECP384R1, SECP521R1,
        SECT113R1, SECT113R2, SECT131R1, SECT131R2,
        SECT163K1, SECT163R1, SECT163R2, SECT193R1, SECT193R2,
        SECT233K1, SECT233R1, SECT239K1, SECT283K1, SECT283R1,
        SECT409K1, SECT409R1, SECT571K1, SECT571R1,
        BRAINPOOLP160R1, BRAINPOOLP160T1, BRAINPOOLP192R1, BRAINPOOLP192T1,
        BRAINPOOLP224R1, BRAINPOOLP224T1, BRAINPOOLP256R1, BRAINPOOLP256T1,
        BRAINPOOLP320R1, BRAINPOOLP320T1, BRAINPOOLP384R1, BRAINPOOLP384T1,
        BRAINPOOLP512R1, BRAINPOOLP512T1,
        ED25519, ED448, X25519, X448, SM2,
    )
}
