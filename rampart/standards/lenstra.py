"""
Lenstra Estimates
==================

Key size recommendations derived from Lenstra's extrapolation of
computational power: starting from 56-bit DES being adequate in 1982,
the required strength grows by two bits every three years. A primitive
offering ``s`` bits therefore remains adequate through the year

    1982 + floor(3 * (s - 56) / 2)

which gives 2018 for 80 bits, 2066 for 112 bits, 2090 for 128 bits
and 2186 for 192 bits. Every tier expires at the year computed from
its lower bound. Asymmetric sizes use the conventional strength
equivalences (1024 -> 80, 2048 -> 112, 3072 -> 128, 7680 -> 192,
15360 -> 256).

Lenstra's estimates are algorithm agnostic, so every primitive is
judged purely by its strength.

References:
    - Lenstra, A. K. (2004). Key Lengths. In The Handbook of
      Information Security, Wiley.
    - Lenstra, A. K. and Verheul, E. R. (2001). Selecting
      Cryptographic Key Sizes. Journal of Cryptology 14(4).
"""

from __future__ import annotations

from rampart.primitives import ecc, ffc, hash as hashes, ifc, symmetric
from rampart.standards.tiers import (
    Tier,
    TierTable,
    TieredStandard,
    collision_resistance,
    field_size,
    modulus_size,
    pre_image_resistance,
    security,
)

BASE_YEAR = 1982
BASE_SECURITY = 56


def adequate_until(bits: int) -> int:
    """Last year in which *bits* of security are considered adequate."""
    return BASE_YEAR + (3 * (bits - BASE_SECURITY)) // 2


Y80 = adequate_until(80)
Y112 = adequate_until(112)
Y128 = adequate_until(128)
Y192 = adequate_until(192)
Y256 = adequate_until(256)


ECC_TABLE = TierTable(
    measure=security,
    tiers=(
        Tier(0, 80, ecc.SECP224R1, compliant=False, cutover=Y112),
        Tier(80, 112, ecc.SECP224R1, cutover=Y80),
        Tier(112, 128, ecc.SECP224R1, cutover=Y112),
        Tier(128, 192, ecc.PRIME256V1, cutover=Y128),
        Tier(192, 256, ecc.SECP384R1, cutover=Y192),
        Tier(256, None, ecc.SECP521R1, cutover=Y256),
    ),
)

FFC_TABLE = TierTable(
    measure=field_size,
    floor=False,
    default=ffc.FFC_2048_224,
    tiers=(
        Tier((0, 0), (1024, None), ffc.FFC_2048_224, compliant=False, cutover=Y112),
        Tier((1024, 160), (2048, None), ffc.FFC_2048_224, cutover=Y80),
        Tier((2048, 224), (3072, None), ffc.FFC_2048_224, cutover=Y112),
        Tier((3072, 256), (7680, None), ffc.FFC_3072_256, cutover=Y128),
        Tier((7680, 384), (15360, None), ffc.FFC_7680_384, cutover=Y192),
        Tier((15360, 512), None, ffc.FFC_15360_512, cutover=Y256),
    ),
)

IFC_TABLE = TierTable(
    measure=modulus_size,
    floor=False,
    tiers=(
        Tier(0, 1024, ifc.IFC_2048, compliant=False, cutover=Y112),
        Tier(1024, 2048, ifc.IFC_2048, cutover=Y80),
        Tier(2048, 3072, ifc.IFC_2048, cutover=Y112),
        Tier(3072, 7680, ifc.IFC_3072, cutover=Y128),
        Tier(7680, 15360, ifc.IFC_7680, cutover=Y192),
        Tier(15360, None, ifc.IFC_15360, cutover=Y256),
    ),
)

HASH_TABLE = TierTable(
    measure=collision_resistance,
    tiers=(
        Tier(0, 80, hashes.SHA224, compliant=False, cutover=Y112),
        Tier(80, 112, hashes.SHA224, cutover=Y80),
        Tier(112, 128, hashes.SHA224, cutover=Y112),
        Tier(128, 192, hashes.SHA256, cutover=Y128),
        Tier(192, 256, hashes.SHA384, cutover=Y192),
        Tier(256, None, hashes.SHA512, cutover=Y256),
    ),
)

HASH_BASED_TABLE = TierTable(
    measure=pre_image_resistance,
    tiers=(
        Tier(0, 80, hashes.SHA224, compliant=False, cutover=Y112),
        Tier(80, 112, hashes.SHA224, cutover=Y80),
        Tier(112, 128, hashes.SHA224, cutover=Y112),
        Tier(128, 192, hashes.SHA224, cutover=Y128),
        Tier(192, 256, hashes.SHA224, cutover=Y192),
        Tier(256, None, hashes.SHA256, cutover=Y256),
    ),
)

SYMMETRIC_TABLE = TierTable(
    measure=security,
    tiers=(
        Tier(0, 80, symmetric.AES128, compliant=False, cutover=Y112),
        Tier(80, 112, symmetric.AES128, cutover=Y80),
        Tier(112, 128, symmetric.AES128, cutover=Y112),
        Tier(128, 192, symmetric.AES128, cutover=Y128),
        Tier(192, 256, symmetric.AES192, cutover=Y192),
        Tier(256, None, symmetric.AES256, cutover=Y256),
    ),
)


class Lenstra(TieredStandard):
    """Lenstra's key length estimates."""

    name = "lenstra"
    title = "Lenstra (2004), Key Lengths"

    ecc_table = ECC_TABLE
    ffc_table = FFC_TABLE
    ifc_table = IFC_TABLE
    hash_table = HASH_TABLE
    hash_based_table = HASH_BASED_TABLE
    symmetric_table = SYMMETRIC_TABLE
