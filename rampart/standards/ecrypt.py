"""
ECRYPT Standard
================

Recommendations of the ECRYPT-CSA "Algorithms, Key Size and
Protocols Report" (2018). The report distinguishes primitives fit for
near-term and long-term future use (128 bits and up) from legacy
primitives (around 80 bits) that existing systems may keep using for a
limited time but that must not be deployed anew.

Legacy primitives are accepted through ``CUTOFF_YEAR``.

References:
    - ECRYPT-CSA D5.4 (2018). Algorithms, Key Size and Protocols
      Report, Chapters 3 and 4.
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

CUTOFF_YEAR = 2023

SPECIFIED_ECC = frozenset({
    ecc.PRIME192V1,
    ecc.SECP224R1,
    ecc.PRIME256V1,
    ecc.SECP256K1,
    ecc.SECP384R1,
    ecc.SECP521R1,
    ecc.BRAINPOOLP160R1,
    ecc.BRAINPOOLP192R1,
    ecc.BRAINPOOLP224R1,
    ecc.BRAINPOOLP256R1,
    ecc.BRAINPOOLP320R1,
    ecc.BRAINPOOLP384R1,
    ecc.BRAINPOOLP512R1,
    ecc.ED25519, ecc.ED448,
    ecc.X25519, ecc.X448,
})

SPECIFIED_HASH = frozenset({
    hashes.RIPEMD160,
    hashes.SHA1,
    hashes.SHA224,
    hashes.SHA256,
    hashes.SHA384,
    hashes.SHA512,
    hashes.SHA512_224,
    hashes.SHA512_256,
    hashes.SHA3_224,
    hashes.SHA3_256,
    hashes.SHA3_384,
    hashes.SHA3_512,
    hashes.SHAKE128,
    hashes.SHAKE256,
    hashes.BLAKE2B_256,
    hashes.BLAKE2B_384,
    hashes.BLAKE2B_512,
    hashes.BLAKE2S_256,
})

SPECIFIED_SYMMETRIC = frozenset({
    symmetric.TDEA3,
    symmetric.AES128,
    symmetric.AES192,
    symmetric.AES256,
    symmetric.CAMELLIA128,
    symmetric.CAMELLIA192,
    symmetric.CAMELLIA256,
    symmetric.CHACHA20,
})


ECC_TABLE = TierTable(
    measure=security,
    specified=SPECIFIED_ECC,
    tiers=(
        Tier(0, 80, ecc.PRIME256V1, compliant=False),
        Tier(80, 128, ecc.PRIME256V1, cutover=CUTOFF_YEAR),
        Tier(128, 192, ecc.PRIME256V1),
        Tier(192, 256, ecc.SECP384R1),
        Tier(256, None, ecc.SECP521R1),
    ),
)

FFC_TABLE = TierTable(
    measure=field_size,
    floor=False,
    default=ffc.FFC_3072_256,
    tiers=(
        Tier((0, 0), (1024, None), ffc.FFC_3072_256, compliant=False),
        Tier((1024, 160), (3072, None), ffc.FFC_3072_256, cutover=CUTOFF_YEAR),
        Tier((3072, 256), (7680, None), ffc.FFC_3072_256),
        Tier((7680, 384), (15360, None), ffc.FFC_7680_384),
        Tier((15360, 512), None, ffc.FFC_15360_512),
    ),
)

IFC_TABLE = TierTable(
    measure=modulus_size,
    floor=False,
    tiers=(
        Tier(0, 1024, ifc.IFC_3072, compliant=False),
        Tier(1024, 3072, ifc.IFC_3072, cutover=CUTOFF_YEAR),
        Tier(3072, 7680, ifc.IFC_3072),
        Tier(7680, 15360, ifc.IFC_7680),
        Tier(15360, None, ifc.IFC_15360),
    ),
)

HASH_TABLE = TierTable(
    measure=collision_resistance,
    specified=SPECIFIED_HASH,
    tiers=(
        Tier(0, 80, hashes.SHA256, compliant=False),
        Tier(80, 128, hashes.SHA256, cutover=CUTOFF_YEAR),
        Tier(128, 192, hashes.SHA256),
        Tier(192, 256, hashes.SHA384),
        Tier(256, None, hashes.SHA512),
    ),
)

HASH_BASED_TABLE = TierTable(
    measure=pre_image_resistance,
    specified=SPECIFIED_HASH,
    tiers=(
        Tier(0, 160, hashes.SHA256, compliant=False),
        Tier(160, 256, hashes.SHA256, cutover=CUTOFF_YEAR),
        Tier(256, 384, hashes.SHA256),
        Tier(384, 512, hashes.SHA384),
        Tier(512, None, hashes.SHA512),
    ),
)

SYMMETRIC_TABLE = TierTable(
    measure=security,
    specified=SPECIFIED_SYMMETRIC,
    tiers=(
        Tier(0, 80, symmetric.AES128, compliant=False),
        Tier(80, 128, symmetric.AES128, cutover=CUTOFF_YEAR),
        Tier(128, 192, symmetric.AES128),
        Tier(192, 256, symmetric.AES192),
        Tier(256, None, symmetric.AES256),
    ),
)


class Ecrypt(TieredStandard):
    """ECRYPT-CSA 2018."""

    name = "ecrypt"
    title = "ECRYPT-CSA Algorithms, Key Size and Protocols Report (2018)"

    ecc_table = ECC_TABLE
    ffc_table = FFC_TABLE
    ifc_table = IFC_TABLE
    hash_table = HASH_TABLE
    hash_based_table = HASH_BASED_TABLE
    symmetric_table = SYMMETRIC_TABLE
