"""
NIST Standard
==============

Compliance rules from NIST SP 800-57 Part 1 and the transition
schedule of SP 800-131A.

Security strengths (SP 800-57 Part 1 Rev. 5, Table 2):

    Strength  Symmetric  FFC (L/N)      IFC (k)   ECC (f)
    112       3TDEA      2048/224       2048      224-255
    128       AES-128    3072/256       3072      256-383
    192       AES-192    7680/384       7680      384-511
    256       AES-256    15360/512      15360     512+

112-bit strength is acceptable through 2030 and disallowed afterwards,
with the exception of three-key TDEA, which is disallowed after 2023
(SP 800-131A Rev. 2, Section 2). Hash functions with 112 bits of
collision resistance follow the same schedule.

References:
    - NIST SP 800-57 Part 1 Rev. 5 (2020). Recommendation for
      Key Management.
    - NIST SP 800-131A Rev. 2 (2019). Transitioning the Use of
      Cryptographic Algorithms and Key Lengths.
    - NIST SP 800-107 Rev. 1 (2012). Recommendation for Applications
      Using Approved Hash Algorithms.
    - NIST SP 800-186 (2023). Elliptic Curve Domain Parameters.
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

CUTOFF_YEAR = 2031
CUTOFF_YEAR_3TDEA = 2023

SPECIFIED_ECC = frozenset({
    ecc.PRIME192V1,
    ecc.SECP224R1,
    ecc.PRIME256V1,
    ecc.SECP384R1,
    ecc.SECP521R1,
    ecc.SECT233K1, ecc.SECT233R1,
    ecc.SECT283K1, ecc.SECT283R1,
    ecc.SECT409K1, ecc.SECT409R1,
    ecc.SECT571K1, ecc.SECT571R1,
    ecc.BRAINPOOLP224R1,
    ecc.BRAINPOOLP256R1,
    ecc.BRAINPOOLP320R1,
    ecc.BRAINPOOLP384R1,
    ecc.BRAINPOOLP512R1,
    ecc.ED25519, ecc.ED448,
    ecc.X25519, ecc.X448,
})

SPECIFIED_HASH = frozenset({
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
})

# SHA-1 is graded by its collision resistance but has no approved
# pre-image use.
SPECIFIED_HASH_BASED = SPECIFIED_HASH - {hashes.SHA1}

SPECIFIED_SYMMETRIC = frozenset({
    symmetric.TDEA2,
    symmetric.TDEA3,
    symmetric.AES128,
    symmetric.AES192,
    symmetric.AES256,
})


ECC_TABLE = TierTable(
    measure=security,
    specified=SPECIFIED_ECC,
    tiers=(
        Tier(0, 112, ecc.SECP224R1, compliant=False, cutover=CUTOFF_YEAR),
        Tier(112, 128, ecc.SECP224R1, cutover=CUTOFF_YEAR),
        Tier(128, 192, ecc.PRIME256V1),
        Tier(192, 256, ecc.SECP384R1),
        Tier(256, None, ecc.SECP521R1),
    ),
)

FFC_TABLE = TierTable(
    measure=field_size,
    floor=False,
    default=ffc.FFC_2048_224,
    tiers=(
        Tier((0, 0), (2048, 224), ffc.FFC_2048_224, compliant=False),
        Tier((2048, 224), (2049, 225), ffc.FFC_2048_224, cutover=CUTOFF_YEAR),
        Tier((2049, 225), (3073, 257), ffc.FFC_3072_256),
        Tier((3073, 257), (7681, 385), ffc.FFC_7680_384),
        Tier((7681, 385), None, ffc.FFC_15360_512),
    ),
)

IFC_TABLE = TierTable(
    measure=modulus_size,
    floor=False,
    tiers=(
        Tier(0, 2048, ifc.IFC_2048, compliant=False, cutover=CUTOFF_YEAR),
        Tier(2048, 3072, ifc.IFC_2048, cutover=CUTOFF_YEAR),
        Tier(3072, 7680, ifc.IFC_3072),
        Tier(7680, 15360, ifc.IFC_7680),
        Tier(15360, None, ifc.IFC_15360),
    ),
)

# Collision resistance, SP 800-107 Section 4.1.
HASH_TABLE = TierTable(
    measure=collision_resistance,
    specified=SPECIFIED_HASH,
    tiers=(
        Tier(0, 112, hashes.SHA224, compliant=False, cutover=CUTOFF_YEAR),
        Tier(112, 113, hashes.SHA224, cutover=CUTOFF_YEAR),
        Tier(113, 129, hashes.SHA256),
        Tier(129, 193, hashes.SHA384),
        Tier(193, None, hashes.SHA512),
    ),
)

# Pre-image resistance only (HMAC, KDFs, random bit generation).
HASH_BASED_TABLE = TierTable(
    measure=pre_image_resistance,
    specified=SPECIFIED_HASH_BASED,
    tiers=(
        Tier(0, 112, hashes.SHA224, compliant=False, cutover=CUTOFF_YEAR),
        Tier(112, 128, hashes.SHA224, cutover=CUTOFF_YEAR),
        Tier(128, 225, hashes.SHA224),
        Tier(225, 257, hashes.SHA256),
        Tier(257, 395, hashes.SHA384),
        Tier(395, None, hashes.SHA512),
    ),
)

SYMMETRIC_TABLE = TierTable(
    measure=security,
    specified=SPECIFIED_SYMMETRIC,
    tiers=(
        Tier(0, 112, symmetric.AES128, compliant=False),
        Tier(
            112, 113, symmetric.AES128,
            cutover=CUTOFF_YEAR,
            exceptions=((symmetric.TDEA3, CUTOFF_YEAR_3TDEA),),
        ),
        Tier(113, 129, symmetric.AES128),
        Tier(129, 193, symmetric.AES192),
        Tier(193, None, symmetric.AES256),
    ),
)


class Nist(TieredStandard):
    """NIST SP 800-57 / SP 800-131A."""

    name = "nist"
    title = "NIST SP 800-57 Part 1 Rev. 5 / SP 800-131A Rev. 2"

    ecc_table = ECC_TABLE
    ffc_table = FFC_TABLE
    ifc_table = IFC_TABLE
    hash_table = HASH_TABLE
    hash_based_table = HASH_BASED_TABLE
    symmetric_table = SYMMETRIC_TABLE
