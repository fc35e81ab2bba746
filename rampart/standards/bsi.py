"""
BSI Standard
=============

Compliance rules from the German Federal Office for Information
Security (BSI) technical guideline TR-02102-1.

The guideline targets a security level of 120 bits. RSA and finite
field moduli of at least 2000 bits were accepted as a transitional
measure through 2023; from 2024 onwards at least 3000 bits are
required. Elliptic curves need a group order of at least 250 bits and
the guideline prefers the Brainpool curves.

References:
    - BSI TR-02102-1 (2024). Cryptographic Mechanisms:
      Recommendations and Key Lengths, Sections 2 to 4, Table 1.2.
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
    ecc.BRAINPOOLP256R1,
    ecc.BRAINPOOLP320R1,
    ecc.BRAINPOOLP384R1,
    ecc.BRAINPOOLP512R1,
    ecc.PRIME256V1,
    ecc.SECP384R1,
    ecc.SECP521R1,
})

SPECIFIED_HASH = frozenset({
    hashes.SHA256,
    hashes.SHA384,
    hashes.SHA512,
    hashes.SHA512_256,
    hashes.SHA3_256,
    hashes.SHA3_384,
    hashes.SHA3_512,
})

SPECIFIED_SYMMETRIC = frozenset({
    symmetric.AES128,
    symmetric.AES192,
    symmetric.AES256,
})


ECC_TABLE = TierTable(
    measure=security,
    specified=SPECIFIED_ECC,
    tiers=(
        Tier(0, 125, ecc.BRAINPOOLP256R1, compliant=False),
        Tier(125, 160, ecc.BRAINPOOLP256R1),
        Tier(160, 192, ecc.BRAINPOOLP320R1),
        Tier(192, 256, ecc.BRAINPOOLP384R1),
        Tier(256, None, ecc.BRAINPOOLP512R1),
    ),
)

FFC_TABLE = TierTable(
    measure=field_size,
    floor=False,
    default=ffc.FFC_3072_256,
    tiers=(
        Tier((0, 0), (2000, 250), ffc.FFC_3072_256, compliant=False),
        Tier((2000, 250), (3000, None), ffc.FFC_2048_256, cutover=CUTOFF_YEAR),
        Tier((3000, 250), (7680, None), ffc.FFC_3072_256),
        Tier((7680, 250), (15360, None), ffc.FFC_7680_384),
        Tier((15360, 250), None, ffc.FFC_15360_512),
    ),
)

IFC_TABLE = TierTable(
    measure=modulus_size,
    floor=False,
    tiers=(
        Tier(0, 2000, ifc.IFC_3072, compliant=False),
        Tier(2000, 3000, ifc.IFC_2048, cutover=CUTOFF_YEAR),
        Tier(3000, 7680, ifc.IFC_3072),
        Tier(7680, 15360, ifc.IFC_7680),
        Tier(15360, None, ifc.IFC_15360),
    ),
)

HASH_TABLE = TierTable(
    measure=collision_resistance,
    specified=SPECIFIED_HASH,
    tiers=(
        Tier(0, 120, hashes.SHA256, compliant=False),
        Tier(120, 129, hashes.SHA256),
        Tier(129, 193, hashes.SHA384),
        Tier(193, None, hashes.SHA512),
    ),
)

HASH_BASED_TABLE = TierTable(
    measure=pre_image_resistance,
    specified=SPECIFIED_HASH,
    tiers=(
        Tier(0, 120, hashes.SHA256, compliant=False),
        Tier(120, 257, hashes.SHA256),
        Tier(257, 385, hashes.SHA384),
        Tier(385, None, hashes.SHA512),
    ),
)

SYMMETRIC_TABLE = TierTable(
    measure=security,
    specified=SPECIFIED_SYMMETRIC,
    tiers=(
        Tier(0, 120, symmetric.AES128, compliant=False),
        Tier(120, 129, symmetric.AES128),
        Tier(129, 193, symmetric.AES192),
        Tier(193, None, symmetric.AES256),
    ),
)


class Bsi(TieredStandard):
    """BSI TR-02102-1."""

    name = "bsi"
    title = "BSI TR-02102-1"

    ecc_table = ECC_TABLE
    ffc_table = FFC_TABLE
    ifc_table = IFC_TABLE
    hash_table = HASH_TABLE
    hash_based_table = HASH_BASED_TABLE
    symmetric_table = SYMMETRIC_TABLE
