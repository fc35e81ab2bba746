"""
CNSA Standard
==============

Commercial National Security Algorithm Suite 1.0 (CNSSP 15), the
algorithm set approved for protecting US National Security Systems up
to TOP SECRET. The suite names a single choice per family with no
legacy tier: AES-256, SHA-384, P-384, and RSA or Diffie-Hellman with
at least 3072-bit moduli.

References:
    - CNSSP 15 (2016). Use of Public Standards for Secure Information
      Sharing.
    - NSA (2016). Commercial National Security Algorithm Suite and
      Quantum Computing FAQ.
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

SPECIFIED_HASH = frozenset({hashes.SHA384, hashes.SHA512})


ECC_TABLE = TierTable(
    measure=security,
    specified=frozenset({ecc.SECP384R1}),
    tiers=(
        Tier(0, 192, ecc.SECP384R1, compliant=False),
        Tier(192, None, ecc.SECP384R1),
    ),
)

FFC_TABLE = TierTable(
    measure=field_size,
    floor=False,
    default=ffc.FFC_3072_256,
    tiers=(
        Tier((0, 0), (3072, None), ffc.FFC_3072_256, compliant=False),
        Tier((3072, 256), None, ffc.FFC_3072_256),
    ),
)

IFC_TABLE = TierTable(
    measure=modulus_size,
    floor=False,
    tiers=(
        Tier(0, 3072, ifc.IFC_3072, compliant=False),
        Tier(3072, None, ifc.IFC_3072),
    ),
)

HASH_TABLE = TierTable(
    measure=collision_resistance,
    specified=SPECIFIED_HASH,
    tiers=(
        Tier(0, 192, hashes.SHA384, compliant=False),
        Tier(192, 256, hashes.SHA384),
        Tier(256, None, hashes.SHA512),
    ),
)

HASH_BASED_TABLE = TierTable(
    measure=pre_image_resistance,
    specified=SPECIFIED_HASH,
    tiers=(
        Tier(0, 384, hashes.SHA384, compliant=False),
        Tier(384, 512, hashes.SHA384),
        Tier(512, None, hashes.SHA512),
    ),
)

SYMMETRIC_TABLE = TierTable(
    measure=security,
    specified=frozenset({symmetric.AES256}),
    tiers=(
        Tier(0, 256, symmetric.AES256, compliant=False),
        Tier(256, None, symmetric.AES256),
    ),
)


class Cnsa(TieredStandard):
    """CNSA 1.0."""

    name = "cnsa"
    title = "Commercial National Security Algorithm Suite 1.0"

    ecc_table = ECC_TABLE
    ffc_table = FFC_TABLE
    ifc_table = IFC_TABLE
    hash_table = HASH_TABLE
    hash_based_table = HASH_BASED_TABLE
    symmetric_table = SYMMETRIC_TABLE
