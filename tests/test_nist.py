from __future__ import annotations

import pytest

from rampart.context import Context
from rampart.primitives import (
    ECC_NOT_SUPPORTED,
    HASH_NOT_SUPPORTED,
    SYMMETRIC_NOT_SUPPORTED,
    Asymmetric,
    Ffc,
    Ifc,
    ecc,
    ffc,
    ifc,
    symmetric,
)
from rampart.primitives import hash as hashes
from rampart.standards import Compliant, NonCompliant, get_standard
from rampart.standards.nist import CUTOFF_YEAR, CUTOFF_YEAR_3TDEA, Nist

nist = Nist()


def test_registered_under_nist():
    assert get_standard("NIST") is get_standard("nist")
    assert isinstance(get_standard("nist"), Nist)


# ===================================================================== #
#  Symmetric
# ===================================================================== #

def test_3tdea_compliant_until_2023(ctx):
    assert nist.validate_symmetric(ctx, symmetric.TDEA3) == Compliant(symmetric.AES128)


def test_3tdea_disallowed_after_2023():
    ctx = Context(year=CUTOFF_YEAR_3TDEA + 1)
    assert nist.validate_symmetric(ctx, symmetric.TDEA3) == NonCompliant(symmetric.AES128)


def test_2tdea_non_compliant(ctx):
    assert nist.validate_symmetric(ctx, symmetric.TDEA2) == NonCompliant(symmetric.AES128)


@pytest.mark.parametrize(
    "cipher, expected",
    [
        (symmetric.AES128, symmetric.AES128),
        (symmetric.AES192, symmetric.AES192),
        (symmetric.AES256, symmetric.AES256),
    ],
)
def test_aes_compliant(ctx, cipher, expected):
    assert nist.validate_symmetric(ctx, cipher) == Compliant(expected)


@pytest.mark.parametrize("cipher", [symmetric.CAMELLIA256, symmetric.CHACHA20, symmetric.DES])
def test_unlisted_ciphers_rejected(ctx, cipher):
    assert nist.validate_symmetric(ctx, cipher) == NonCompliant(symmetric.AES128)


def test_unsupported_cipher(ctx):
    assert nist.validate_symmetric(ctx, SYMMETRIC_NOT_SUPPORTED) == NonCompliant(symmetric.AES128)


def test_floor_raises_symmetric_recommendation():
    ctx = Context(security=256, year=2023)
    assert nist.validate_symmetric(ctx, symmetric.AES128) == Compliant(symmetric.AES256)


# ===================================================================== #
#  Finite field
# ===================================================================== #

def test_ffc_2048_224_compliant(ctx):
    assert nist.validate_ffc(ctx, ffc.FFC_2048_224) == Compliant(ffc.FFC_2048_224)


def test_ffc_1024_160_non_compliant(ctx):
    assert nist.validate_ffc(ctx, ffc.FFC_1024_160) == NonCompliant(ffc.FFC_2048_224)


def test_ffc_2048_224_after_cutover():
    ctx = Context(year=CUTOFF_YEAR + 1)
    assert nist.validate_ffc(ctx, ffc.FFC_2048_224) == NonCompliant(ffc.FFC_3072_256)


@pytest.mark.parametrize(
    "key, expected",
    [
        (Ffc(3072, 256), ffc.FFC_3072_256),
        (Ffc(7680, 384), ffc.FFC_7680_384),
        (Ffc(15360, 512), ffc.FFC_15360_512),
    ],
)
def test_ffc_compliant_boxes(ctx, key, expected):
    assert nist.validate_ffc(ctx, key) == Compliant(expected)


def test_ffc_mismatched_pair_falls_to_default(ctx):
    assert nist.validate_ffc(ctx, Ffc(2048, 256)) == NonCompliant(ffc.FFC_2048_224)
    assert nist.validate_ffc(ctx, Ffc(15360, 256)) == NonCompliant(ffc.FFC_2048_224)


# ===================================================================== #
#  Integer factorisation
# ===================================================================== #

def test_ifc_1024_non_compliant(ctx):
    assert nist.validate_ifc(ctx, ifc.IFC_1024) == NonCompliant(ifc.IFC_2048)


def test_ifc_2048_compliant_until_cutover():
    assert nist.validate_ifc(Context(year=CUTOFF_YEAR), ifc.IFC_2048) == Compliant(ifc.IFC_2048)
    assert nist.validate_ifc(Context(year=CUTOFF_YEAR + 1), ifc.IFC_2048) == NonCompliant(ifc.IFC_3072)


def test_ifc_below_2048_after_cutover_recommends_3072():
    assert nist.validate_ifc(Context(year=CUTOFF_YEAR + 1), ifc.IFC_1024) == NonCompliant(ifc.IFC_3072)


def test_ifc_arbitrary_sizes(ctx):
    assert nist.validate_ifc(ctx, Ifc(4096)) == Compliant(ifc.IFC_3072)
    assert nist.validate_ifc(ctx, Ifc(8192)) == Compliant(ifc.IFC_7680)
    assert nist.validate_ifc(ctx, Ifc(16384)) == Compliant(ifc.IFC_15360)


# ===================================================================== #
#  Hash functions
# ===================================================================== #

def test_sha1_collision_non_compliant(ctx):
    assert nist.validate_hash(ctx, hashes.SHA1) == NonCompliant(hashes.SHA224)


def test_sha1_collision_after_cutover_recommends_sha256():
    assert nist.validate_hash(Context(year=CUTOFF_YEAR + 1), hashes.SHA1) == NonCompliant(hashes.SHA256)


def test_sha3_256_collision_compliant(ctx):
    assert nist.validate_hash(ctx, hashes.SHA3_256) == Compliant(hashes.SHA256)


def test_sha224_at_112_bit_floor():
    ctx = Context(security=112, year=CUTOFF_YEAR)
    assert nist.validate_hash(ctx, hashes.SHA224) == Compliant(hashes.SHA224)
    assert nist.validate_hash(ctx.with_year(CUTOFF_YEAR + 1), hashes.SHA224) == NonCompliant(hashes.SHA256)


def test_sha224_at_default_floor_recommends_sha256(ctx):
    assert nist.validate_hash(ctx, hashes.SHA224) == Compliant(hashes.SHA256)


@pytest.mark.parametrize(
    "hash_func, expected",
    [
        (hashes.SHA384, hashes.SHA384),
        (hashes.SHA3_512, hashes.SHA512),
    ],
)
def test_strong_hashes_collision(ctx, hash_func, expected):
    assert nist.validate_hash(ctx, hash_func) == Compliant(expected)


@pytest.mark.parametrize(
    "hash_func",
    [hashes.MD5, hashes.BLAKE2B_512, hashes.SHAKE128, hashes.SHAKE256, HASH_NOT_SUPPORTED],
)
def test_unlisted_hashes_rejected(ctx, hash_func):
    assert nist.validate_hash(ctx, hash_func) == NonCompliant(hashes.SHA256)


def test_sha1_pre_image_rejected(ctx):
    assert nist.validate_hash_based(ctx, hashes.SHA1) == NonCompliant(hashes.SHA224)


@pytest.mark.parametrize("hash_func", [hashes.SHAKE128, hashes.SHAKE256, hashes.MD5])
def test_unlisted_hashes_rejected_for_pre_image(ctx, hash_func):
    assert nist.validate_hash_based(ctx, hash_func) == NonCompliant(hashes.SHA224)


@pytest.mark.parametrize(
    "hash_func, expected",
    [
        (hashes.SHA256, hashes.SHA256),
        (hashes.SHA384, hashes.SHA384),
        (hashes.SHA512, hashes.SHA512),
        (hashes.SHA3_224, hashes.SHA224),
    ],
)
def test_pre_image_tiers(ctx, hash_func, expected):
    assert nist.validate_hash_based(ctx, hash_func) == Compliant(expected)


# ===================================================================== #
#  Elliptic curves
# ===================================================================== #

def test_p256_compliant(ctx):
    assert nist.validate_ecc(ctx, ecc.PRIME256V1) == Compliant(ecc.PRIME256V1)


def test_p224_cutover():
    ctx = Context(security=112, year=CUTOFF_YEAR)
    assert nist.validate_ecc(ctx, ecc.SECP224R1) == Compliant(ecc.SECP224R1)
    assert nist.validate_ecc(ctx.with_year(CUTOFF_YEAR + 1), ecc.SECP224R1) == NonCompliant(ecc.PRIME256V1)


def test_p192_non_compliant(ctx):
    assert nist.validate_ecc(ctx, ecc.PRIME192V1) == NonCompliant(ecc.SECP224R1)


def test_secp256k1_not_specified(ctx):
    assert nist.validate_ecc(ctx, ecc.SECP256K1) == NonCompliant(ecc.PRIME256V1)
    assert nist.validate_ecc(ctx, ECC_NOT_SUPPORTED) == NonCompliant(ecc.PRIME256V1)


def test_ed448_maps_to_p384(ctx):
    assert nist.validate_ecc(ctx, ecc.ED448) == Compliant(ecc.SECP384R1)


# ===================================================================== #
#  Asymmetric dispatch
# ===================================================================== #

@pytest.mark.parametrize(
    "key, expected",
    [
        (Asymmetric(ecc.SECP384R1), Compliant(Asymmetric(ecc.SECP384R1))),
        (Asymmetric(ifc.IFC_1024), NonCompliant(Asymmetric(ifc.IFC_2048))),
        (Asymmetric(ffc.FFC_3072_256), Compliant(Asymmetric(ffc.FFC_3072_256))),
    ],
)
def test_validate_asymmetric(ctx, key, expected):
    assert nist.validate_asymmetric(ctx, key) == expected
