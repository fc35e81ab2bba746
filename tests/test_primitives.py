from __future__ import annotations

import pytest

from rampart.primitives import (
    ECC_CATALOG,
    ECC_NOT_SUPPORTED,
    FFC_CATALOG,
    HASH_CATALOG,
    HASH_NOT_SUPPORTED,
    IFC_CATALOG,
    SYMMETRIC_CATALOG,
    SYMMETRIC_NOT_SUPPORTED,
    Asymmetric,
    AsymmetricKind,
    Ecc,
    Ffc,
    Hash,
    Ifc,
    Symmetric,
)
from rampart.primitives import ecc, ffc, hash as hashes, ifc, symmetric


def test_catalog_ids_are_unique_and_exclude_sentinels():
    for catalog, sentinel in (
        (ECC_CATALOG, ECC_NOT_SUPPORTED),
        (HASH_CATALOG, HASH_NOT_SUPPORTED),
        (SYMMETRIC_CATALOG, SYMMETRIC_NOT_SUPPORTED),
    ):
        assert sentinel.id == 0xFFFF
        assert sentinel not in catalog.values()
        assert all(key == primitive.id for key, primitive in catalog.items())


def test_ecc_equality_is_by_id():
    clone = Ecc(ecc.PRIME256V1.id, "something else", 1)
    assert clone == ecc.PRIME256V1
    assert hash(clone) == hash(ecc.PRIME256V1)
    assert ecc.PRIME256V1 != ecc.SECP256K1


def test_hash_and_symmetric_equality_is_by_id():
    assert Hash(hashes.SHA256.id, "x", 0, 0) == hashes.SHA256
    assert Symmetric(symmetric.AES128.id, "x", 0) == symmetric.AES128
    assert hashes.SHA256 != hashes.SHA3_256


def test_different_families_never_compare_equal():
    assert Ecc(5, "a", 128) != Symmetric(5, "a", 128)


def test_from_id_falls_back_to_sentinel():
    assert Ecc.from_id(ecc.SECP384R1.id) is ecc.SECP384R1
    assert Ecc.from_id(4242) is ECC_NOT_SUPPORTED


def test_curve_strengths():
    assert ecc.PRIME256V1.security == 128
    assert ecc.SECP521R1.security == 256
    assert ecc.ED25519.security == 128
    assert ecc.X448.security == 224
    assert ecc.BRAINPOOLP320R1.security == 160


def test_hash_resistances():
    assert (hashes.SHA1.collision_resistance, hashes.SHA1.pre_image_resistance) == (80, 160)
    assert (hashes.SHA256.collision_resistance, hashes.SHA256.pre_image_resistance) == (128, 256)
    assert (hashes.SHAKE128.collision_resistance, hashes.SHAKE128.pre_image_resistance) == (128, 128)
    assert (hashes.SHAKE256.collision_resistance, hashes.SHAKE256.pre_image_resistance) == (256, 256)


def test_symmetric_strengths():
    assert symmetric.DES.security == 56
    assert symmetric.TDEA2.security == 80
    assert symmetric.TDEA3.security == 112
    assert symmetric.AES256.security == 256


def test_ffc_structural_equality_and_validation():
    assert Ffc(2048, 224) == ffc.FFC_2048_224
    assert str(ffc.FFC_3072_256) == "3072/256"
    with pytest.raises(ValueError):
        Ffc(1024, 2048)
    with pytest.raises(ValueError):
        Ffc(0, 0)
    assert len(FFC_CATALOG) == 6


def test_ifc_structural_equality_and_validation():
    assert Ifc(2048) == ifc.IFC_2048
    assert str(ifc.IFC_4096) == "RSA-4096"
    with pytest.raises(ValueError):
        Ifc(0)
    assert [key.k for key in IFC_CATALOG] == sorted(key.k for key in IFC_CATALOG)


@pytest.mark.parametrize(
    "key, kind",
    [
        (ecc.SECP384R1, AsymmetricKind.ECC),
        (ifc.IFC_3072, AsymmetricKind.IFC),
        (ffc.FFC_2048_256, AsymmetricKind.FFC),
    ],
)
def test_asymmetric_wrap_unwrap(key, kind):
    wrapped = Asymmetric.wrap(key)
    assert wrapped.unwrap() == key
    assert wrapped.kind is kind


def test_asymmetric_rejects_other_families():
    with pytest.raises(TypeError):
        Asymmetric(symmetric.AES128)  # type: ignore[arg-type]


def test_asymmetric_str():
    assert str(Asymmetric(ecc.PRIME256V1)) == "prime256v1"
    assert str(Asymmetric(ifc.IFC_2048)) == "RSA-2048"
