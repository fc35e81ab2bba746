from __future__ import annotations

import pytest

from rampart.primitives import (
    ECC_CATALOG,
    ECC_NAMES,
    ECC_NOT_SUPPORTED,
    HASH_CATALOG,
    HASH_NAMES,
    HASH_NOT_SUPPORTED,
    SYMMETRIC_CATALOG,
    SYMMETRIC_NAMES,
    SYMMETRIC_NOT_SUPPORTED,
    UNRECOGNISED,
    Asymmetric,
    Ecc,
    NameMap,
    Symmetric,
    display_name,
    ecc,
    ffc,
    ifc,
    symmetric,
)
from rampart.primitives import hash as hashes


@pytest.mark.parametrize(
    "names, catalog",
    [
        (ECC_NAMES, ECC_CATALOG),
        (HASH_NAMES, HASH_CATALOG),
        (SYMMETRIC_NAMES, SYMMETRIC_CATALOG),
    ],
)
def test_canonical_names_round_trip(names, catalog):
    for primitive in catalog.values():
        assert names.lookup(names.name_of(primitive)) == primitive
    assert len(names.names()) == len(catalog)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("prime256v1", ecc.PRIME256V1),
        ("secp256r1", ecc.PRIME256V1),
        ("P-384", ecc.SECP384R1),
        ("BrainpoolP256R1", ecc.BRAINPOOLP256R1),
        ("curve25519", ecc.X25519),
        ("  ed448 ", ecc.ED448),
    ],
)
def test_curve_aliases(name, expected):
    assert ECC_NAMES.lookup(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("SHA256", hashes.SHA256),
        ("sha-1", hashes.SHA1),
        ("sha3-256", hashes.SHA3_256),
        ("sha512/256", hashes.SHA512_256),
        ("blake2b", hashes.BLAKE2B_512),
    ],
)
def test_hash_aliases(name, expected):
    assert HASH_NAMES.lookup(name) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("AES128", symmetric.AES128),
        ("aes-256", symmetric.AES256),
        ("3des", symmetric.TDEA3),
        ("des-ede", symmetric.TDEA2),
        ("chacha20-poly1305", symmetric.CHACHA20),
    ],
)
def test_cipher_aliases(name, expected):
    assert SYMMETRIC_NAMES.lookup(name) == expected


def test_unknown_names_map_to_sentinels():
    assert ECC_NAMES.lookup("curve-of-mystery") == ECC_NOT_SUPPORTED
    assert HASH_NAMES.lookup("") == HASH_NOT_SUPPORTED
    assert SYMMETRIC_NAMES.lookup("rot13") == SYMMETRIC_NOT_SUPPORTED


def test_reverse_lookup_of_unknown_primitive():
    assert ECC_NAMES.name_of(Ecc(999, "made-up", 128)) == UNRECOGNISED
    assert SYMMETRIC_NAMES.name_of(SYMMETRIC_NOT_SUPPORTED) == UNRECOGNISED


def test_aliases_do_not_change_canonical_name():
    assert ECC_NAMES.name_of(ECC_NAMES.lookup("p-256")) == "prime256v1"


def test_contains():
    assert "P-521" in ECC_NAMES
    assert "p-1024" not in ECC_NAMES
    assert 42 not in ECC_NAMES


def test_duplicate_names_rejected():
    first = Symmetric(200, "twin", 128)
    second = Symmetric(201, "TWIN", 128)
    with pytest.raises(ValueError, match="duplicate"):
        NameMap([first, second], SYMMETRIC_NOT_SUPPORTED)


def test_display_name():
    assert display_name(hashes.SHA384) == "sha384"
    assert display_name(Asymmetric(ecc.SECP521R1)) == "secp521r1"
    assert display_name(Asymmetric(ifc.IFC_2048)) == "RSA-2048"
    assert display_name(ffc.FFC_3072_256) == "3072/256"
