from __future__ import annotations

import ctypes

import pytest

from rampart import ffi
from rampart.ffi import WsContext, WsEcc, WsFfc, WsHash, WsIfc, WsSymmetric
from rampart.primitives import ecc, symmetric
from rampart.primitives import hash as hashes


def _ptr(structure):
    return ctypes.pointer(structure)


def test_every_standard_and_family_exported():
    for standard in ("nist", "bsi", "cnsa", "ecrypt", "lenstra", "testing"):
        for family in ffi.FAMILIES:
            assert f"ws_{standard}_validate_{family}" in ffi.EXPORTS


def test_entry_points_are_module_attributes():
    assert ffi.ws_nist_validate_symmetric is ffi.EXPORTS["ws_nist_validate_symmetric"]
    with pytest.raises(AttributeError):
        ffi.ws_nist_validate_everything  # noqa: B018


def test_compliant_writes_alternative():
    out = WsSymmetric()
    rc = ffi.ws_nist_validate_symmetric(
        _ptr(WsContext(128, 2023)), _ptr(WsSymmetric(symmetric.TDEA3.id, 112)), _ptr(out)
    )
    assert rc == 1
    assert (out.id, out.security) == (symmetric.AES128.id, 128)


def test_non_compliant_writes_alternative():
    out = WsSymmetric()
    rc = ffi.ws_nist_validate_symmetric(
        _ptr(WsContext(128, 2023)), _ptr(WsSymmetric(symmetric.TDEA2.id, 80)), _ptr(out)
    )
    assert rc == 0
    assert out.id == symmetric.AES128.id


def test_null_alternative_is_allowed():
    rc = ffi.ws_nist_validate_hash(
        _ptr(WsContext(128, 2023)), _ptr(WsHash(hashes.SHA3_256.id, 128, 256)), None
    )
    assert rc == 1


def test_null_context_leaves_alternative_untouched():
    out = WsSymmetric(77, 77)
    rc = ffi.ws_nist_validate_symmetric(None, _ptr(WsSymmetric(symmetric.AES128.id, 128)), _ptr(out))
    assert rc == -1
    assert (out.id, out.security) == (77, 77)


def test_null_primitive():
    out = WsEcc(5, 5)
    assert ffi.ws_nist_validate_ecc(_ptr(WsContext(128, 2023)), None, _ptr(out)) == -1
    assert (out.id, out.security) == (5, 5)


def test_invalid_values_rejected():
    ctx = _ptr(WsContext(128, 2023))
    assert ffi.ws_nist_validate_ffc(ctx, _ptr(WsFfc(1024, 2048)), None) == -1
    assert ffi.ws_nist_validate_ifc(ctx, _ptr(WsIfc(0)), None) == -1
    assert ffi.ws_nist_validate_ecc(_ptr(WsContext(0, 2023)), _ptr(WsEcc(ecc.PRIME256V1.id, 128)), None) == -1


def test_unknown_id_is_non_compliant():
    out = WsEcc()
    rc = ffi.ws_nist_validate_ecc(_ptr(WsContext(128, 2023)), _ptr(WsEcc(4242, 256)), _ptr(out))
    assert rc == 0
    assert out.id == ecc.PRIME256V1.id


@pytest.mark.parametrize(
    "entry_point, structure, claimed",
    [
        ("ws_lenstra_validate_ecc", WsEcc, (999, 256)),
        ("ws_lenstra_validate_symmetric", WsSymmetric, (999, 256)),
        ("ws_lenstra_validate_hash", WsHash, (999, 256, 512)),
        ("ws_testing_validate_hash_based", WsHash, (999, 256, 512)),
    ],
)
def test_unknown_id_ignores_claimed_strength(entry_point, structure, claimed):
    rc = ffi.EXPORTS[entry_point](_ptr(WsContext(128, 2023)), _ptr(structure(*claimed)), None)
    assert rc == 0


def test_ffc_and_ifc():
    ctx = _ptr(WsContext(128, 2023))
    out = WsFfc()
    assert ffi.ws_nist_validate_ffc(ctx, _ptr(WsFfc(2048, 224)), _ptr(out)) == 1
    assert (out.l, out.n) == (2048, 224)
    key = WsIfc()
    assert ffi.ws_bsi_validate_ifc(ctx, _ptr(WsIfc(1024)), _ptr(key)) == 0
    assert key.k == 3072


def test_hash_based_entry_point():
    out = WsHash()
    rc = ffi.ws_nist_validate_hash_based(
        _ptr(WsContext(128, 2023)), _ptr(WsHash(hashes.SHA1.id, 80, 160)), _ptr(out)
    )
    assert rc == 0
    assert out.id == hashes.SHA224.id
    rc = ffi.ws_nist_validate_hash_based(
        _ptr(WsContext(128, 2023)), _ptr(WsHash(hashes.SHA3_224.id)), _ptr(out)
    )
    assert rc == 1
    assert (out.id, out.pre_image_resistance) == (hashes.SHA224.id, 224)


def test_exported_cfunctype_round_trip():
    fn = ffi.export("ws_cnsa_validate_symmetric")
    out = WsSymmetric()
    rc = fn(_ptr(WsContext(128, 2023)), _ptr(WsSymmetric(symmetric.AES128.id, 128)), _ptr(out))
    assert rc == 0
    assert out.id == symmetric.AES256.id
    assert fn(None, _ptr(WsSymmetric(symmetric.AES128.id, 128)), None) == -1


def test_export_unknown_name():
    with pytest.raises(KeyError):
        ffi.export("ws_nist_validate_everything")
    assert ffi.family_of("ws_lenstra_validate_hash_based") == "hash_based"
