"""
Testing Standard
=================

A permissive standard that accepts every recognised primitive and
echoes it back as its own recommendation. Only the ``*_NOT_SUPPORTED``
sentinels are rejected. Useful for exercising integrations without
depending on any real policy.
"""

from __future__ import annotations

from rampart.context import Context
from rampart.primitives import (
    ECC_NOT_SUPPORTED,
    HASH_NOT_SUPPORTED,
    SYMMETRIC_NOT_SUPPORTED,
    Ecc,
    Ffc,
    Hash,
    Ifc,
    Symmetric,
)
from rampart.standards.base import Compliant, NonCompliant, Standard, Verdict


def _echo(primitive, sentinel=None) -> Verdict:
    if sentinel is not None and primitive == sentinel:
        return NonCompliant(primitive)
    return Compliant(primitive)


class Testing(Standard):
    """Accept everything but the unsupported sentinels."""

    name = "testing"
    title = "Testing (accepts all recognised primitives)"

    def validate_ecc(self, ctx: Context, key: Ecc) -> Verdict[Ecc]:
        return _echo(key, ECC_NOT_SUPPORTED)

    def validate_ffc(self, ctx: Context, key: Ffc) -> Verdict[Ffc]:
        return _echo(key)

    def validate_ifc(self, ctx: Context, key: Ifc) -> Verdict[Ifc]:
        return _echo(key)

    def validate_hash(self, ctx: Context, hash_func: Hash) -> Verdict[Hash]:
        return _echo(hash_func, HASH_NOT_SUPPORTED)

    def validate_hash_based(self, ctx: Context, hash_func: Hash) -> Verdict[Hash]:
        return _echo(hash_func, HASH_NOT_SUPPORTED)

    def validate_symmetric(self, ctx: Context, key: Symmetric) -> Verdict[Symmetric]:
        return _echo(key, SYMMETRIC_NOT_SUPPORTED)
