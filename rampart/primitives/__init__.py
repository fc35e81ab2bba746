"""
Rampart Primitives
===================

Value types for the five primitive families plus the asymmetric
wrapper, with their fixed catalogs and name mappings.
"""

from rampart.primitives.asymmetric import Asymmetric, AsymmetricKind
from rampart.primitives.ecc import ECC_CATALOG, ECC_NOT_SUPPORTED, Ecc
from rampart.primitives.ffc import FFC_CATALOG, Ffc
from rampart.primitives.hash import HASH_CATALOG, HASH_NOT_SUPPORTED, Hash
from rampart.primitives.ifc import IFC_CATALOG, Ifc
from rampart.primitives.names import (
    ECC_NAMES,
    HASH_NAMES,
    SYMMETRIC_NAMES,
    UNRECOGNISED,
    NameMap,
    display_name,
)
from rampart.primitives.symmetric import (
    SYMMETRIC_CATALOG,
    SYMMETRIC_NOT_SUPPORTED,
    Symmetric,
)

__all__ = [
    "Asymmetric",
    "AsymmetricKind",
    "ECC_CATALOG",
    "ECC_NAMES",
    "ECC_NOT_SUPPORTED",
    "Ecc",
    "FFC_CATALOG",
    "Ffc",
    "HASH_CATALOG",
    "HASH_NAMES",
    "HASH_NOT_SUPPORTED",
    "Hash",
    "IFC_CATALOG",
    "Ifc",
    "NameMap",
    "SYMMETRIC_CATALOG",
    "SYMMETRIC_NAMES",
    "SYMMETRIC_NOT_SUPPORTED",
    "Symmetric",
    "UNRECOGNISED",
    "display_name",
]
