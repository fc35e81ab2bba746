"""
Primitive Name Mapping
=======================

Bidirectional, case-insensitive mapping between primitive names and
catalog entries. Canonical names come from the catalog and map both
ways; aliases (OpenSSL and ``cryptography`` spellings, NIST curve
names) resolve forward only.

Unknown names resolve to the family's ``*_NOT_SUPPORTED`` sentinel,
and primitives outside the catalog are named ``UNRECOGNISED``.
"""

from __future__ import annotations

from typing import Generic, Iterable, Mapping, Optional, Protocol, TypeVar

from rampart.primitives import ecc, symmetric
from rampart.primitives import hash as hashes
from rampart.primitives.asymmetric import Asymmetric

UNRECOGNISED = "UNRECOGNISED"


class _Named(Protocol):
    name: str


P = TypeVar("P", bound=_Named)


class NameMap(Generic[P]):
    """Name lookup table for one primitive family.

    Args:
        catalog: Primitives whose ``name`` is the canonical spelling.
        unsupported: Sentinel returned for unknown names.
        aliases: Additional forward-only spellings.

    Raises:
        ValueError: If two catalog entries share a name.
    """

    def __init__(
        self,
        catalog: Iterable[P],
        unsupported: P,
        aliases: Optional[Mapping[str, P]] = None,
    ) -> None:
        self.unsupported = unsupported
        self._by_name: dict[str, P] = {}
        self._by_primitive: dict[P, str] = {}

        for primitive in catalog:
            key = primitive.name.lower()
            if key in self._by_name or primitive in self._by_primitive:
                raise ValueError(f"duplicate name mapping for {primitive.name!r}")
            self._by_name[key] = primitive
            self._by_primitive[primitive] = primitive.name

        for alias, primitive in (aliases or {}).items():
            self._by_name.setdefault(alias.lower(), primitive)

    def lookup(self, name: str) -> P:
        """Resolve *name* to a primitive, or the unsupported sentinel."""
        return self._by_name.get(name.strip().lower(), self.unsupported)

    def name_of(self, primitive: P) -> str:
        """Canonical name of *primitive*, or ``UNRECOGNISED``."""
        return self._by_primitive.get(primitive, UNRECOGNISED)

    def names(self) -> list[str]:
        """Canonical names in catalog order."""
        return list(self._by_primitive.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._by_name


ECC_NAMES: NameMap[ecc.Ecc] = NameMap(
    ecc.ECC_CATALOG.values(),
    ecc.ECC_NOT_SUPPORTED,
    aliases={
        "secp192r1": ecc.PRIME192V1,
        "secp256r1": ecc.PRIME256V1,
        "p-192": ecc.PRIME192V1,
        "p-224": ecc.SECP224R1,
        "p-256": ecc.PRIME256V1,
        "p-384": ecc.SECP384R1,
        "p-521": ecc.SECP521R1,
        "k-233": ecc.SECT233K1,
        "b-233": ecc.SECT233R1,
        "k-283": ecc.SECT283K1,
        "b-283": ecc.SECT283R1,
        "k-409": ecc.SECT409K1,
        "b-409": ecc.SECT409R1,
        "k-571": ecc.SECT571K1,
        "b-571": ecc.SECT571R1,
        "curve25519": ecc.X25519,
        "curve448": ecc.X448,
    },
)

HASH_NAMES: NameMap[hashes.Hash] = NameMap(
    hashes.HASH_CATALOG.values(),
    hashes.HASH_NOT_SUPPORTED,
    aliases={
        "blake2b": hashes.BLAKE2B_512,
        "blake2s": hashes.BLAKE2S_256,
        "rmd160": hashes.RIPEMD160,
        "sha-1": hashes.SHA1,
        "sha-224": hashes.SHA224,
        "sha-256": hashes.SHA256,
        "sha-384": hashes.SHA384,
        "sha-512": hashes.SHA512,
        "sha512/224": hashes.SHA512_224,
        "sha512/256": hashes.SHA512_256,
        "sha-512/224": hashes.SHA512_224,
        "sha-512/256": hashes.SHA512_256,
    },
)

SYMMETRIC_NAMES: NameMap[symmetric.Symmetric] = NameMap(
    symmetric.SYMMETRIC_CATALOG.values(),
    symmetric.SYMMETRIC_NOT_SUPPORTED,
    aliases={
        "aes-128": symmetric.AES128,
        "aes-192": symmetric.AES192,
        "aes-256": symmetric.AES256,
        "camellia-128": symmetric.CAMELLIA128,
        "camellia-192": symmetric.CAMELLIA192,
        "camellia-256": symmetric.CAMELLIA256,
        "2tdea": symmetric.TDEA2,
        "tdea2": symmetric.TDEA2,
        "3tdea": symmetric.TDEA3,
        "tdea3": symmetric.TDEA3,
        "3des": symmetric.TDEA3,
        "triple-des": symmetric.TDEA3,
        "chacha20-poly1305": symmetric.CHACHA20,
    },
)


def display_name(primitive: object) -> str:
    """Human readable name for any primitive, wrapped or not."""
    if isinstance(primitive, Asymmetric):
        primitive = primitive.unwrap()
    if isinstance(primitive, ecc.Ecc):
        return ECC_NAMES.name_of(primitive)
    if isinstance(primitive, hashes.Hash):
        return HASH_NAMES.name_of(primitive)
    if isinstance(primitive, symmetric.Symmetric):
        return SYMMETRIC_NAMES.name_of(primitive)
    return str(primitive)
