"""
Asymmetric Key Wrapper
=======================

A tagged union over the three asymmetric families so that callers
holding "some public key" can be assessed without branching on its
type first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from rampart.primitives.ecc import Ecc
from rampart.primitives.ffc import Ffc
from rampart.primitives.ifc import Ifc

AsymmetricKey = Union[Ecc, Ifc, Ffc]


class AsymmetricKind(str, Enum):
    """Family of a wrapped asymmetric key."""

    ECC = "ecc"
    IFC = "ifc"
    FFC = "ffc"


_KINDS: dict[type, AsymmetricKind] = {
    Ecc: AsymmetricKind.ECC,
    Ifc: AsymmetricKind.IFC,
    Ffc: AsymmetricKind.FFC,
}


@dataclass(frozen=True, slots=True)
class Asymmetric:
    """Exactly one of an Ecc, Ifc or Ffc key.

    Attributes:
        key: The wrapped primitive.
    """

    key: AsymmetricKey

    def __post_init__(self) -> None:
        if type(self.key) not in _KINDS:
            raise TypeError(
                f"expected Ecc, Ifc or Ffc, got {type(self.key).__name__}"
            )

    @property
    def kind(self) -> AsymmetricKind:
        return _KINDS[type(self.key)]

    @classmethod
    def wrap(cls, key: AsymmetricKey) -> Asymmetric:
        return cls(key)

    def unwrap(self) -> AsymmetricKey:
        return self.key

    def __str__(self) -> str:
        if isinstance(self.key, Ecc):
            return self.key.name
        return str(self.key)
