"""
Foreign Function Boundary
==========================

C-compatible entry points for every standard and primitive family,
built on ``ctypes``. Each entry point is named
``ws_<standard>_validate_<family>`` and has the C signature::

    int fn(const struct ws_context *ctx,
           const struct ws_<family> *primitive,
           struct ws_<family> *alternative);

Return value: ``1`` compliant, ``0`` non-compliant, ``-1`` when ``ctx``
or ``primitive`` is NULL or holds invalid values (for example a zero
security floor, or a finite field key with n > l). Pointers are checked
before they are dereferenced. When ``alternative`` is not NULL it
receives the recommended primitive whatever the verdict; on ``-1`` it
is left untouched.

Curves, hashes and ciphers are identified by catalog id alone. The
strength fields of an input structure are ignored, and an id outside
the catalog is read as the family's unsupported sentinel.

Entry points are plain Python callables accepting ctypes pointers (or
None for NULL) and are also available as module attributes. To hand
one to foreign code wrap it with :func:`export`, which returns a
``CFUNCTYPE`` object; the caller must keep that object alive for as
long as foreign code may call it.
"""

from __future__ import annotations

import ctypes
from functools import partial
from typing import Any, Callable, Optional

from rampart.context import Context
from rampart.primitives import (
    Ecc,
    Ffc,
    Hash,
    Ifc,
    Symmetric,
)
from rampart.standards import STANDARDS, Standard


# ===================================================================== #
#  Structures
# ===================================================================== #

class WsContext(ctypes.Structure):
    """``struct ws_context``."""

    _fields_ = [
        ("security", ctypes.c_uint16),
        ("year", ctypes.c_uint16),
    ]

    def to_context(self) -> Context:
        return Context(security=self.security, year=self.year)


class WsEcc(ctypes.Structure):
    """``struct ws_ecc``: catalog id and security strength."""

    _fields_ = [
        ("id", ctypes.c_uint16),
        ("security", ctypes.c_uint16),
    ]

    def to_primitive(self) -> Ecc:
        return Ecc.from_id(self.id)

    def load(self, curve: Ecc) -> None:
        self.id = curve.id
        self.security = curve.security


class WsFfc(ctypes.Structure):
    """``struct ws_ffc``: public and private key sizes."""

    _fields_ = [
        ("l", ctypes.c_uint32),
        ("n", ctypes.c_uint32),
    ]

    def to_primitive(self) -> Ffc:
        return Ffc(self.l, self.n)

    def load(self, key: Ffc) -> None:
        self.l = key.l
        self.n = key.n


class WsIfc(ctypes.Structure):
    """``struct ws_ifc``: modulus size."""

    _fields_ = [
        ("k", ctypes.c_uint32),
    ]

    def to_primitive(self) -> Ifc:
        return Ifc(self.k)

    def load(self, key: Ifc) -> None:
        self.k = key.k


class WsHash(ctypes.Structure):
    """``struct ws_hash``: catalog id and both resistances."""

    _fields_ = [
        ("id", ctypes.c_uint16),
        ("collision_resistance", ctypes.c_uint16),
        ("pre_image_resistance", ctypes.c_uint16),
    ]

    def to_primitive(self) -> Hash:
        return Hash.from_id(self.id)

    def load(self, hash_func: Hash) -> None:
        self.id = hash_func.id
        self.collision_resistance = hash_func.collision_resistance
        self.pre_image_resistance = hash_func.pre_image_resistance


class WsSymmetric(ctypes.Structure):
    """``struct ws_symmetric``: catalog id and security strength."""

    _fields_ = [
        ("id", ctypes.c_uint16),
        ("security", ctypes.c_uint16),
    ]

    def to_primitive(self) -> Symmetric:
        return Symmetric.from_id(self.id)

    def load(self, cipher: Symmetric) -> None:
        self.id = cipher.id
        self.security = cipher.security


# family -> (Standard method, structure)
FAMILIES: dict[str, tuple[str, type[ctypes.Structure]]] = {
    "ecc": ("validate_ecc", WsEcc),
    "ffc": ("validate_ffc", WsFfc),
    "ifc": ("validate_ifc", WsIfc),
    "hash": ("validate_hash", WsHash),
    "hash_based": ("validate_hash_based", WsHash),
    "symmetric": ("validate_symmetric", WsSymmetric),
}

PROTOTYPES: dict[str, Any] = {
    family: ctypes.CFUNCTYPE(
        ctypes.c_int,
        ctypes.POINTER(WsContext),
        ctypes.POINTER(structure),
        ctypes.POINTER(structure),
    )
    for family, (_, structure) in FAMILIES.items()
}


# ===================================================================== #
#  Entry points
# ===================================================================== #

def c_call(
    validate: Callable[[Context, Any], Any],
    ctx: Optional[Any],
    primitive: Optional[Any],
    alternative: Optional[Any],
) -> int:
    """Run *validate* on dereferenced pointers following the C contract."""
    if not ctx or not primitive:
        return -1
    try:
        context = ctx.contents.to_context()
        key = primitive.contents.to_primitive()
    except ValueError:
        return -1

    verdict = validate(context, key)
    if alternative:
        alternative.contents.load(verdict.recommendation)
    return 1 if verdict.compliant else 0


def _entry_points(standards: dict[str, Standard]) -> dict[str, Callable[..., int]]:
    entries: dict[str, Callable[..., int]] = {}
    for name, standard in standards.items():
        for family, (method, _) in FAMILIES.items():
            entries[f"ws_{name}_validate_{family}"] = partial(c_call, getattr(standard, method))
    return entries


EXPORTS: dict[str, Callable[..., int]] = _entry_points(STANDARDS)


def family_of(entry_point: str) -> str:
    """Family an entry point name validates, e.g. ``hash_based``."""
    _, _, family = entry_point.partition("_validate_")
    if family not in FAMILIES:
        raise KeyError(entry_point)
    return family


def export(entry_point: str) -> Any:
    """Wrap an entry point in its ``CFUNCTYPE`` prototype.

    Raises:
        KeyError: If no entry point has that name.
    """
    fn = EXPORTS[entry_point]
    return PROTOTYPES[family_of(entry_point)](fn)


def __getattr__(name: str) -> Callable[..., int]:
    try:
        return EXPORTS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
