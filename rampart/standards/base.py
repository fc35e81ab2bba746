"""
Standard Contract
==================

Every standard answers the same six questions (one per primitive
family) and returns a Verdict: Compliant or NonCompliant, each
carrying the recommended primitive of the same family.

``validate_asymmetric`` is shared by all standards: it unwraps the
key, dispatches to the matching family and re-wraps the
recommendation so the caller gets back an ``Asymmetric``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, TypeVar

from rampart.context import Context
from rampart.primitives import Asymmetric, Ecc, Ffc, Hash, Ifc, Symmetric

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Verdict(Generic[T]):
    """Outcome of an assessment.

    Attributes:
        recommendation: Primitive to use instead (or the canonical
            equivalent when the input is already compliant).
    """

    recommendation: T

    compliant: ClassVar[bool] = False

    def __bool__(self) -> bool:
        return self.compliant

    def map(self, fn: Callable[[T], U]) -> Verdict[U]:
        """Apply *fn* to the recommendation, keeping the verdict kind."""
        return type(self)(fn(self.recommendation))


@dataclass(frozen=True, slots=True)
class Compliant(Verdict[T]):
    """The input satisfies the standard."""

    compliant: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class NonCompliant(Verdict[T]):
    """The input does not satisfy the standard."""

    compliant: ClassVar[bool] = False


class Standard(ABC):
    """A named set of compliance rules over all primitive families."""

    #: Registry key, e.g. ``"nist"``.
    name: ClassVar[str]
    #: Human readable title of the publication.
    title: ClassVar[str]

    @abstractmethod
    def validate_ecc(self, ctx: Context, key: Ecc) -> Verdict[Ecc]:
        """Assess an elliptic curve."""

    @abstractmethod
    def validate_ffc(self, ctx: Context, key: Ffc) -> Verdict[Ffc]:
        """Assess a finite field key size pair."""

    @abstractmethod
    def validate_ifc(self, ctx: Context, key: Ifc) -> Verdict[Ifc]:
        """Assess an RSA modulus size."""

    @abstractmethod
    def validate_hash(self, ctx: Context, hash_func: Hash) -> Verdict[Hash]:
        """Assess a hash function used where collision resistance matters."""

    @abstractmethod
    def validate_hash_based(self, ctx: Context, hash_func: Hash) -> Verdict[Hash]:
        """Assess a hash function used where only pre-image resistance matters."""

    @abstractmethod
    def validate_symmetric(self, ctx: Context, key: Symmetric) -> Verdict[Symmetric]:
        """Assess a symmetric cipher."""

    def validate_asymmetric(self, ctx: Context, key: Asymmetric) -> Verdict[Asymmetric]:
        """Assess a wrapped asymmetric key.

        Args:
            ctx: Assessment context.
            key: Wrapped Ecc, Ifc or Ffc key.

        Returns:
            Verdict whose recommendation is wrapped in the same family.
        """
        inner = key.unwrap()
        verdict: Verdict
        if isinstance(inner, Ecc):
            verdict = self.validate_ecc(ctx, inner)
        elif isinstance(inner, Ifc):
            verdict = self.validate_ifc(ctx, inner)
        else:
            verdict = self.validate_ffc(ctx, inner)
        return verdict.map(Asymmetric.wrap)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
