"""
Tier Tables
============

Standards are written down as data: for every primitive family a
``TierTable`` partitions the measure space (security bits, modulus
size, or the (l, n) pair for finite field keys) into tiers. Each tier
names a canonical recommendation, whether it is acceptable at all, and
optionally the last year in which it is acceptable.

A single interpreter, ``TierTable.assess``, turns a table, a context
and a primitive into a verdict:

1. A primitive outside the table's specified set is non-compliant and
   the recommendation is the weakest tier that stays acceptable after
   every transition deadline.
2. The measure selects exactly one tier (two dimensional tables fall
   back to a catch-all for pairs outside every box).
3. Past the tier's cutover year the primitive is non-compliant and the
   recommendation moves to the next tier that is still acceptable.
4. A tier marked non-compliant yields its own canonical primitive.
5. Otherwise the primitive is compliant. Strength based tables raise
   the recommendation to the tier matching the context security floor
   when that is higher; the floor never changes the verdict itself.

References:
    - NIST SP 800-131A Rev. 2 (2019), Section 1.2 (acceptable,
      deprecated and disallowed algorithm statuses).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Generic, Optional, TypeVar, Union

from rampart.context import Context
from rampart.primitives import Ecc, Ffc, Hash, Ifc, Symmetric
from rampart.standards.base import Compliant, NonCompliant, Standard, Verdict

P = TypeVar("P")

Measure = tuple[int, ...]
Bound = Union[int, tuple[Optional[int], ...]]


# ===================================================================== #
#  Measures
# ===================================================================== #

def security(primitive: Union[Ecc, Symmetric]) -> Measure:
    return (primitive.security,)


def collision_resistance(hash_func: Hash) -> Measure:
    return (hash_func.collision_resistance,)


def pre_image_resistance(hash_func: Hash) -> Measure:
    return (hash_func.pre_image_resistance,)


def modulus_size(key: Ifc) -> Measure:
    return (key.k,)


def field_size(key: Ffc) -> Measure:
    return (key.l, key.n)


def _bounds(value: Bound) -> tuple[Optional[int], ...]:
    return value if isinstance(value, tuple) else (value,)


# ===================================================================== #
#  Tiers
# ===================================================================== #

@dataclass(frozen=True, slots=True)
class Tier(Generic[P]):
    """One cell of a tier table.

    Bounds are half-open: ``lower <= measure < upper``. Two dimensional
    tiers take tuples, and ``None`` (as the whole upper bound or one of
    its components) means unbounded.

    Attributes:
        lower: Inclusive lower bound.
        upper: Exclusive upper bound, or None.
        canonical: Recommended primitive for this tier.
        compliant: Whether the tier is acceptable at all.
        cutover: Last acceptable year, or None if it never expires.
        exceptions: Per-primitive cutover years overriding ``cutover``.
    """

    lower: Bound
    upper: Optional[Bound]
    canonical: P
    compliant: bool = True
    cutover: Optional[int] = None
    exceptions: tuple[tuple[P, int], ...] = ()

    def contains(self, measure: Measure) -> bool:
        if any(value < low for value, low in zip(measure, _bounds(self.lower))):
            return False
        if self.upper is None:
            return True
        return all(
            high is None or value < high
            for value, high in zip(measure, _bounds(self.upper))
        )

    def cutover_for(self, primitive: P) -> Optional[int]:
        for special, year in self.exceptions:
            if special == primitive:
                return year
        return self.cutover

    def expired(self, year: int, primitive: Optional[P] = None) -> bool:
        cutover = self.cutover if primitive is None else self.cutover_for(primitive)
        return cutover is not None and year > cutover


@dataclass(frozen=True)
class TierTable(Generic[P]):
    """Ordered tiers for one primitive family.

    Attributes:
        measure: Maps a primitive to its measure tuple.
        tiers: Tiers in ascending order of strength.
        specified: Primitives the standard names, or None for all.
        default: Catch-all recommendation for measures outside every
            tier (two dimensional tables only); always non-compliant.
        floor: Whether the context security floor lifts the
            recommendation of compliant primitives.

    Raises:
        ValueError: If one dimensional tiers do not cover ``[0, inf)``
            contiguously, or two dimensional tiers overlap.
    """

    measure: Callable[[P], Measure]
    tiers: tuple[Tier[P], ...]
    specified: Optional[frozenset[P]] = None
    default: Optional[P] = None
    floor: bool = True

    _unbounded: ClassVar[float] = float("inf")
    _fallback: P = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.tiers:
            raise ValueError("tier table needs at least one tier")
        if isinstance(self.tiers[0].lower, tuple):
            self._check_boxes()
        else:
            self._check_partition()
        object.__setattr__(self, "_fallback", self._compute_fallback())

    # ------------------------------------------------------------------ #
    #  Validation
    # ------------------------------------------------------------------ #

    def _check_partition(self) -> None:
        if self.tiers[0].lower != 0:
            raise ValueError("first tier must start at 0")
        for below, above in zip(self.tiers, self.tiers[1:]):
            if below.upper != above.lower:
                raise ValueError(
                    f"tiers are not contiguous: {below.upper} != {above.lower}"
                )
        if self.tiers[-1].upper is not None:
            raise ValueError("last tier must be unbounded")

    def _check_boxes(self) -> None:
        if self.default is None:
            raise ValueError("two dimensional tables need a default")
        for i, first in enumerate(self.tiers):
            for second in self.tiers[i + 1:]:
                if self._overlap(first, second):
                    raise ValueError(f"tiers overlap: {first} and {second}")

    def _overlap(self, first: Tier[P], second: Tier[P]) -> bool:
        first_low, second_low = _bounds(first.lower), _bounds(second.lower)
        first_high = self._upper_bounds(first, len(first_low))
        second_high = self._upper_bounds(second, len(second_low))
        return all(
            max(first_low[d], second_low[d]) < min(first_high[d], second_high[d])
            for d in range(len(first_low))
        )

    def _upper_bounds(self, tier: Tier[P], dims: int) -> tuple[float, ...]:
        if tier.upper is None:
            return (self._unbounded,) * dims
        return tuple(
            self._unbounded if high is None else high for high in _bounds(tier.upper)
        )

    def _compute_fallback(self) -> P:
        for tier in self.tiers:
            if tier.compliant and tier.cutover is None:
                return tier.canonical
        return self.tiers[-1].canonical

    # ------------------------------------------------------------------ #
    #  Lookup
    # ------------------------------------------------------------------ #

    @property
    def fallback(self) -> P:
        """Recommendation for primitives the standard does not specify."""
        return self._fallback

    def locate(self, measure: Measure) -> Optional[int]:
        """Index of the tier containing *measure*, or None."""
        for index, tier in enumerate(self.tiers):
            if tier.contains(measure):
                return index
        return None

    def is_specified(self, primitive: P) -> bool:
        return self.specified is None or primitive in self.specified

    def _successor(self, index: int, year: int) -> P:
        for tier in self.tiers[index + 1:]:
            if tier.compliant and not tier.expired(year):
                return tier.canonical
        return self.tiers[index].canonical

    def _lift(self, index: int, ctx: Context, measure: Measure) -> int:
        if self.floor:
            floored = self.locate((max(ctx.security, measure[0]),))
            if floored is not None:
                index = max(index, floored)
        while index + 1 < len(self.tiers) and self.tiers[index].expired(ctx.year):
            index += 1
        return index

    # ------------------------------------------------------------------ #
    #  Assessment
    # ------------------------------------------------------------------ #

    def assess(self, ctx: Context, primitive: P) -> Verdict[P]:
        """Assess *primitive* under *ctx*.

        Args:
            ctx: Security floor and evaluation year.
            primitive: Primitive of this table's family.

        Returns:
            Compliant or NonCompliant carrying the recommendation.
        """
        if not self.is_specified(primitive):
            return NonCompliant(self.fallback)

        measure = self.measure(primitive)
        index = self.locate(measure)
        if index is None:
            return NonCompliant(self.default)

        tier = self.tiers[index]
        if tier.expired(ctx.year, primitive):
            return NonCompliant(self._successor(index, ctx.year))
        if not tier.compliant:
            return NonCompliant(tier.canonical)
        return Compliant(self.tiers[self._lift(index, ctx, measure)].canonical)


# ===================================================================== #
#  Table driven standard
# ===================================================================== #

class TieredStandard(Standard):
    """Standard whose every family is described by a TierTable."""

    ecc_table: ClassVar[TierTable[Ecc]]
    ffc_table: ClassVar[TierTable[Ffc]]
    ifc_table: ClassVar[TierTable[Ifc]]
    hash_table: ClassVar[TierTable[Hash]]
    hash_based_table: ClassVar[TierTable[Hash]]
    symmetric_table: ClassVar[TierTable[Symmetric]]

    def validate_ecc(self, ctx: Context, key: Ecc) -> Verdict[Ecc]:
        return self.ecc_table.assess(ctx, key)

    def validate_ffc(self, ctx: Context, key: Ffc) -> Verdict[Ffc]:
        return self.ffc_table.assess(ctx, key)

    def validate_ifc(self, ctx: Context, key: Ifc) -> Verdict[Ifc]:
        return self.ifc_table.assess(ctx, key)

    def validate_hash(self, ctx: Context, hash_func: Hash) -> Verdict[Hash]:
        return self.hash_table.assess(ctx, hash_func)

    def validate_hash_based(self, ctx: Context, hash_func: Hash) -> Verdict[Hash]:
        return self.hash_based_table.assess(ctx, hash_func)

    def validate_symmetric(self, ctx: Context, key: Symmetric) -> Verdict[Symmetric]:
        return self.symmetric_table.assess(ctx, key)

    @classmethod
    def tables(cls) -> dict[str, TierTable]:
        """Tables keyed by family name."""
        return {
            "ecc": cls.ecc_table,
            "ffc": cls.ffc_table,
            "ifc": cls.ifc_table,
            "hash": cls.hash_table,
            "hash_based": cls.hash_based_table,
            "symmetric": cls.symmetric_table,
        }
