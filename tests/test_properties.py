"""Properties every bundled standard must satisfy."""

from __future__ import annotations

import itertools
from typing import Optional

import pytest

from rampart.context import Context
from rampart.primitives import (
    ECC_CATALOG,
    ECC_NOT_SUPPORTED,
    FFC_CATALOG,
    HASH_CATALOG,
    HASH_NOT_SUPPORTED,
    IFC_CATALOG,
    SYMMETRIC_CATALOG,
    SYMMETRIC_NOT_SUPPORTED,
    Ffc,
    Ifc,
)
from rampart.standards import STANDARDS, TieredStandard, Verdict
from rampart.standards.tiers import TierTable

YEARS = (1990, 2023, 2024, 2031, 2032, 2100)
FLOORS = (1, 80, 112, 128, 192, 256, 512)

# family -> (validate method, sample primitives)
FAMILIES = {
    "ecc": ("validate_ecc", [*ECC_CATALOG.values(), ECC_NOT_SUPPORTED]),
    "ffc": ("validate_ffc", [*FFC_CATALOG, Ffc(512, 512), Ffc(20000, 160), Ffc(4000, 300)]),
    "ifc": ("validate_ifc", [*IFC_CATALOG, Ifc(1), Ifc(2047), Ifc(1 << 16)]),
    "hash": ("validate_hash", [*HASH_CATALOG.values(), HASH_NOT_SUPPORTED]),
    "hash_based": ("validate_hash_based", [*HASH_CATALOG.values(), HASH_NOT_SUPPORTED]),
    "symmetric": ("validate_symmetric", [*SYMMETRIC_CATALOG.values(), SYMMETRIC_NOT_SUPPORTED]),
}

TIERED = [s for s in STANDARDS.values() if isinstance(s, TieredStandard)]


def _tables(boxes: Optional[bool] = None):
    """Tables of every tiered standard; *boxes* selects by dimension."""
    for standard in TIERED:
        for family, table in standard.tables().items():
            if boxes is None or isinstance(table.tiers[0].lower, tuple) == boxes:
                yield pytest.param(table, id=f"{standard.name}-{family}")


@pytest.mark.parametrize("standard", list(STANDARDS.values()), ids=list(STANDARDS))
@pytest.mark.parametrize("family", list(FAMILIES))
def test_totality(standard, family):
    method, samples = FAMILIES[family]
    validate = getattr(standard, method)
    for primitive, year in itertools.product(samples, YEARS):
        verdict = validate(Context(year=year), primitive)
        assert isinstance(verdict, Verdict)
        assert type(verdict.recommendation) is type(primitive)


@pytest.mark.parametrize("table", _tables(boxes=False))
def test_one_dimensional_partition_is_exclusive(table: TierTable):
    for measure in range(0, 20000, 7):
        hits = [tier for tier in table.tiers if tier.contains((measure,))]
        assert len(hits) == 1, measure


@pytest.mark.parametrize("table", _tables(boxes=True))
def test_two_dimensional_boxes_are_disjoint(table: TierTable):
    assert table.default is not None
    for l, n in itertools.product(range(512, 20000, 257), range(128, 700, 31)):  # noqa: E741
        hits = [tier for tier in table.tiers if tier.contains((l, n))]
        assert len(hits) <= 1, (l, n)


@pytest.mark.parametrize("standard", list(STANDARDS.values()), ids=list(STANDARDS))
def test_determinism(standard):
    ctx = Context(security=128, year=2024)
    for family, (method, samples) in FAMILIES.items():
        validate = getattr(standard, method)
        for primitive in samples:
            assert validate(ctx, primitive) == validate(ctx, primitive)


@pytest.mark.parametrize("standard", TIERED, ids=[s.name for s in TIERED])
@pytest.mark.parametrize("family", ["ecc", "hash", "hash_based", "symmetric"])
def test_floor_is_monotone(standard, family):
    """A higher floor never flips the verdict and never weakens the advice."""
    method, samples = FAMILIES[family]
    validate = getattr(standard, method)
    measure = standard.tables()[family].measure
    for primitive, year in itertools.product(samples, (2023, 2032)):
        verdicts = [validate(Context(security=s, year=year), primitive) for s in FLOORS]
        assert len({v.compliant for v in verdicts}) == 1
        strengths = [measure(v.recommendation) for v in verdicts]
        assert strengths == sorted(strengths)


@pytest.mark.parametrize("table", _tables())
def test_cutover_edges(table: TierTable):
    """At the cutover year the tier still applies; one year later it does not."""
    for tier in table.tiers:
        if tier.cutover is None or not tier.compliant:
            continue
        primitive = tier.canonical
        if not table.is_specified(primitive) or table.locate(table.measure(primitive)) is None:
            continue
        if table.tiers[table.locate(table.measure(primitive))] is not tier:
            continue
        floor = table.measure(primitive)[0] if table.floor else 1
        before = table.assess(Context(security=floor, year=tier.cutover_for(primitive)), primitive)
        after = table.assess(Context(security=floor, year=tier.cutover_for(primitive) + 1), primitive)
        assert before.compliant
        assert not after.compliant
