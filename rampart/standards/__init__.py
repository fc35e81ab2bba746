"""
Rampart Standards
==================

The standard contract, the tier table interpreter and the bundled
standards, registered by name in ``STANDARDS``.
"""

from rampart.standards.base import Compliant, NonCompliant, Standard, Verdict
from rampart.standards.bsi import Bsi
from rampart.standards.cnsa import Cnsa
from rampart.standards.ecrypt import Ecrypt
from rampart.standards.lenstra import Lenstra
from rampart.standards.nist import Nist
from rampart.standards.testing import Testing
from rampart.standards.tiers import Tier, TierTable, TieredStandard

STANDARDS: dict[str, Standard] = {
    standard.name: standard
    for standard in (Nist(), Bsi(), Cnsa(), Ecrypt(), Lenstra(), Testing())
}


def get_standard(name: str) -> Standard:
    """Look up a registered standard by name (case-insensitive).

    Raises:
        ValueError: If no standard is registered under *name*.
    """
    try:
        return STANDARDS[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(STANDARDS))
        raise ValueError(f"unknown standard {name!r} (known: {known})") from None


__all__ = [
    "Bsi",
    "Cnsa",
    "Compliant",
    "Ecrypt",
    "Lenstra",
    "Nist",
    "NonCompliant",
    "STANDARDS",
    "Standard",
    "Testing",
    "Tier",
    "TierTable",
    "TieredStandard",
    "Verdict",
    "get_standard",
]
