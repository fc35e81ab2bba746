"""
Rampart Core Data Models
=========================

Pydantic models describing assessment outcomes in a serialisable form.
They are what the engine stores in ``ScanResult.metadata`` and what the
console and report layers render.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field


class Family(str, enum.Enum):
    """Primitive family, with hashes split by the resistance that matters."""

    ECC = "ecc"
    FFC = "ffc"
    IFC = "ifc"
    HASH = "hash"
    HASH_BASED = "hash_based"
    SYMMETRIC = "symmetric"

    @property
    def label(self) -> str:
        return {
            "ecc": "Elliptic curve",
            "ffc": "Finite field key",
            "ifc": "RSA key",
            "hash": "Hash function (collision resistance)",
            "hash_based": "Hash function (pre-image resistance)",
            "symmetric": "Symmetric cipher",
        }[self.value]


class AssessmentResult(BaseModel):
    """Outcome of assessing one primitive against one standard.

    Attributes:
        family: Primitive family (and hash use).
        standard: Registry name of the standard.
        primitive: Name of the assessed primitive as given.
        recommendation: Name of the recommended primitive.
        compliant: Verdict.
        recognised: False when the name or key could not be mapped to a
            catalog primitive.
        strength: Intrinsic measure in bits where one exists (security
            strength, resistance, or modulus size).
        security: Context security floor in bits.
        year: Context evaluation year.
    """

    family: Family
    standard: str
    primitive: str
    recommendation: str
    compliant: bool
    recognised: bool = True
    strength: Optional[int] = None
    security: int = Field(gt=0)
    year: int

    @property
    def status(self) -> str:
        return "compliant" if self.compliant else "non-compliant"
