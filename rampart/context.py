"""
Assessment Context
===================

The context every assessment runs in: a minimum security floor in bits
and the calendar year used to decide whether a transition deadline has
passed.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SECURITY = 128


def _current_year() -> int:
    return date.today().year


class Context(BaseModel):
    """Security floor and evaluation year.

    Attributes:
        security: Minimum acceptable security strength in bits.
        year: Calendar year used for cutover comparisons.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    security: int = Field(default=DEFAULT_SECURITY, gt=0, description="Security floor in bits")
    year: int = Field(default_factory=_current_year, gt=0, description="Evaluation year")

    def with_year(self, year: int) -> Context:
        return Context(security=self.security, year=year)

    def with_security(self, security: int) -> Context:
        return Context(security=security, year=self.year)
