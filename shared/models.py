"""
Rampart Data Models
====================

Pydantic v2 models for the output side of Rampart: findings and the
result envelope that console output, JSON reports and HTML reports
consume.

Finding structure takes its inspiration from SARIF result objects.

References:
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity level.

    Attributes:
        CRITICAL: The input could not be assessed at all.
        HIGH:     The primitive does not comply with the standard.
        LOW:      Compliant, the recommendation differs from the input.
        INFO:     Compliant, nothing to do.
    """

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def css_class(self) -> str:
        """Return a CSS class name for severity-based styling."""
        return f"severity-{self.value.lower()}"


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation about an assessed primitive.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Data supporting the finding.
        recommendation: Suggested remediation action.
        references:     Publications backing the finding.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        use_enum_values=False,
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "severity": "HIGH",
                    "title": "des-ede is not compliant with nist",
                    "description": (
                        "Two-key triple DES offers 80 bits of security, below "
                        "the 112-bit minimum."
                    ),
                    "evidence": '{"security": 128, "year": 2026}',
                    "recommendation": "Migrate to aes128.",
                    "references": ["NIST SP 800-131A Rev. 2 (2019)."],
                }
            ]
        },
    )

    severity: Severity = Field(
        ...,
        description="Severity level of this finding",
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Short descriptive title",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Detailed explanation",
    )
    evidence: str = Field(
        default="",
        description="Supporting evidence or raw data",
    )
    recommendation: str = Field(
        default="",
        description="Suggested remediation",
    )
    references: list[str] = Field(
        default_factory=list,
        description="Publications backing the finding",
    )

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class ScanResult(BaseModel):
    """Aggregated result of one engine run.

    Attributes:
        tool_name:  Name of the producing component.
        target:     What was assessed (primitive name or file path).
        start_time: UTC timestamp when the run started.
        end_time:   UTC timestamp when the run ended.
        findings:   Individual findings.
        summary:    Human-readable summary text.
        metadata:   Structured payload (assessment results).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=False,
        extra="forbid",
    )

    tool_name: str = Field(..., min_length=1, description="Tool name")
    target: str = Field(..., min_length=1, description="Assessment target")
    start_time: _dt.datetime = Field(
        default_factory=_utcnow,
        description="Start timestamp (UTC)",
    )
    end_time: Optional[_dt.datetime] = Field(
        default=None,
        description="End timestamp (UTC)",
    )
    findings: list[Finding] = Field(default_factory=list)
    summary: str = Field(default="", description="Human-readable result summary")
    metadata: dict[str, Any] = Field(default_factory=dict)

    # ------------------------------------------------------------------ #
    #  Derived properties
    # ------------------------------------------------------------------ #

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of findings grouped by severity name."""
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    # ------------------------------------------------------------------ #
    #  Mutating helpers
    # ------------------------------------------------------------------ #

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the result."""
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Set *end_time* and *summary* (generated from severity counts by default).

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            parts = [f"{sev}: {cnt}" for sev, cnt in self.severity_counts.items() if cnt]
            self.summary = (
                f"Assessment complete. "
                f"Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self
