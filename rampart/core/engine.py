"""
Rampart Assessment Engine
==========================

Central orchestrator for Rampart. The RampartEngine resolves standards
and primitives by name, builds the assessment context from
configuration defaults and caller overrides, runs the standard, and
wraps the outcome in a ScanResult with one Finding per assessed
primitive.

Architecture follows the Facade pattern (Gamma et al., 1994): the
standards themselves stay pure functions of (context, primitive) and
know nothing about names, configuration, logging or reporting.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - NIST SP 800-131A Rev. 2 (2019). Cryptographic Algorithm Transitions.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from shared.config import HASH_USES, RampartConfig
from shared.logger import RampartLogger
from shared.models import Finding, ScanResult, Severity

from rampart import __tool_name__
from rampart.context import Context
from rampart.core.models import AssessmentResult, Family
from rampart.parsers.certificate import CertificateError, assess_certificate
from rampart.primitives import (
    ECC_NAMES,
    ECC_NOT_SUPPORTED,
    HASH_NAMES,
    HASH_NOT_SUPPORTED,
    SYMMETRIC_NAMES,
    SYMMETRIC_NOT_SUPPORTED,
    Asymmetric,
    Ecc,
    Ffc,
    Ifc,
    display_name,
)
from rampart.standards import Standard, Verdict, get_standard

_MAX_LABEL = 64


class RampartEngine:
    """Runs compliance assessments and packages them as ScanResults.

    Usage::

        engine = RampartEngine()
        result = engine.assess_symmetric("des-ede3", standard="nist", year=2023)
        result = engine.assess_hash("sha1", use="pre-image")
        result = engine.assess_ifc(2048, security=112)
        result = engine.assess_certificate(Path("server.pem"))

    Every ``assess_*`` method takes optional ``standard``, ``security``
    and ``year`` overrides; anything left as None comes from the
    ``[assess]`` configuration section.

    Attributes:
        config: Rampart configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[RampartConfig] = None) -> None:
        self.config = config or RampartConfig()
        settings = self.config.global_settings
        self.logger = RampartLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Context and standard resolution
    # ------------------------------------------------------------------ #

    def context(self, security: Optional[int] = None, year: Optional[int] = None) -> Context:
        """Build a Context from overrides, falling back to configuration.

        Raises:
            pydantic.ValidationError: If *security* is not positive.
        """
        defaults = self.config.assess
        values: dict[str, int] = {
            "security": security if security is not None else defaults.security,
        }
        year = year if year is not None else defaults.year
        if year is not None:
            values["year"] = year
        return Context(**values)

    def standard(self, name: Optional[str] = None) -> Standard:
        """Resolve a standard by name (default from configuration).

        Raises:
            ValueError: If the standard is not registered.
        """
        return get_standard(name or self.config.assess.standard)

    # ------------------------------------------------------------------ #
    #  Single primitive assessments
    # ------------------------------------------------------------------ #

    def assess_symmetric(
        self,
        name: str,
        *,
        standard: Optional[str] = None,
        security: Optional[int] = None,
        year: Optional[int] = None,
    ) -> ScanResult:
        """Assess a symmetric cipher given by name."""
        std, ctx = self.standard(standard), self.context(security, year)
        cipher = SYMMETRIC_NAMES.lookup(name)
        with self.logger.operation("assess_symmetric"):
            verdict = std.validate_symmetric(ctx, cipher)
            assessment = self._record(
                Family.SYMMETRIC, name, cipher, verdict, std, ctx,
                recognised=cipher != SYMMETRIC_NOT_SUPPORTED,
                strength=cipher.security,
            )
        return self._package(name, std, [assessment])

    def assess_hash(
        self,
        name: str,
        *,
        use: Optional[str] = None,
        standard: Optional[str] = None,
        security: Optional[int] = None,
        year: Optional[int] = None,
    ) -> ScanResult:
        """Assess a hash function given by name.

        Args:
            name: Hash name, e.g. ``"sha256"`` or ``"sha3-384"``.
            use: ``"collision"`` (digital signatures) or ``"pre-image"``
                (HMAC, KDF, random bit generation). Defaults to the
                configured ``hash_use``.

        Raises:
            ValueError: If *use* is not a known hash use.
        """
        use = use or self.config.assess.hash_use
        if use not in HASH_USES:
            raise ValueError(f"hash use must be one of {HASH_USES}, got {use!r}")

        std, ctx = self.standard(standard), self.context(security, year)
        hash_func = HASH_NAMES.lookup(name)
        recognised = hash_func != HASH_NOT_SUPPORTED

        with self.logger.operation("assess_hash"):
            if use == "collision":
                verdict = std.validate_hash(ctx, hash_func)
                family, strength = Family.HASH, hash_func.collision_resistance
            else:
                verdict = std.validate_hash_based(ctx, hash_func)
                family, strength = Family.HASH_BASED, hash_func.pre_image_resistance
            assessment = self._record(
                family, name, hash_func, verdict, std, ctx,
                recognised=recognised, strength=strength,
            )
        return self._package(name, std, [assessment])

    def assess_ecc(
        self,
        name: str,
        *,
        standard: Optional[str] = None,
        security: Optional[int] = None,
        year: Optional[int] = None,
    ) -> ScanResult:
        """Assess an elliptic curve given by name."""
        std, ctx = self.standard(standard), self.context(security, year)
        curve = ECC_NAMES.lookup(name)
        with self.logger.operation("assess_ecc"):
            verdict = std.validate_ecc(ctx, curve)
            assessment = self._record(
                Family.ECC, name, curve, verdict, std, ctx,
                recognised=curve != ECC_NOT_SUPPORTED,
                strength=curve.security,
            )
        return self._package(name, std, [assessment])

    def assess_ifc(
        self,
        k: int,
        *,
        standard: Optional[str] = None,
        security: Optional[int] = None,
        year: Optional[int] = None,
    ) -> ScanResult:
        """Assess an RSA modulus size.

        Raises:
            ValueError: If *k* is not positive.
        """
        key = Ifc(k)
        std, ctx = self.standard(standard), self.context(security, year)
        with self.logger.operation("assess_ifc"):
            verdict = std.validate_ifc(ctx, key)
            assessment = self._record(
                Family.IFC, str(key), key, verdict, std, ctx, strength=k,
            )
        return self._package(str(key), std, [assessment])

    def assess_ffc(
        self,
        l: int,  # noqa: E741
        n: int,
        *,
        standard: Optional[str] = None,
        security: Optional[int] = None,
        year: Optional[int] = None,
    ) -> ScanResult:
        """Assess a finite field key size pair.

        Raises:
            ValueError: If the sizes are not positive or ``n > l``.
        """
        key = Ffc(l, n)
        std, ctx = self.standard(standard), self.context(security, year)
        with self.logger.operation("assess_ffc"):
            verdict = std.validate_ffc(ctx, key)
            assessment = self._record(Family.FFC, str(key), key, verdict, std, ctx)
        return self._package(str(key), std, [assessment])

    # ------------------------------------------------------------------ #
    #  Certificates
    # ------------------------------------------------------------------ #

    def assess_certificate(
        self,
        path: Union[str, Path],
        *,
        standard: Optional[str] = None,
        security: Optional[int] = None,
        year: Optional[int] = None,
    ) -> ScanResult:
        """Assess the public key and signature hash of an X.509 certificate.

        An unreadable certificate or unsupported key type does not raise:
        it produces a single CRITICAL finding and a non-compliant result.

        Args:
            path: PEM or DER certificate file.

        Returns:
            ScanResult with one finding for the key and, unless the
            signature scheme has no separate hash, one for the hash.
        """
        std, ctx = self.standard(standard), self.context(security, year)
        started_at = datetime.now(timezone.utc)

        with self.logger.operation("certificate"), self.logger.timed(f"certificate {path}"):
            try:
                report = assess_certificate(std, ctx, path)
            except CertificateError as exc:
                self.logger.error("Certificate assessment failed: %s", exc, path=str(path))
                result = ScanResult(
                    tool_name=__tool_name__, target=str(path), start_time=started_at,
                )
                result.metadata = {
                    "compliant": False,
                    "standard": std.name,
                    "assessments": [],
                    "error": str(exc),
                }
                result.add_finding(Finding(
                    severity=Severity.CRITICAL,
                    title="Certificate Assessment Failed",
                    description=str(exc),
                    recommendation="Provide a readable PEM or DER certificate with an RSA, DSA, DH or EC key.",
                ))
                return result.finalize()

            key = report.key.unwrap()
            assessments = [
                self._record(
                    self._key_family(report.key), display_name(key), report.key,
                    report.key_verdict, std, ctx,
                    recognised=key != ECC_NOT_SUPPORTED,
                    strength=self._key_strength(report.key),
                )
            ]
            if report.signature_hash is not None and report.hash_verdict is not None:
                assessments.append(self._record(
                    Family.HASH, display_name(report.signature_hash),
                    report.signature_hash, report.hash_verdict, std, ctx,
                    recognised=report.signature_hash != HASH_NOT_SUPPORTED,
                    strength=report.signature_hash.collision_resistance,
                ))

        result = self._package(str(path), std, assessments, started_at=started_at)
        result.metadata["subject"] = report.subject
        return result

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    def _record(
        self,
        family: Family,
        label: str,
        primitive: object,
        verdict: Verdict,
        std: Standard,
        ctx: Context,
        *,
        recognised: bool = True,
        strength: Optional[int] = None,
    ) -> AssessmentResult:
        """Turn a verdict into an AssessmentResult and log it."""
        name = display_name(primitive) if recognised else label.strip()[:_MAX_LABEL] or "?"
        assessment = AssessmentResult(
            family=family,
            standard=std.name,
            primitive=name,
            recommendation=display_name(verdict.recommendation),
            compliant=verdict.compliant,
            recognised=recognised,
            strength=strength if recognised else None,
            security=ctx.security,
            year=ctx.year,
        )
        self.logger.debug(
            "%s %s under %s: %s, recommend %s",
            family.value, name, std.name, assessment.status, assessment.recommendation,
            security=ctx.security, year=ctx.year,
        )
        return assessment

    def _package(
        self,
        target: str,
        std: Standard,
        assessments: list[AssessmentResult],
        *,
        started_at: Optional[datetime] = None,
    ) -> ScanResult:
        result = ScanResult(
            tool_name=__tool_name__,
            target=target or "?",
            start_time=started_at or datetime.now(timezone.utc),
        )
        result.metadata = {
            "compliant": all(a.compliant for a in assessments),
            "standard": std.name,
            "assessments": [a.model_dump(mode="json") for a in assessments],
        }
        for assessment in assessments:
            result.add_finding(self._finding(assessment, std))
        return result.finalize()

    @staticmethod
    def _finding(assessment: AssessmentResult, std: Standard) -> Finding:
        """Map an assessment to a finding; severity follows the verdict."""
        name = assessment.primitive
        rec = assessment.recommendation
        label = assessment.family.label
        where = f"{assessment.security}-bit floor, year {assessment.year}"
        evidence = {
            "strength": assessment.strength,
            "security": assessment.security,
            "year": assessment.year,
        }

        if not assessment.recognised:
            return Finding(
                severity=Severity.CRITICAL,
                title=f"{name} is not recognised",
                description=f"{label} {name!r} is not in the catalog and cannot satisfy {std.title}.",
                evidence=evidence,
                recommendation=f"Use {rec}.",
                references=[std.title],
            )
        if not assessment.compliant:
            return Finding(
                severity=Severity.HIGH,
                title=f"{name} is not compliant with {std.name}",
                description=f"{label} {name} does not meet {std.title} ({where}).",
                evidence=evidence,
                recommendation=f"Migrate to {rec}.",
                references=[std.title],
            )
        if rec != name:
            return Finding(
                severity=Severity.LOW,
                title=f"{name} is compliant with {std.name}",
                description=(
                    f"{label} {name} meets {std.title} ({where}); "
                    f"{rec} is the recommended choice at this floor."
                ),
                evidence=evidence,
                recommendation=f"Prefer {rec} for new deployments.",
                references=[std.title],
            )
        return Finding(
            severity=Severity.INFO,
            title=f"{name} is compliant with {std.name}",
            description=f"{label} {name} meets {std.title} ({where}).",
            evidence=evidence,
            references=[std.title],
        )

    @staticmethod
    def _key_family(key: Asymmetric) -> Family:
        return Family(key.kind.value)

    @staticmethod
    def _key_strength(key: Asymmetric) -> Optional[int]:
        inner = key.unwrap()
        if isinstance(inner, Ecc):
            return inner.security
        if isinstance(inner, Ifc):
            return inner.k
        return None


def is_compliant(result: ScanResult) -> bool:
    """Whether every assessment in *result* is compliant."""
    return bool(result.metadata.get("compliant", False))
