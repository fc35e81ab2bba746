"""
Rampart Report Generator
=========================

Generates HTML and JSON reports from assessment results. The HTML
report uses inline CSS so it renders anywhere without extra files; the
JSON report is meant for CI pipelines and other tools.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from html import escape
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult

from rampart import __version__
from rampart.core.models import AssessmentResult


# ===================================================================== #
#  HTML Template (inline CSS)
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>Rampart Compliance Report - {title}</title>
<style>
    body {{
        font: 15px/1.5 "Source Sans Pro", "Segoe UI", Roboto, sans-serif;
        color: #1f2328;
        background: #f6f8fa;
        margin: 0;
    }}
    main {{ max-width: 960px; margin: 0 auto; padding: 24px; }}
    header {{ border-bottom: 3px solid #1f6feb; padding-bottom: 12px; }}
    header h1 {{ font-size: 24px; margin: 0 0 4px; letter-spacing: 0.5px; }}
    header p {{ margin: 0; color: #59636e; }}
    .banner {{
        margin: 20px 0;
        padding: 14px 18px;
        border-radius: 6px;
        font-size: 18px;
        font-weight: 600;
    }}
    .banner.pass {{ background: #dafbe1; border: 1px solid #4ac26b; color: #116329; }}
    .banner.fail {{ background: #ffebe9; border: 1px solid #ff8182; color: #a40e26; }}
    dl.facts {{ display: grid; grid-template-columns: max-content auto; gap: 4px 16px; }}
    dl.facts dt {{ font-weight: 600; color: #59636e; }}
    dl.facts dd {{ margin: 0; }}
    h2 {{ font-size: 18px; margin: 28px 0 8px; color: #1f6feb; }}
    table.verdicts {{ width: 100%; border-collapse: collapse; background: #fff; }}
    table.verdicts th {{ text-align: left; background: #eaeef2; }}
    table.verdicts th, table.verdicts td {{ padding: 6px 10px; border-bottom: 1px solid #d1d9e0; }}
    .tag {{ padding: 1px 8px; border-radius: 10px; font-size: 12px; font-weight: 700; }}
    .tag.pass {{ background: #dafbe1; color: #116329; }}
    .tag.fail {{ background: #ffebe9; color: #a40e26; }}
    article {{
        background: #fff;
        border: 1px solid #d1d9e0;
        border-radius: 6px;
        padding: 10px 14px;
        margin: 8px 0;
    }}
    article h3 {{ font-size: 15px; margin: 0 0 6px; }}
    article p {{ margin: 4px 0; }}
    .severity-critical {{ background: #82071e; color: #fff; }}
    .severity-high {{ background: #cf222e; color: #fff; }}
    .severity-low {{ background: #bf8700; color: #fff; }}
    .severity-info {{ background: #0969da; color: #fff; }}
    .muted {{ color: #59636e; font-size: 13px; }}
    footer {{ margin-top: 32px; color: #59636e; font-size: 12px; }}
</style>
</head>
<body>
<main>
    <header>
        <h1>Rampart Compliance Report</h1>
        <p>{title}</p>
    </header>

    {banner}

    <dl class="facts">
        <dt>Target</dt><dd>{target}</dd>
        <dt>Standard</dt><dd>{standard}</dd>
        <dt>Findings</dt><dd>{finding_count}</dd>
        <dt>Duration</dt><dd>{duration:.3f}s</dd>
        <dt>Summary</dt><dd>{summary}</dd>
    </dl>

    <h2>Verdicts</h2>
    {assessments_html}

    <h2>Findings</h2>
    {findings_html}

    <footer>Generated by Rampart {version} on {timestamp}</footer>
</main>
</body>
</html>
"""


class RampartReportGenerator:
    """Writes assessment results as HTML or JSON.

    Usage::

        generator = RampartReportGenerator()
        generator.generate_html(scan_result, Path("report.html"))
        generator.generate_json(scan_result, Path("report.json"))
    """

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write a self-contained HTML report for *result*.

        Args:
            result: ScanResult produced by the engine.
            output_path: Destination file; parent directories are created.
            title: Heading shown under the report name.

        Returns:
            *output_path*.
        """
        compliant = bool(result.metadata.get("compliant", False))
        standard = str(result.metadata.get("standard", "-"))

        document = _HTML_TEMPLATE.format(
            title=escape(title or f"Assessment of {result.target}"),
            banner=self._banner(result.target, standard, compliant),
            target=escape(result.target),
            standard=escape(standard),
            finding_count=result.finding_count,
            duration=result.duration_seconds or 0.0,
            summary=escape(result.summary),
            assessments_html=self._verdict_rows(result),
            findings_html=self._finding_cards(result),
            version=__version__,
            timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
        return output_path

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write :meth:`render_json` output to *output_path*."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path

    def render_json(self, result: ScanResult) -> str:
        """JSON document for *result* as a string."""
        report_data: dict[str, Any] = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": __version__,
            },
            "summary": {
                "compliant": bool(result.metadata.get("compliant", False)),
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "metadata": result.metadata,
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False, default=str)

    # ------------------------------------------------------------------ #
    #  HTML fragments
    # ------------------------------------------------------------------ #

    @staticmethod
    def _banner(target: str, standard: str, compliant: bool) -> str:
        if compliant:
            return f'<div class="banner pass">COMPLIANT: {escape(target)} meets {escape(standard)}</div>'
        return (
            f'<div class="banner fail">NON-COMPLIANT: {escape(target)} '
            f"does not meet {escape(standard)}</div>"
        )

    @staticmethod
    def _tag(compliant: bool) -> str:
        if compliant:
            return '<span class="tag pass">compliant</span>'
        return '<span class="tag fail">non-compliant</span>'

    def _verdict_rows(self, result: ScanResult) -> str:
        raw_assessments = result.metadata.get("assessments", [])
        if not raw_assessments:
            reason = result.metadata.get("error", "Nothing was assessed.")
            return f'<p class="muted">{escape(str(reason))}</p>'

        lines = [
            '<table class="verdicts">',
            "<tr><th>Family</th><th>Primitive</th><th>Strength</th>"
            "<th>Verdict</th><th>Use instead</th><th>Floor / year</th></tr>",
        ]
        for raw in raw_assessments:
            a = AssessmentResult.model_validate(raw)
            strength = f"{a.strength} bits" if a.strength is not None else "-"
            lines.append(
                f"<tr><td>{escape(a.family.label)}</td><td>{escape(a.primitive)}</td>"
                f"<td>{strength}</td><td>{self._tag(a.compliant)}</td>"
                f"<td>{escape(a.recommendation)}</td>"
                f"<td>{a.security} bits / {a.year}</td></tr>"
            )
        lines.append("</table>")
        return "\n".join(lines)

    @staticmethod
    def _finding_cards(result: ScanResult) -> str:
        if not result.findings:
            return '<p class="muted">No findings.</p>'

        cards: list[str] = []
        for finding in result.findings:
            badge = f'<span class="tag {finding.severity.css_class}">{finding.severity.value}</span>'
            card = [
                f"<article><h3>{badge} {escape(finding.title)}</h3>",
                f"<p>{escape(finding.description)}</p>",
            ]
            if finding.recommendation:
                card.append(f"<p><strong>Action:</strong> {escape(finding.recommendation)}</p>")
            if finding.references:
                card.append(f'<p class="muted">{escape("; ".join(finding.references))}</p>')
            card.append("</article>")
            cards.append("\n".join(card))
        return "\n".join(cards)
