"""
Rampart Console Output
=======================

Rich-based console output formatters for Rampart: assessment verdicts,
the registered standards and the named primitive catalogs.

Uses the shared console infrastructure for consistent styling across
all Rampart commands.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import RampartConsole
from shared.models import ScanResult

from rampart.core.models import AssessmentResult
from rampart.primitives import NameMap
from rampart.standards import Standard
from rampart.standards.tiers import TieredStandard


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_VERDICT_COLOURS: dict[bool, str] = {
    True: "bold bright_green",
    False: "bold white on red",
}


class RampartConsoleOutput:
    """Console output formatters for Rampart results.

    Usage::

        console = RampartConsole()
        output = RampartConsoleOutput(console)
        output.display_result(engine.assess_symmetric("aes128"))
        output.display_standards(STANDARDS.values())
    """

    def __init__(self, console: Optional[RampartConsole] = None) -> None:
        """Initialise the console output formatter.

        Args:
            console: RampartConsole instance. Creates one if not provided.
        """
        self.console = console or RampartConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Assessment Display
    # ------------------------------------------------------------------ #

    def display_result(self, result: ScanResult) -> None:
        """Display an assessment ScanResult: overview, verdicts, findings.

        Args:
            result: ScanResult from the engine.
        """
        self.console.section("Compliance Assessment")
        metadata = result.metadata
        compliant = bool(metadata.get("compliant", False))

        overview = Text()
        overview.append("Target: ", style="bold")
        overview.append(f"{result.target}\n")
        if "subject" in metadata:
            overview.append("Subject: ", style="bold")
            overview.append(f"{metadata['subject']}\n")
        overview.append("Standard: ", style="bold")
        overview.append(f"{metadata.get('standard', '-')}\n")
        overview.append("Verdict: ", style="bold")
        overview.append(
            "COMPLIANT" if compliant else "NON-COMPLIANT",
            style=_VERDICT_COLOURS[compliant],
        )
        self._rich.print(Panel(overview, title="Overview", border_style="cyan"))

        assessments = [
            AssessmentResult.model_validate(raw) for raw in metadata.get("assessments", [])
        ]
        if assessments:
            self._display_assessments(assessments)
        elif "error" in metadata:
            self.console.error(str(metadata["error"]))

        if result.findings:
            self._rich.print()
            self.console.findings_table(result.findings)
            recommendations = [f.recommendation for f in result.findings if f.recommendation]
            if recommendations:
                self._rich.print()
                self._rich.print("[bold]Recommendations:[/bold]")
                for rec in recommendations:
                    self._rich.print(f"  [bright_cyan]•[/bright_cyan] {rec}")

        self._rich.print()
        self._rich.print(f"[dim]{result.summary}[/dim]")
        standard = metadata.get("standard", "-")
        if compliant:
            self.console.success(f"{result.target} meets {standard}")
        else:
            self.console.warning(f"{result.target} does not meet {standard}")

    def _display_assessments(self, assessments: Sequence[AssessmentResult]) -> None:
        tbl = Table(
            title="Verdicts",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Family", style="bold")
        tbl.add_column("Primitive")
        tbl.add_column("Strength", justify="right")
        tbl.add_column("Verdict", justify="center")
        tbl.add_column("Recommendation")
        tbl.add_column("Floor", justify="right")
        tbl.add_column("Year", justify="right")

        for a in assessments:
            colour = _VERDICT_COLOURS[a.compliant]
            tbl.add_row(
                a.family.label,
                a.primitive,
                f"{a.strength} bits" if a.strength is not None else "-",
                f"[{colour}]{a.status.upper()}[/{colour}]",
                a.recommendation,
                f"{a.security} bits",
                str(a.year),
            )

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Registry Display
    # ------------------------------------------------------------------ #

    def display_standards(self, standards: Sequence[Standard]) -> None:
        """List the registered standards and the families they cover."""
        self.console.section("Standards")

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("Name", style="bold bright_cyan")
        tbl.add_column("Title")
        tbl.add_column("Rules")

        for std in standards:
            rules = "tier tables" if isinstance(std, TieredStandard) else "echo"
            tbl.add_row(std.name, std.title, rules)

        self._rich.print(tbl)

    def display_catalog(self, family: str, names: NameMap) -> None:
        """List every name (canonical and alias) a family recognises.

        Args:
            family: Family label for the heading.
            names: Name mapping for the family.
        """
        self.console.section(f"{family} Catalog")

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("Name", style="bold")
        tbl.add_column("Canonical")
        tbl.add_column("Id", justify="right", style="dim")

        for name in names.names():
            primitive = names.lookup(name)
            tbl.add_row(name, names.name_of(primitive), f"0x{primitive.id:04x}")

        self._rich.print(tbl)
