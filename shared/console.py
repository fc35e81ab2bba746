"""
Rampart Console Interface
==========================

Rich-powered console abstraction giving the CLI one consistent
presentation layer: banner, section headers, severity-coloured
messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Rampart output
# ---------------------------------------------------------------------------
_RAMPART_THEME = Theme(
    {
        "rampart.banner": "bold bright_cyan",
        "rampart.section": "bold bright_magenta",
        "rampart.success": "bold green",
        "rampart.warning": "bold yellow",
        "rampart.error": "bold red",
        "rampart.info": "bold bright_blue",
        "rampart.dim": "dim white",
        "rampart.critical": "bold white on red",
        "rampart.high": "bold red",
        "rampart.low": "bold bright_cyan",
        "rampart.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ____                                 _
 |  _ \ __ _ _ __ ___  _ __   __ _ _ __| |_
 | |_) / _` | '_ ` _ \| '_ \ / _` | '__| __|
 |  _ < (_| | | | | | | |_) | (_| | |  | |_
 |_| \_\__,_|_| |_| |_| .__/ \__,_|_|   \__|
                      |_|
[/bright_cyan]"""

_TAGLINE = "Cryptographic Compliance Engine"

SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "rampart.critical",
    "HIGH": "rampart.high",
    "LOW": "rampart.low",
    "INFO": "rampart.informational",
}


class RampartConsole:
    """Unified console interface for Rampart.

    Usage::

        con = RampartConsole()
        con.banner()
        con.section("Assessment")
        con.success("aes256 is compliant")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_RAMPART_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner and sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Rampart banner with *version* beneath it."""
        subtitle = (
            f"[rampart.banner]{_TAGLINE}[/rampart.banner]\n"
            f"[rampart.dim]Version: {version}[/rampart.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(f"  {title}  ", style="rampart.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[rampart.success][✔] COMPLIANT:[/rampart.success] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[rampart.warning][⚠] WARNING:[/rampart.warning] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[rampart.error][✘] ERROR:[/rampart.error] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[rampart.info][ℹ] INFO:[/rampart.info] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings (objects with ``severity``, ``title`` and
        ``description``) with severity colouring.
        """
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev_name = finding.severity.value
            sev_style = SEVERITY_STYLES.get(sev_name, "")
            tbl.add_row(
                str(idx),
                f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name,
                finding.title,
                finding.description,
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)
