"""Rampart output formatters: Rich console and HTML/JSON reports."""

from rampart.output.console import RampartConsoleOutput
from rampart.output.report import RampartReportGenerator

__all__ = ["RampartConsoleOutput", "RampartReportGenerator"]
