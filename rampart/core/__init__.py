"""
Rampart Core Module
====================

Contains the engine facade and the data models for assessment results.
"""

from rampart.core.engine import RampartEngine
from rampart.core.models import AssessmentResult, Family

__all__ = [
    "AssessmentResult",
    "Family",
    "RampartEngine",
]
