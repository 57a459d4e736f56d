"""
PassForge Output Module
========================

Console display and JSON report generation for PassForge results.
"""

from passforge.output.console import ForgeConsoleOutput
from passforge.output.report import ForgeReportGenerator

__all__ = [
    "ForgeConsoleOutput",
    "ForgeReportGenerator",
]
