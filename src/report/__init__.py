"""Report — console output for the compounding interval searches."""

from .config import AutoSplitScenario, PairPoolScenario, ReportConfig, SingleAssetScenario
from .console import format_report, main, run_report
from .log_setup import setup_logging

__all__ = [
    "AutoSplitScenario",
    "PairPoolScenario",
    "ReportConfig",
    "SingleAssetScenario",
    "format_report",
    "main",
    "run_report",
    "setup_logging",
]
