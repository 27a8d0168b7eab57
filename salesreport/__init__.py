"""
Sales Report Builder

Fluent, validated construction of immutable sales report
configurations, plus a plain-text summary renderer.
"""

from .__version__ import __version__

from .core.builder import ReportConfigBuilder
from .core.errors import ConfigValidationError
from .core.presets import list_presets, register_preset
from .core.report_config import ReportConfig
from .reporting.summary import print_summary, summary_lines

__all__ = [
    "__version__",
    "ReportConfig",
    "ReportConfigBuilder",
    "ConfigValidationError",
    "register_preset",
    "list_presets",
    "print_summary",
    "summary_lines",
]
