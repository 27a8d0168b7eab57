from .builder import ReportConfigBuilder
from .errors import ConfigValidationError
from .presets import list_presets, register_preset
from .report_config import ReportConfig

__all__ = [
    "ReportConfig",
    "ReportConfigBuilder",
    "ConfigValidationError",
    "register_preset",
    "list_presets",
]
