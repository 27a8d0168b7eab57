"""
Validation errors raised by ReportConfigBuilder.build().

Every rule has a stable identifier so callers (and tests) can tell
violations apart without matching on message text.
"""

TITLE_REQUIRED = "title_required"
FORMAT_REQUIRED = "format_required"
PERIOD_REQUIRED = "period_required"
PERIOD_ORDER = "period_order"
COLUMNS_REQUIRED = "columns_required"
HEADER_TEXT_REQUIRED = "header_text_required"
FOOTER_TEXT_REQUIRED = "footer_text_required"
CHART_TYPE_REQUIRED = "chart_type_required"


class ConfigValidationError(ValueError):
    """Raised when the accumulated builder state violates a rule."""

    def __init__(self, rule: str, message: str):
        super().__init__(message)
        self.rule = rule
        self.message = message

    def __str__(self):
        return f"[{self.rule}] {self.message}"
