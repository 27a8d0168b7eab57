"""
ReportConfigBuilder
-------------------
Fluent accumulator for ReportConfig.

Rules:
- Every call mutates the builder and returns it (chaining)
- No call validates; build() is the single validation point
- build() copies the sequences, so later calls never reach
  an already built ReportConfig
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from salesreport.core.errors import ConfigValidationError
from salesreport.core.presets import PRESET_CONFIDENTIAL_PDF, get_preset
from salesreport.core.report_config import ReportConfig
from salesreport.core.rules import first_violation, is_blank


class ReportConfigBuilder:
    """
    Builder for ReportConfig objects.

    Examples
    --------
    >>> report = (ReportConfigBuilder()
    ...     .with_title("Vendas Mensais")
    ...     .with_format("PDF")
    ...     .with_period(date(2024, 1, 1), date(2024, 1, 31))
    ...     .add_columns(["Produto", "Quantidade", "Valor"])
    ...     .build())
    """

    def __init__(self) -> None:
        # required
        self._title: Optional[str] = None
        self._format: Optional[str] = None
        self._start_date: Optional[date] = None
        self._end_date: Optional[date] = None

        # optional, with defaults
        self._include_header = False
        self._header_text = ""
        self._include_footer = False
        self._footer_text = ""

        self._include_charts = False
        self._chart_type = ""
        self._include_summary = False

        self._columns: List[str] = []
        self._filters: List[str] = []
        self._sort_by = ""
        self._group_by = ""
        self._include_totals = False

        self._orientation = "Portrait"
        self._page_size = "A4"
        self._include_page_numbers = False

        self._company_logo = ""
        self._watermark = ""

    # -------------------------------------------------
    # REQUIRED FIELDS
    # -------------------------------------------------
    def with_title(self, title: Optional[str]) -> "ReportConfigBuilder":
        self._title = title
        return self

    def with_format(self, fmt: Optional[str]) -> "ReportConfigBuilder":
        self._format = fmt
        return self

    def with_period(self, start: date, end: date) -> "ReportConfigBuilder":
        self._start_date = start
        self._end_date = end
        return self

    # -------------------------------------------------
    # SECTIONS WITH PAYLOAD
    # -------------------------------------------------
    def include_header(self, header_text: Optional[str]) -> "ReportConfigBuilder":
        self._include_header = True
        self._header_text = header_text or ""
        return self

    def include_footer(self, footer_text: Optional[str]) -> "ReportConfigBuilder":
        self._include_footer = True
        self._footer_text = footer_text or ""
        return self

    def include_charts(self, chart_type: Optional[str]) -> "ReportConfigBuilder":
        self._include_charts = True
        self._chart_type = chart_type or ""
        return self

    # -------------------------------------------------
    # FLAGS
    # -------------------------------------------------
    def include_summary(self) -> "ReportConfigBuilder":
        self._include_summary = True
        return self

    def include_totals(self) -> "ReportConfigBuilder":
        self._include_totals = True
        return self

    def include_page_numbers(self) -> "ReportConfigBuilder":
        self._include_page_numbers = True
        return self

    # -------------------------------------------------
    # COLUMNS / FILTERS / ORDERING
    # -------------------------------------------------
    def add_column(self, column: Optional[str]) -> "ReportConfigBuilder":
        if not is_blank(column):
            self._columns.append(column)
        return self

    def add_columns(self, columns: Optional[Iterable[str]]) -> "ReportConfigBuilder":
        for column in columns or ():
            self.add_column(column)
        return self

    def add_filter(self, expression: Optional[str]) -> "ReportConfigBuilder":
        if not is_blank(expression):
            self._filters.append(expression)
        return self

    def add_filters(self, expressions: Optional[Iterable[str]]) -> "ReportConfigBuilder":
        for expression in expressions or ():
            self.add_filter(expression)
        return self

    def sort_by(self, field: Optional[str]) -> "ReportConfigBuilder":
        self._sort_by = field or ""
        return self

    def group_by(self, field: Optional[str]) -> "ReportConfigBuilder":
        self._group_by = field or ""
        return self

    # -------------------------------------------------
    # LAYOUT / BRANDING
    # -------------------------------------------------
    def page(
        self,
        page_size: Optional[str],
        orientation: Optional[str] = "Portrait",
    ) -> "ReportConfigBuilder":
        self._page_size = "A4" if page_size is None else page_size
        self._orientation = "Portrait" if orientation is None else orientation
        return self

    def with_company_logo(self, logo_path: Optional[str]) -> "ReportConfigBuilder":
        self._company_logo = logo_path or ""
        return self

    def with_watermark(self, watermark: Optional[str]) -> "ReportConfigBuilder":
        self._watermark = watermark or ""
        return self

    # -------------------------------------------------
    # PRESETS
    # -------------------------------------------------
    def use_preset(self, name: str) -> "ReportConfigBuilder":
        """Apply a registered preset. Raises KeyError for unknown names."""
        return get_preset(name)(self)

    def use_confidential_pdf_template(self) -> "ReportConfigBuilder":
        return self.use_preset(PRESET_CONFIDENTIAL_PDF)

    # -------------------------------------------------
    # BUILD
    # -------------------------------------------------
    def _snapshot(self) -> Dict[str, Any]:
        return {
            "title": self._title,
            "format": self._format,
            "start_date": self._start_date,
            "end_date": self._end_date,
            "include_header": self._include_header,
            "header_text": self._header_text,
            "include_footer": self._include_footer,
            "footer_text": self._footer_text,
            "include_charts": self._include_charts,
            "chart_type": self._chart_type,
            "include_summary": self._include_summary,
            "company_logo": self._company_logo,
            "watermark": self._watermark,
            "page_size": self._page_size,
            "orientation": self._orientation,
            "include_page_numbers": self._include_page_numbers,
            "columns": tuple(self._columns),
            "filters": tuple(self._filters),
            "sort_by": self._sort_by,
            "group_by": self._group_by,
            "include_totals": self._include_totals,
        }

    def build(self) -> ReportConfig:
        """
        Validate the accumulated state and return a new ReportConfig.

        Raises ConfigValidationError on the first violated rule.
        The builder stays usable afterwards; each call yields a
        fresh, independent ReportConfig.
        """
        state = self._snapshot()

        violation = first_violation(state)
        if violation:
            raise ConfigValidationError(violation.rule, violation.message)

        return ReportConfig(**state)
