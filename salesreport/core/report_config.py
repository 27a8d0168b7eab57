from dataclasses import dataclass
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class ReportConfig:
    """
    Finished sales report configuration.

    Rules:
    - Produced by ReportConfigBuilder.build() only
    - Never mutated after construction
    - columns / filters are tuples copied at construction time
    """

    # -----------------------------
    # IDENTITY (REQUIRED)
    # -----------------------------
    title: str
    format: str
    start_date: date
    end_date: date

    # -----------------------------
    # PRESENTATION
    # -----------------------------
    include_header: bool = False
    header_text: str = ""
    include_footer: bool = False
    footer_text: str = ""
    include_charts: bool = False
    chart_type: str = ""
    include_summary: bool = False
    company_logo: str = ""
    watermark: str = ""
    page_size: str = "A4"
    orientation: str = "Portrait"
    include_page_numbers: bool = False

    # -----------------------------
    # DATA SHAPE
    # -----------------------------
    columns: Tuple[str, ...] = ()
    filters: Tuple[str, ...] = ()
    sort_by: str = ""
    group_by: str = ""
    include_totals: bool = False

    def __post_init__(self):
        # frozen: bypass __setattr__ to freeze the sequences
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "filters", tuple(self.filters))
