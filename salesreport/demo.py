"""
Demo scenarios for the sales report builder.

monthly   : complex report, every section spelled out
quarterly : required fields only plus charts / grouping
annual    : confidential PDF preset with overrides
"""

import logging
from datetime import date
from typing import Callable, Dict, Tuple

from dateutil.relativedelta import relativedelta

from salesreport.core.builder import ReportConfigBuilder
from salesreport.core.report_config import ReportConfig

logger = logging.getLogger(__name__)


def period_span(start: date, **delta) -> Tuple[date, date]:
    """Inclusive period starting at ``start`` and spanning ``delta``."""
    return start, start + relativedelta(**delta) - relativedelta(days=1)


def monthly_report(year: int) -> ReportConfig:
    start, end = period_span(date(year, 1, 1), months=1)
    return (
        ReportConfigBuilder()
        .with_title("Vendas Mensais")
        .with_format("PDF")
        .with_period(start, end)
        .include_header("Relatório de Vendas")
        .include_footer("Confidencial")
        .with_company_logo("logo.png")
        .with_watermark("Confidencial")
        .add_columns(["Produto", "Quantidade", "Valor"])
        .add_filter("Status=Ativo")
        .group_by("Categoria")
        .sort_by("Valor")
        .include_charts("Bar")
        .include_totals()
        .page("A4", "Portrait")
        .include_page_numbers()
        .build()
    )


def quarterly_report(year: int) -> ReportConfig:
    start, end = period_span(date(year, 1, 1), months=3)
    return (
        ReportConfigBuilder()
        .with_title("Relatório Trimestral")
        .with_format("Excel")
        .with_period(start, end)
        .add_columns(["Vendedor", "Região", "Total"])
        .include_charts("Line")
        .group_by("Região")
        .include_totals()
        .build()
    )


def annual_report(year: int) -> ReportConfig:
    start, end = period_span(date(year, 1, 1), years=1)
    return (
        ReportConfigBuilder()
        .with_title("Vendas Anuais")
        .use_confidential_pdf_template()
        .with_period(start, end)
        .add_columns(["Produto", "Quantidade", "Valor"])
        .include_charts("Pie")
        .include_totals()
        .page("A4", "Landscape")
        .build()
    )


SCENARIOS: Dict[str, Callable[[int], ReportConfig]] = {
    "monthly": monthly_report,
    "quarterly": quarterly_report,
    "annual": annual_report,
}


def build_scenario(name: str, year: int) -> ReportConfig:
    logger.info("Building scenario '%s' for %s", name, year)
    return SCENARIOS[name](year)
