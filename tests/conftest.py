from datetime import date

import pytest

from salesreport.core.builder import ReportConfigBuilder


@pytest.fixture
def minimal_builder():
    """
    Builder holding only the required fields.
    build() must succeed on it.
    """
    return (
        ReportConfigBuilder()
        .with_title("Vendas Mensais")
        .with_format("PDF")
        .with_period(date(2024, 1, 1), date(2024, 1, 31))
        .add_column("Produto")
    )


@pytest.fixture
def monthly_builder():
    """
    The full monthly sales scenario.
    """
    return (
        ReportConfigBuilder()
        .with_title("Vendas Mensais")
        .with_format("PDF")
        .with_period(date(2024, 1, 1), date(2024, 1, 31))
        .include_header("Relatório de Vendas")
        .include_footer("Confidencial")
        .add_columns(["Produto", "Quantidade", "Valor"])
        .add_filter("Status=Ativo")
        .group_by("Categoria")
        .sort_by("Valor")
        .include_charts("Bar")
        .include_totals()
        .page("A4", "Portrait")
        .include_page_numbers()
    )
