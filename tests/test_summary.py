import io
from datetime import date

from salesreport.config.loader import load_config
from salesreport.reporting.summary import print_summary, summary_lines


def test_monthly_summary_lines(monthly_builder):
    lines = summary_lines(monthly_builder.build())

    assert lines == [
        "=== Generating report: Vendas Mensais ===",
        "Format: PDF",
        "Period: 01/01/2024 to 31/01/2024",
        "Header: Relatório de Vendas",
        "Chart: Bar",
        "Columns: Produto, Quantidade, Valor",
        "Filters: Status=Ativo",
        "Grouped by: Categoria",
        "Sorted by: Valor",
        "Totals: Yes",
        "Page: A4 / Portrait",
        "Page numbers: Yes",
        "Footer: Confidencial",
        "Report generated successfully!",
    ]


def test_disabled_options_are_omitted(minimal_builder):
    lines = summary_lines(minimal_builder.build())
    text = "\n".join(lines)

    assert "Columns: Produto" in text
    for label in ("Header", "Footer", "Chart", "Filters", "Grouped by",
                  "Sorted by", "Totals", "Summary", "Logo", "Watermark",
                  "Page numbers"):
        assert f"{label}:" not in text


def test_summary_flag_and_branding_rendered(minimal_builder):
    report = (
        minimal_builder
        .include_summary()
        .with_company_logo("logo.png")
        .with_watermark("Rascunho")
        .build()
    )
    lines = summary_lines(report)

    assert "Summary: Yes" in lines
    assert "Logo: logo.png" in lines
    assert "Watermark: Rascunho" in lines


def test_blank_page_size_omits_page_line(minimal_builder):
    lines = summary_lines(minimal_builder.page("", "Landscape").build())
    assert not any(line.startswith("Page:") for line in lines)


def test_labels_and_date_format_from_settings(minimal_builder, tmp_path):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(
        "summary:\n"
        "  date_format: '%Y-%m-%d'\n"
        "  labels:\n"
        "    format: Formato\n"
        "    period: Período\n"
        "    period_separator: a\n",
        encoding="utf-8",
    )
    settings = load_config(str(settings_path))

    lines = summary_lines(minimal_builder.build(), settings)

    assert "Formato: PDF" in lines
    assert "Período: 2024-01-01 a 2024-01-31" in lines
    # labels not overridden keep their defaults
    assert "Columns: Produto" in lines


def test_print_summary_writes_to_stream(minimal_builder):
    stream = io.StringIO()
    report = minimal_builder.with_period(date(2024, 3, 1), date(2024, 3, 31)).build()

    print_summary(report, stream=stream)

    output = stream.getvalue()
    assert output.startswith("\n=== Generating report: Vendas Mensais ===\n")
    assert "Period: 01/03/2024 to 31/03/2024\n" in output
    assert output.endswith("Report generated successfully!\n")
