"""
Report Summary Renderer
-----------------------
Turns a finished ReportConfig into a line-oriented text summary.

Rules:
- One labelled line per populated / enabled option
- Disabled or empty optional fields produce no line
- No validation: the ReportConfig is already valid
"""

import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from salesreport.config.defaults import DEFAULT_CONFIG
from salesreport.core.report_config import ReportConfig
from salesreport.reporting.formatters import fmt_labelled, fmt_list, fmt_period

logger = logging.getLogger(__name__)


def summary_lines(
    report: ReportConfig,
    settings: Optional[Dict[str, Any]] = None,
) -> List[str]:
    summary_cfg = (settings or DEFAULT_CONFIG)["summary"]
    labels = summary_cfg["labels"]
    date_format = summary_cfg["date_format"]

    lines = [
        f"=== {labels['banner']}: {report.title} ===",
        fmt_labelled(labels["format"], report.format),
        fmt_labelled(
            labels["period"],
            fmt_period(
                report.start_date,
                report.end_date,
                date_format,
                labels["period_separator"],
            ),
        ),
    ]

    if report.include_header:
        lines.append(fmt_labelled(labels["header"], report.header_text))

    if report.company_logo.strip():
        lines.append(fmt_labelled(labels["logo"], report.company_logo))

    if report.include_charts:
        lines.append(fmt_labelled(labels["charts"], report.chart_type))

    lines.append(fmt_labelled(labels["columns"], fmt_list(report.columns)))

    if report.filters:
        lines.append(fmt_labelled(labels["filters"], fmt_list(report.filters)))

    if report.group_by.strip():
        lines.append(fmt_labelled(labels["group_by"], report.group_by))

    if report.sort_by.strip():
        lines.append(fmt_labelled(labels["sort_by"], report.sort_by))

    if report.include_totals:
        lines.append(fmt_labelled(labels["totals"], labels["enabled"]))

    if report.include_summary:
        lines.append(fmt_labelled(labels["summary"], labels["enabled"]))

    if report.page_size.strip():
        lines.append(
            fmt_labelled(labels["page"], f"{report.page_size} / {report.orientation}")
        )

    if report.include_page_numbers:
        lines.append(fmt_labelled(labels["page_numbers"], labels["enabled"]))

    if report.watermark.strip():
        lines.append(fmt_labelled(labels["watermark"], report.watermark))

    if report.include_footer:
        lines.append(fmt_labelled(labels["footer"], report.footer_text))

    lines.append(labels["done"])
    return lines


def print_summary(
    report: ReportConfig,
    settings: Optional[Dict[str, Any]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Write the summary of ``report`` to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    lines = summary_lines(report, settings)

    stream.write("\n")
    for line in lines:
        stream.write(line + "\n")

    logger.debug("Rendered summary for '%s' (%d lines)", report.title, len(lines))
