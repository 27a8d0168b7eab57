"""
Report Validation Rules
-----------------------
Each rule inspects a snapshot of the builder state (the ReportConfig
field values, keyed by field name) and returns a Violation or None.

Rules run in VALIDATION_RULES order: required fields first,
then coherence of the optional sections.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Callable, Dict, Optional, Tuple

from salesreport.core.errors import (
    CHART_TYPE_REQUIRED,
    COLUMNS_REQUIRED,
    FOOTER_TEXT_REQUIRED,
    FORMAT_REQUIRED,
    HEADER_TEXT_REQUIRED,
    PERIOD_ORDER,
    PERIOD_REQUIRED,
    TITLE_REQUIRED,
)


@dataclass(frozen=True)
class Violation:
    rule: str
    message: str


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _is_aware(value: date) -> bool:
    return (
        isinstance(value, datetime)
        and value.tzinfo is not None
        and value.utcoffset() is not None
    )


def _as_datetime(value: date, tzinfo=None) -> datetime:
    """Plain dates become midnight, in ``tzinfo`` when given."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=tzinfo)


# -------------------------------------------------
# REQUIRED FIELDS
# -------------------------------------------------
def check_title(state: Dict[str, Any]) -> Optional[Violation]:
    if is_blank(state["title"]):
        return Violation(TITLE_REQUIRED, "Title is required (use with_title).")
    return None


def check_format(state: Dict[str, Any]) -> Optional[Violation]:
    if is_blank(state["format"]):
        return Violation(
            FORMAT_REQUIRED,
            "Format is required (use with_format or a preset).",
        )
    return None


def check_period(state: Dict[str, Any]) -> Optional[Violation]:
    if state["start_date"] is None or state["end_date"] is None:
        return Violation(PERIOD_REQUIRED, "Period is required (use with_period).")
    return None


def check_period_order(state: Dict[str, Any]) -> Optional[Violation]:
    start, end = state["start_date"], state["end_date"]

    # a plain date borrows the timezone of the other end
    start_dt = _as_datetime(start, end.tzinfo if _is_aware(end) else None)
    end_dt = _as_datetime(end, start.tzinfo if _is_aware(start) else None)

    if _is_aware(start_dt) != _is_aware(end_dt):
        return Violation(
            PERIOD_ORDER,
            "Start and end dates must both be timezone-aware or both naive.",
        )

    if start_dt > end_dt:
        return Violation(PERIOD_ORDER, "Start date cannot be after end date.")
    return None


def check_columns(state: Dict[str, Any]) -> Optional[Violation]:
    if not state["columns"]:
        return Violation(
            COLUMNS_REQUIRED,
            "At least one column is required (use add_column/add_columns).",
        )
    return None


# -------------------------------------------------
# OPTIONAL SECTION COHERENCE
# -------------------------------------------------
def check_header_text(state: Dict[str, Any]) -> Optional[Violation]:
    if state["include_header"] and is_blank(state["header_text"]):
        return Violation(
            HEADER_TEXT_REQUIRED,
            "Header text is required when the header is included.",
        )
    return None


def check_footer_text(state: Dict[str, Any]) -> Optional[Violation]:
    if state["include_footer"] and is_blank(state["footer_text"]):
        return Violation(
            FOOTER_TEXT_REQUIRED,
            "Footer text is required when the footer is included.",
        )
    return None


def check_chart_type(state: Dict[str, Any]) -> Optional[Violation]:
    if state["include_charts"] and is_blank(state["chart_type"]):
        return Violation(
            CHART_TYPE_REQUIRED,
            "Chart type is required when charts are included.",
        )
    return None


# check_period_order assumes check_period already passed
VALIDATION_RULES: Tuple[Callable[[Dict[str, Any]], Optional[Violation]], ...] = (
    check_title,
    check_format,
    check_period,
    check_period_order,
    check_columns,
    check_header_text,
    check_footer_text,
    check_chart_type,
)


def first_violation(state: Dict[str, Any]) -> Optional[Violation]:
    for rule in VALIDATION_RULES:
        violation = rule(state)
        if violation:
            return violation
    return None
