from datetime import date
from typing import Iterable


def fmt_date(value: date, date_format: str = "%d/%m/%Y") -> str:
    """
    Canonical date formatter for ALL summaries.
    """
    return value.strftime(date_format)


def fmt_period(
    start: date,
    end: date,
    date_format: str = "%d/%m/%Y",
    separator: str = "to",
) -> str:
    return f"{fmt_date(start, date_format)} {separator} {fmt_date(end, date_format)}"


def fmt_list(values: Iterable[str]) -> str:
    return ", ".join(values)


def fmt_labelled(label: str, value: str) -> str:
    return f"{label}: {value}"
