import dataclasses
from datetime import date

import pytest

from salesreport.core.report_config import ReportConfig


def test_report_is_frozen(minimal_builder):
    report = minimal_builder.build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        report.title = "Changed"


def test_sequences_are_read_only(monthly_builder):
    report = monthly_builder.build()

    assert isinstance(report.columns, tuple)
    assert isinstance(report.filters, tuple)
    with pytest.raises(AttributeError):
        report.columns.append("Extra")


def test_sequences_are_copied_on_construction():
    columns = ["Produto"]
    report = ReportConfig(
        title="T",
        format="PDF",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 2),
        columns=columns,
    )

    columns.append("Valor")

    assert report.columns == ("Produto",)


def test_equal_builds_are_equal_and_hashable(monthly_builder):
    first = monthly_builder.build()
    second = monthly_builder.build()

    assert first == second
    assert hash(first) == hash(second)
