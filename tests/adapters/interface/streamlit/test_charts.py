"""Tests for the donut chart presentation helpers."""

from decimal import Decimal

import altair as alt

from src.adapters.interface.streamlit.charts import (
    OTHER_LABEL,
    build_donut_chart,
    format_currency,
    prepare_donut_data,
)
from src.domain.models.ledger import AccountGroup, AccountTotal


def _total(name: str, amount: str) -> AccountTotal:
    return AccountTotal(
        account_id=name.lower(),
        description=name,
        group=AccountGroup.EXPENSE,
        total=Decimal(amount),
    )


def test_format_currency_uses_symbol_and_thousands_separator():
    assert format_currency(Decimal("1234.5"), "BRL") == "R$ 1,234.50"
    assert format_currency(Decimal("-3"), "USD") == "$ -3.00"
    assert format_currency(Decimal("7"), "CHF") == "CHF 7.00"


def test_prepare_donut_data_groups_small_accounts_into_other():
    items = [
        _total("Rent", "50"),
        _total("Balls", "30"),
        _total("Water", "15"),
        _total("Cones", "5"),
    ]

    data, total = prepare_donut_data(items, "BRL", max_categories=2)

    assert total == Decimal("100")
    assert [row["category"] for row in data] == ["Rent", "Balls", OTHER_LABEL]
    assert data[2]["amount"] == 20.0
    assert data[0]["amount_label"] == "R$ 50.00"
    assert data[0]["share_label"] == "50.0%"


def test_prepare_donut_data_handles_empty_items():
    data, total = prepare_donut_data([], "BRL")

    assert data == []
    assert total == Decimal("0")


def test_build_donut_chart_returns_layered_chart():
    data, _ = prepare_donut_data([_total("Rent", "10")], "EUR")

    chart = build_donut_chart(data, chart_size=200)

    assert isinstance(chart, alt.LayerChart)
    assert chart.width == 200
    assert len(chart.layer) == 2
