"""Account breakdown donut charts for the Streamlit UI.

``prepare_donut_data`` is a pure transformation from per-account totals to
Altair-ready rows (top N accounts plus an ``Other`` slice);
``build_donut_chart`` wraps the rows in a layered Altair chart. Rendering is
left to the page.
"""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt

from src.domain.models.ledger import AccountTotal


OTHER_LABEL = "Other"
CURRENCY_SYMBOLS = {"BRL": "R$", "EUR": "€", "USD": "$"}
DEFAULT_PALETTE = (
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
)


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    return f"{symbol} {value:,.2f}"


def prepare_donut_data(
    items: Sequence[AccountTotal],
    currency_code: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        items: Per-account totals of one group.
        currency_code: Currency used in the labels.
        max_categories: Maximum accounts to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(items, key=lambda item: item.total, reverse=True)
    slices = [(item.description, item.total) for item in sorted_items]
    top = slices[:max_categories]
    other_amount = sum(
        (amount for _, amount in slices[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top.append((OTHER_LABEL, other_amount))
    total_amount = sum((amount for _, amount in slices), start=Decimal("0"))

    data: list[dict[str, str | float]] = []
    for label, amount in top:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def build_donut_chart(
    data: list[dict[str, str | float]],
    chart_size: int = 300,
    legend_columns: int = 2,
    palette: Sequence[str] | None = None,
) -> alt.LayerChart:
    """Build a donut chart highlighting the hovered slice.

    Args:
        data: Rows produced by ``prepare_donut_data``.
        chart_size: Width/height for the chart canvas.
        legend_columns: Column count of the legend.
        palette: Optional color palette override.

    Returns:
        alt.LayerChart: Chart ready for ``st.altair_chart``.
    """
    legend = alt.Legend(
        orient="bottom",
        title=None,
        direction="horizontal",
        columns=legend_columns,
        labelLimit=180,
    )
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(palette or DEFAULT_PALETTE)),
            legend=legend,
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N", title="Account"),
            alt.Tooltip("amount_label:N", title="Amount"),
            alt.Tooltip("share_label:N", title="Share"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )


__all__ = [
    "OTHER_LABEL",
    "format_currency",
    "prepare_donut_data",
    "build_donut_chart",
]
