"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import streamlit as st
import altair as alt

from src.application.use_cases.generate_summary import (
    GenerateSummaryUseCase,
    Summary,
)
from src.application.use_cases.summary_requests import parse_summary_request
from src.domain.constants import CHART_TYPES
from src.domain.errors import InvalidRequestError
from src.domain.models import Category, PriorityAmount
from src.domain.services.chart_projection import priority_label, project
from src.infrastructure.container import build_record_store
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.plotly_renderer import PlotlyChartRenderer


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair needs.

    Returns:
        Tuple of (ok, error message).
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


def _fetch_categories() -> Sequence[Category]:
    """Fetch categories from the configured record store."""
    return build_record_store().fetch_categories()


@st.cache_data(show_spinner=False)
def _load_categories() -> Sequence[Category]:
    """Cached wrapper around _fetch_categories for Streamlit sessions."""
    return _fetch_categories()


def _fetch_summary(
    start_date: date,
    end_date: date,
    exclude_category_ids: tuple[int, ...],
) -> Summary:
    """Compute the summary from the configured record store."""
    use_case = GenerateSummaryUseCase(record_store=build_record_store())
    return use_case.execute(
        start_date=start_date,
        end_date=end_date,
        exclude_category_ids=exclude_category_ids,
    )


@st.cache_data(show_spinner=False)
def _load_summary(
    start_date: date,
    end_date: date,
    exclude_category_ids: tuple[int, ...],
    schema_version: int = 1,
) -> Summary:
    """Cached wrapper around _fetch_summary."""
    _ = schema_version
    return _fetch_summary(start_date, end_date, exclude_category_ids)


def _format_amount(value: int) -> str:
    """Format amounts in the smallest currency unit for display."""
    return f"{value:,}"


def _get_period_start(period: str, today: date) -> date:
    """Return the start date for the selected period."""
    if period == "YTD":
        return date(today.year, 1, 1)
    if period == "QTD":
        quarter = (today.month - 1) // 3
        start_month = quarter * 3 + 1
        return date(today.year, start_month, 1)
    return date(today.year, today.month, 1)


def _prepare_priority_chart_data(
    priorities: Sequence[PriorityAmount],
) -> list[dict[str, str | int]]:
    """Prepare donut chart data for priority levels.

    Args:
        priorities: Ordered priority amounts from the summary.

    Returns:
        Altair-ready rows with labels and shares.
    """
    total_amount = sum(item.amount for item in priorities)
    data: list[dict[str, str | int]] = []
    for item in priorities:
        share = (item.amount / total_amount) * 100 if total_amount else 0
        data.append(
            {
                "priority": priority_label(item.level),
                "amount": item.amount,
                "amount_label": _format_amount(item.amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_priority_chart(
    priorities: Sequence[PriorityAmount],
    chart_size: int = 300,
) -> None:
    """Render a donut chart of expense amounts by priority level."""
    st.subheader("Expenses by priority")
    if not priorities:
        st.info("No expenses in the selected period.")
        return
    data = _prepare_priority_chart_data(priorities)
    hover = alt.selection_point(
        name="hover",
        fields=["priority"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "priority:N",
            scale=alt.Scale(range=["#2e7d32", "#f4a261", "#e76f51"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.4)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("priority:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _render_summary_chart(
    summary: Summary,
    chart_type: str,
    sankey_group_by: str,
) -> None:
    """Render the Plotly chart of the selected type."""
    renderer = PlotlyChartRenderer(sankey_group_by=sankey_group_by)
    figure = renderer.build_figure(project(summary, chart_type))
    st.plotly_chart(figure, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Expense Summary", layout="wide")
    st.title("Expense Summary")

    today = date.today()
    period = st.sidebar.selectbox("Period", ["MTD", "QTD", "YTD", "Custom"])
    if period == "Custom":
        start_date = st.sidebar.date_input("Start date", value=today)
        end_date = st.sidebar.date_input("End date", value=today)
    else:
        start_date = _get_period_start(period, today)
        end_date = today

    categories = _load_categories()
    name_by_id = {category.id: category.name for category in categories}
    excluded = st.sidebar.multiselect(
        "Exclude categories",
        options=sorted(name_by_id),
        format_func=lambda category_id: name_by_id[category_id],
    )
    chart_type = st.sidebar.selectbox("Chart", list(CHART_TYPES))
    sankey_group_by = st.sidebar.radio(
        "Sankey grouping",
        ["category", "priority"],
        horizontal=True,
    )

    try:
        request = parse_summary_request(
            {
                "startDate": start_date,
                "endDate": end_date,
                "excludeCategoryIds": list(excluded),
            }
        )
    except InvalidRequestError as exc:
        st.error(str(exc))
        return

    get_usage_logger().info(
        f"dashboard start={request.start_date} end={request.end_date} "
        f"chart={chart_type}"
    )
    summary = _load_summary(
        request.start_date,
        request.end_date,
        request.exclude_category_ids,
        schema_version=1,
    )

    expense_col, income_col, net_col = st.columns(3)
    expense_col.metric("Expenses", _format_amount(summary.expense.amount))
    income_col.metric("Income", _format_amount(summary.income.amount))
    net_col.metric(
        "Net",
        _format_amount(summary.income.amount - summary.expense.amount),
    )

    chart_col, priority_col = st.columns([2, 1])
    with chart_col:
        _render_summary_chart(summary, chart_type, sankey_group_by)
    with priority_col:
        ok, message = _check_altair_dependencies()
        if ok:
            _render_priority_chart(summary.expense.group_summary.priorities)
        else:
            st.warning(message)


if __name__ == "__main__":  # pragma: no cover
    main()
