"""Projection of a summary into chart payloads.

Payloads are plain values: labels, values and index-based links. Rendering
technology is owned by the chart renderer adapter.

Node keys are positional and prefixed by kind, since names are not unique
(two parents may both be called "Misc"). Names are only labels:
    ``P:<i>`` parent category, ``C:<i>:<j>`` category ``j`` of parent ``i``,
    ``L:<level>`` priority level, ``W:<k>`` wallet, plus the synthetic
    ``E:EXPENSES`` and ``I:INCOME`` nodes.
"""

from src.domain.constants import (
    EXPENSE_NODE_LABEL,
    INCOME_NODE_LABEL,
    PRIORITY_LABELS,
)
from src.domain.errors import UnsupportedChartTypeError
from src.domain.models import (
    BarPayload,
    BarPoint,
    BarSeries,
    ChartPayload,
    SankeyLink,
    SankeyPayload,
    Summary,
    SunburstNode,
    SunburstPayload,
    SunburstTree,
)

PARENT_PREFIX = "P:"
CATEGORY_PREFIX = "C:"
LEVEL_PREFIX = "L:"
WALLET_PREFIX = "W:"

EXPENSE_KEY = "E:EXPENSES"
INCOME_KEY = "I:INCOME"

EXPENSE_BAR_SERIES = "Expenses by parent category"
INCOME_BAR_SERIES = "Income by wallet"
EXPENSE_TREE = "Expenses"
INCOME_TREE = "Income"


def priority_label(level: int) -> str:
    """Return the display label of a priority level."""
    return PRIORITY_LABELS.get(level, f"Priority {level}")


def project(summary: Summary, chart_type: str) -> ChartPayload:
    """Project a summary into the payload of the requested chart type.

    Args:
        summary: Summary produced by ``compute_summary``.
        chart_type: One of ``bar``, ``sunburst`` or ``sankey``.

    Returns:
        ChartPayload: Payload for the chart renderer.

    Raises:
        UnsupportedChartTypeError: If ``chart_type`` is not recognized.
    """
    builder = (
        _BUILDERS.get(chart_type) if isinstance(chart_type, str) else None
    )
    if builder is None:
        raise UnsupportedChartTypeError(chart_type)
    return builder(summary)


def build_bar_payload(summary: Summary) -> BarPayload:
    """Return expense-by-parent and income-by-wallet bar series."""
    expense_points = tuple(
        BarPoint(label=parent.name, value=parent.amount)
        for parent in summary.expense.group_summary.parent_categories
    )
    income_points = tuple(
        BarPoint(label=wallet.name, value=wallet.amount)
        for wallet in summary.income.group_summary.wallets
    )
    return BarPayload(
        series=(
            BarSeries(name=EXPENSE_BAR_SERIES, points=expense_points),
            BarSeries(name=INCOME_BAR_SERIES, points=income_points),
        )
    )


def build_sunburst_payload(summary: Summary) -> SunburstPayload:
    """Return a parent->category expense tree and a flat wallet tree."""
    expense_nodes: list[SunburstNode] = []
    parents = summary.expense.group_summary.parent_categories
    for i, parent in enumerate(parents):
        parent_key = f"{PARENT_PREFIX}{i}"
        expense_nodes.append(
            SunburstNode(
                key=parent_key,
                label=parent.name,
                parent_key="",
                value=parent.amount,
            )
        )
        for j, category in enumerate(parent.categories):
            expense_nodes.append(
                SunburstNode(
                    key=f"{CATEGORY_PREFIX}{i}:{j}",
                    label=category.name,
                    parent_key=parent_key,
                    value=category.amount,
                )
            )
    income_nodes = tuple(
        SunburstNode(
            key=f"{WALLET_PREFIX}{k}",
            label=wallet.name,
            parent_key="",
            value=wallet.amount,
        )
        for k, wallet in enumerate(summary.income.group_summary.wallets)
    )
    return SunburstPayload(
        trees=(
            SunburstTree(name=EXPENSE_TREE, nodes=tuple(expense_nodes)),
            SunburstTree(name=INCOME_TREE, nodes=income_nodes),
        )
    )


def _add_node(
    *,
    node_keys: list[str],
    node_labels: list[str],
    index_by_key: dict[str, int],
    key: str,
    label: str,
) -> int:
    if key in index_by_key:
        return index_by_key[key]
    node_keys.append(key)
    node_labels.append(label)
    index_by_key[key] = len(node_keys) - 1
    return index_by_key[key]


def build_sankey_payload(summary: Summary) -> SankeyPayload:
    """Return Sankey nodes with category, wallet and priority link sets."""
    node_keys: list[str] = []
    node_labels: list[str] = []
    index_by_key: dict[str, int] = {}
    links: list[SankeyLink] = []
    priority_links: list[SankeyLink] = []

    parents = summary.expense.group_summary.parent_categories
    for i, parent in enumerate(parents):
        source = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            index_by_key=index_by_key,
            key=f"{PARENT_PREFIX}{i}",
            label=parent.name,
        )
        for j, category in enumerate(parent.categories):
            target = _add_node(
                node_keys=node_keys,
                node_labels=node_labels,
                index_by_key=index_by_key,
                key=f"{CATEGORY_PREFIX}{i}:{j}",
                label=category.name,
            )
            links.append(
                SankeyLink(source=source, target=target, value=category.amount)
            )

    priorities = summary.expense.group_summary.priorities
    if priorities:
        expense_index = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            index_by_key=index_by_key,
            key=EXPENSE_KEY,
            label=EXPENSE_NODE_LABEL,
        )
        for priority in priorities:
            target = _add_node(
                node_keys=node_keys,
                node_labels=node_labels,
                index_by_key=index_by_key,
                key=f"{LEVEL_PREFIX}{priority.level}",
                label=priority_label(priority.level),
            )
            priority_links.append(
                SankeyLink(
                    source=expense_index,
                    target=target,
                    value=priority.amount,
                )
            )

    wallets = summary.income.group_summary.wallets
    if wallets:
        income_index = _add_node(
            node_keys=node_keys,
            node_labels=node_labels,
            index_by_key=index_by_key,
            key=INCOME_KEY,
            label=INCOME_NODE_LABEL,
        )
        for k, wallet in enumerate(wallets):
            target = _add_node(
                node_keys=node_keys,
                node_labels=node_labels,
                index_by_key=index_by_key,
                key=f"{WALLET_PREFIX}{k}",
                label=wallet.name,
            )
            links.append(
                SankeyLink(
                    source=income_index,
                    target=target,
                    value=wallet.amount,
                )
            )

    return SankeyPayload(
        node_labels=tuple(node_labels),
        node_keys=tuple(node_keys),
        links=tuple(links),
        priority_links=tuple(priority_links),
    )


_BUILDERS = {
    "bar": build_bar_payload,
    "sunburst": build_sunburst_payload,
    "sankey": build_sankey_payload,
}


__all__ = [
    "project",
    "priority_label",
    "build_bar_payload",
    "build_sunburst_payload",
    "build_sankey_payload",
]
