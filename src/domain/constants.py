"""Domain constants for summary computation."""

PRIORITY_LEVELS = (0, 1, 2)

PRIORITY_LABELS = {
    0: "Primary",
    1: "Secondary",
    2: "Tertiary",
}

CHART_TYPES = ("bar", "sunburst", "sankey")

EXPENSE_NODE_LABEL = "Expenses"
INCOME_NODE_LABEL = "Income"


__all__ = [
    "PRIORITY_LEVELS",
    "PRIORITY_LABELS",
    "CHART_TYPES",
    "EXPENSE_NODE_LABEL",
    "INCOME_NODE_LABEL",
]
