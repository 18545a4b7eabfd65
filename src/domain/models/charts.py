"""Chart payloads handed to the chart renderer."""

from dataclasses import dataclass
from typing import Literal, Union

ChartType = Literal["bar", "sunburst", "sankey"]


@dataclass(frozen=True)
class BarPoint:
    """Single bar of a series."""

    label: str
    value: int


@dataclass(frozen=True)
class BarSeries:
    """Category-style series of bars in display order."""

    name: str
    points: tuple[BarPoint, ...]


@dataclass(frozen=True)
class BarPayload:
    """Parallel bar series (expenses by parent category, income by wallet)."""

    series: tuple[BarSeries, ...]
    chart_type: ChartType = "bar"


@dataclass(frozen=True)
class SunburstNode:
    """Node of a sunburst tree.

    Attributes:
        key: Unique node key within its tree.
        label: Display label.
        parent_key: Key of the parent node, empty for roots.
        value: Node amount.
    """

    key: str
    label: str
    parent_key: str
    value: int


@dataclass(frozen=True)
class SunburstTree:
    """Flattened sunburst tree; siblings keep summary order."""

    name: str
    nodes: tuple[SunburstNode, ...]


@dataclass(frozen=True)
class SunburstPayload:
    """Expense and income sunburst trees."""

    trees: tuple[SunburstTree, ...]
    chart_type: ChartType = "sunburst"


@dataclass(frozen=True)
class SankeyLink:
    """Weighted Sankey edge between node indices."""

    source: int
    target: int
    value: int


@dataclass(frozen=True)
class SankeyPayload:
    """Sankey nodes and weighted links.

    ``links`` connects parent categories to categories and the income node
    to wallets; ``priority_links`` is the alternate edge set connecting the
    expense node to priority levels. The renderer decides which to draw.
    """

    node_labels: tuple[str, ...]
    node_keys: tuple[str, ...]
    links: tuple[SankeyLink, ...]
    priority_links: tuple[SankeyLink, ...]
    chart_type: ChartType = "sankey"


ChartPayload = Union[BarPayload, SunburstPayload, SankeyPayload]


__all__ = [
    "ChartType",
    "BarPoint",
    "BarSeries",
    "BarPayload",
    "SunburstNode",
    "SunburstTree",
    "SunburstPayload",
    "SankeyLink",
    "SankeyPayload",
    "ChartPayload",
]
