"""Plotly chart renderer producing standalone HTML documents."""

from typing import Literal

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from src.domain.errors import UnsupportedChartTypeError
from src.domain.models import (
    BarPayload,
    ChartPayload,
    SankeyPayload,
    SunburstPayload,
)


class PlotlyChartRenderer:
    """ChartRendererPort implementation backed by Plotly figures."""

    def __init__(
        self,
        include_plotlyjs: str = "cdn",
        sankey_group_by: Literal["category", "priority"] = "category",
        height: int = 680,
    ) -> None:
        """Initialize the renderer.

        Args:
            include_plotlyjs: How plotly.js is embedded (cdn or inline).
            sankey_group_by: Sankey edge set to draw.
            height: Figure height in pixels.
        """
        self._include_plotlyjs = (
            True if include_plotlyjs == "inline" else include_plotlyjs
        )
        self._sankey_group_by = sankey_group_by
        self._height = height

    def render(self, payload: ChartPayload, title: str | None = None) -> str:
        """Return a full HTML document for the payload."""
        fig = self.build_figure(payload)
        if title:
            fig.update_layout(title=dict(text=title))
        return fig.to_html(
            full_html=True,
            include_plotlyjs=self._include_plotlyjs,
        )

    def build_figure(self, payload: ChartPayload) -> go.Figure:
        """Build the Plotly figure matching the payload type.

        Raises:
            UnsupportedChartTypeError: If the payload type is unknown.
        """
        if isinstance(payload, BarPayload):
            fig = self._build_bar(payload)
        elif isinstance(payload, SunburstPayload):
            fig = self._build_sunburst(payload)
        elif isinstance(payload, SankeyPayload):
            fig = self._build_sankey(payload)
        else:
            raise UnsupportedChartTypeError(type(payload).__name__)
        fig.update_layout(
            margin=dict(l=8, r=8, t=48, b=8),
            height=self._height,
        )
        return fig

    @staticmethod
    def _build_bar(payload: BarPayload) -> go.Figure:
        fig = make_subplots(
            rows=1,
            cols=len(payload.series),
            subplot_titles=[series.name for series in payload.series],
        )
        for col, series in enumerate(payload.series, start=1):
            fig.add_trace(
                go.Bar(
                    x=[point.label for point in series.points],
                    y=[point.value for point in series.points],
                    name=series.name,
                ),
                row=1,
                col=col,
            )
        fig.update_layout(showlegend=False)
        return fig

    @staticmethod
    def _build_sunburst(payload: SunburstPayload) -> go.Figure:
        fig = make_subplots(
            rows=1,
            cols=len(payload.trees),
            specs=[[{"type": "domain"} for _ in payload.trees]],
            subplot_titles=[tree.name for tree in payload.trees],
        )
        for col, tree in enumerate(payload.trees, start=1):
            fig.add_trace(
                go.Sunburst(
                    ids=[node.key for node in tree.nodes],
                    labels=[node.label for node in tree.nodes],
                    parents=[node.parent_key for node in tree.nodes],
                    values=[node.value for node in tree.nodes],
                    branchvalues="total",
                    sort=False,
                    name=tree.name,
                ),
                row=1,
                col=col,
            )
        return fig

    def _build_sankey(self, payload: SankeyPayload) -> go.Figure:
        links = (
            payload.priority_links
            if self._sankey_group_by == "priority"
            else payload.links
        )
        return go.Figure(
            data=[
                go.Sankey(
                    arrangement="snap",
                    node=dict(
                        pad=10,
                        thickness=12,
                        label=list(payload.node_labels),
                        line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                    ),
                    link=dict(
                        source=[link.source for link in links],
                        target=[link.target for link in links],
                        value=[link.value for link in links],
                    ),
                    textfont=dict(size=12),
                )
            ]
        )


__all__ = ["PlotlyChartRenderer"]
