"""Application port for chart rendering."""

from typing import Protocol

from src.domain.models import ChartPayload


class ChartRendererPort(Protocol):
    """Port turning a chart payload into a presentable document."""

    def render(self, payload: ChartPayload, title: str | None = None) -> str:
        """Return an HTML document displaying the payload."""


__all__ = ["ChartRendererPort"]
