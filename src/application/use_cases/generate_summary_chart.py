"""Use case to render the summary of a period as a chart."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.chart_renderer import ChartRendererPort
from src.application.use_cases.generate_summary import GenerateSummaryUseCase
from src.domain.constants import CHART_TYPES
from src.domain.errors import UnsupportedChartTypeError
from src.domain.services.chart_projection import project
from src.infrastructure.logging.logger import get_app_logger


class GenerateSummaryChartUseCase:
    """Project a summary into a chart payload and render it."""

    def __init__(
        self,
        summary_use_case: GenerateSummaryUseCase,
        renderer: ChartRendererPort,
        logger=None,
    ) -> None:
        self._summary_use_case = summary_use_case
        self._renderer = renderer
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date,
        end_date: date,
        chart_type: str,
        exclude_category_ids: Iterable[int] | None = None,
    ) -> str:
        """Return the rendered chart document.

        The chart type is checked before any record is fetched.

        Raises:
            UnsupportedChartTypeError: If ``chart_type`` is not supported.
        """
        if chart_type not in CHART_TYPES:
            raise UnsupportedChartTypeError(chart_type)
        summary = self._summary_use_case.execute(
            start_date=start_date,
            end_date=end_date,
            exclude_category_ids=exclude_category_ids,
        )
        payload = project(summary, chart_type)
        self._logger.info(f"Rendering {chart_type} chart")
        return self._renderer.render(
            payload,
            title=f"Summary {start_date} to {end_date}",
        )


__all__ = ["GenerateSummaryChartUseCase"]
