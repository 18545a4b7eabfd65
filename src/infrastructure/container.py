"""Composition root for wiring infrastructure adapters."""

from src.application.ports.chart_renderer import ChartRendererPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import SummaryDataSourcePort
from src.application.use_cases.generate_summary import GenerateSummaryUseCase
from src.application.use_cases.generate_summary_chart import (
    GenerateSummaryChartUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.plotly_renderer import PlotlyChartRenderer
from src.infrastructure.record_store_factory import create_record_store
from src.infrastructure.settings import SummarySettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> SummaryDataSourcePort:
    """Return the configured record store."""
    resolved_db = db_port or build_database_adapter()
    return create_record_store(
        resolved_db,
        logger=get_app_logger(),
        settings=SummarySettings.from_env(),
    )


def build_chart_renderer(
    sankey_group_by: str = "category",
) -> ChartRendererPort:
    """Return the Plotly chart renderer."""
    settings = SummarySettings.from_env()
    return PlotlyChartRenderer(
        include_plotlyjs=settings.plotlyjs,
        sankey_group_by=sankey_group_by,
    )


def build_summary_use_case(
    record_store: SummaryDataSourcePort | None = None,
) -> GenerateSummaryUseCase:
    """Return the summary use case wired to the configured store."""
    store = record_store or build_record_store()
    return GenerateSummaryUseCase(record_store=store, logger=get_app_logger())


def build_summary_chart_use_case(
    record_store: SummaryDataSourcePort | None = None,
    renderer: ChartRendererPort | None = None,
) -> GenerateSummaryChartUseCase:
    """Return the chart use case wired to the store and renderer."""
    return GenerateSummaryChartUseCase(
        summary_use_case=build_summary_use_case(record_store),
        renderer=renderer or build_chart_renderer(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_chart_renderer",
    "build_summary_use_case",
    "build_summary_chart_use_case",
]
