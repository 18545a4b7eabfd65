"""Application ports package."""

from .chart_renderer import ChartRendererPort
from .database import DatabaseEnginePort
from .record_store import (
    CategoryDirectoryPort,
    RecordStorePort,
    SummaryDataSourcePort,
)

__all__ = [
    "ChartRendererPort",
    "DatabaseEnginePort",
    "CategoryDirectoryPort",
    "RecordStorePort",
    "SummaryDataSourcePort",
]
