"""Application use cases package."""

from .generate_summary import GenerateSummaryUseCase, Summary
from .generate_summary_chart import GenerateSummaryChartUseCase
from .summary_requests import (
    GenerateSummaryChartRequest,
    GenerateSummaryRequest,
    parse_chart_request,
    parse_summary_request,
)

__all__ = [
    "GenerateSummaryUseCase",
    "Summary",
    "GenerateSummaryChartUseCase",
    "GenerateSummaryChartRequest",
    "GenerateSummaryRequest",
    "parse_chart_request",
    "parse_summary_request",
]
