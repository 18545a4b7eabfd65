"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.use_cases.generate_summary import GenerateSummaryUseCase
from src.application.use_cases.generate_summary_chart import (
    GenerateSummaryChartUseCase,
)
from src.infrastructure import container
from src.infrastructure.plotly_renderer import PlotlyChartRenderer
from src.infrastructure.settings import SummarySettings


def test_build_record_store_uses_settings_and_db_port(monkeypatch) -> None:
    """build_record_store should delegate to the factory with settings."""
    captured = {}
    settings = SummarySettings(backend="json")

    def _fake_factory(db_port, logger=None, settings=None):
        captured["db_port"] = db_port
        captured["settings"] = settings
        return "store"

    monkeypatch.setattr(container, "create_record_store", _fake_factory)
    monkeypatch.setattr(
        container.SummarySettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    db_port = MagicMock()

    assert container.build_record_store(db_port) == "store"
    assert captured == {"db_port": db_port, "settings": settings}


def test_build_chart_renderer_reads_plotlyjs_setting(monkeypatch) -> None:
    monkeypatch.setattr(
        container.SummarySettings,
        "from_env",
        classmethod(lambda cls: SummarySettings(plotlyjs="inline")),
    )

    renderer = container.build_chart_renderer(sankey_group_by="priority")

    assert isinstance(renderer, PlotlyChartRenderer)
    assert renderer._include_plotlyjs is True
    assert renderer._sankey_group_by == "priority"


def test_use_case_builders_wire_given_collaborators() -> None:
    store = MagicMock()
    renderer = MagicMock()

    summary_use_case = container.build_summary_use_case(store)
    chart_use_case = container.build_summary_chart_use_case(store, renderer)

    assert isinstance(summary_use_case, GenerateSummaryUseCase)
    assert summary_use_case._record_store is store
    assert isinstance(chart_use_case, GenerateSummaryChartUseCase)
    assert chart_use_case._renderer is renderer
