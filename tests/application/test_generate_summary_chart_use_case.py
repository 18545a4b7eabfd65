"""Tests for the GenerateSummaryChartUseCase."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.generate_summary_chart import (
    GenerateSummaryChartUseCase,
)
from src.domain.errors import UnsupportedChartTypeError
from src.domain.models import (
    BarPayload,
    SankeyPayload,
    empty_summary,
)


def _use_case():
    summary_use_case = MagicMock()
    summary_use_case.execute.return_value = empty_summary()
    renderer = MagicMock()
    renderer.render.return_value = "<html></html>"
    use_case = GenerateSummaryChartUseCase(
        summary_use_case=summary_use_case,
        renderer=renderer,
        logger=MagicMock(),
    )
    return use_case, summary_use_case, renderer


def test_execute_projects_and_renders() -> None:
    """Use case should project the summary and delegate to the renderer."""
    use_case, summary_use_case, renderer = _use_case()

    html = use_case.execute(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        chart_type="bar",
        exclude_category_ids=(3,),
    )

    assert html == "<html></html>"
    summary_use_case.execute.assert_called_once_with(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        exclude_category_ids=(3,),
    )
    payload = renderer.render.call_args[0][0]
    assert isinstance(payload, BarPayload)
    assert renderer.render.call_args[1]["title"] == (
        "Summary 2024-01-01 to 2024-01-31"
    )


def test_execute_passes_sankey_payload() -> None:
    use_case, _, renderer = _use_case()

    use_case.execute(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        chart_type="sankey",
    )

    assert isinstance(renderer.render.call_args[0][0], SankeyPayload)


def test_unsupported_type_is_rejected_before_fetching() -> None:
    use_case, summary_use_case, renderer = _use_case()

    with pytest.raises(UnsupportedChartTypeError):
        use_case.execute(
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            chart_type="pie",
        )

    summary_use_case.execute.assert_not_called()
    renderer.render.assert_not_called()
