"""CLI adapter to print a raw summary or write a summary chart.

Inputs come from environment variables:
    SUMMARY_START_DATE / SUMMARY_END_DATE (YYYY-MM-DD, default month-to-date)
    SUMMARY_EXCLUDE_CATEGORY_IDS (comma separated ids)
    SUMMARY_CHART_TYPE (bar, sunburst or sankey; raw JSON when unset)
    SUMMARY_OUTPUT (chart HTML path, default summary_<type>.html)
"""

from datetime import date
import json
import os
from pathlib import Path

from src.application.use_cases.summary_requests import (
    parse_chart_request,
    parse_summary_request,
)
from src.domain.errors import InvalidRequestError
from src.infrastructure.container import (
    build_summary_chart_use_case,
    build_summary_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _split_ids(raw: str | None) -> list[str]:
    """Split a comma separated id list, validation is left to the contract."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _build_payload(today: date) -> dict:
    return {
        "startDate": os.getenv(
            "SUMMARY_START_DATE",
            date(today.year, today.month, 1).isoformat(),
        ),
        "endDate": os.getenv("SUMMARY_END_DATE", today.isoformat()),
        "excludeCategoryIds": _split_ids(
            os.getenv("SUMMARY_EXCLUDE_CATEGORY_IDS")
        ),
    }


def main() -> None:
    """Compute the summary and print it, or render it as a chart."""
    logger = get_app_logger()
    payload = _build_payload(date.today())
    chart_type = os.getenv("SUMMARY_CHART_TYPE")

    try:
        if chart_type:
            request = parse_chart_request({**payload, "type": chart_type})
        else:
            request = parse_summary_request(payload)
    except InvalidRequestError as exc:
        logger.error(f"Rejected summary request: {exc}")
        return

    get_usage_logger().info(
        f"summary cli start={request.start_date} end={request.end_date} "
        f"chart={chart_type or 'raw'}"
    )

    if not chart_type:
        summary = build_summary_use_case().execute(
            start_date=request.start_date,
            end_date=request.end_date,
            exclude_category_ids=request.exclude_category_ids,
        )
        print(json.dumps(summary.to_dict(), indent=2))
        return

    html = build_summary_chart_use_case().execute(
        start_date=request.start_date,
        end_date=request.end_date,
        chart_type=request.chart_type,
        exclude_category_ids=request.exclude_category_ids,
    )
    output = Path(
        os.getenv("SUMMARY_OUTPUT", f"summary_{request.chart_type}.html")
    )
    output.write_text(html, encoding="utf-8")
    print(f"Chart written to {output}")


if __name__ == "__main__":  # pragma: no cover
    main()
