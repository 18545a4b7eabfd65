"""Errors raised while building summaries and charts."""


class SummaryError(Exception):
    """Base class for summary computation failures."""


class InvalidRequestError(SummaryError, ValueError):
    """Request payload violates the summary request contract."""


class InvalidRangeError(InvalidRequestError):
    """Start or end date is malformed, or the range is reversed."""


class UnsupportedChartTypeError(InvalidRequestError):
    """Chart type is not one of bar, sunburst or sankey."""

    def __init__(self, chart_type: object) -> None:
        super().__init__(
            f"Unsupported chart type: {chart_type!r}. "
            "Expected bar, sunburst or sankey."
        )
        self.chart_type = chart_type


class UnknownCategoryError(SummaryError, LookupError):
    """An expense references a category missing from the directory.

    This signals referential corruption in the record store, so the whole
    computation is aborted instead of skipping the record.
    """

    def __init__(self, category_id: int) -> None:
        super().__init__(f"Unknown category id: {category_id}")
        self.category_id = category_id


__all__ = [
    "SummaryError",
    "InvalidRequestError",
    "InvalidRangeError",
    "UnsupportedChartTypeError",
    "UnknownCategoryError",
]
