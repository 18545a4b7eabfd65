"""Request contract for summary and chart generation.

Payloads use the camelCase keys of the public API::

    {"startDate": "2025-03-01", "endDate": "2025-03-31",
     "excludeCategoryIds": [4, 7], "type": "sankey"}

Validation failures are translated into the summary error kinds so the
boundary can reject them as client errors before the engine runs.
"""

from collections.abc import Mapping
from datetime import date, datetime

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from src.domain.constants import CHART_TYPES
from src.domain.errors import (
    InvalidRangeError,
    InvalidRequestError,
    UnsupportedChartTypeError,
)

DATE_FORMAT = "%Y-%m-%d"
_DATE_FIELDS = {"startDate", "endDate", "start_date", "end_date"}
_TYPE_FIELDS = {"type", "chart_type"}


class GenerateSummaryRequest(BaseModel):
    """Inputs of a summary computation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    exclude_category_ids: tuple[int, ...] = Field(alias="excludeCategoryIds")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        if isinstance(value, datetime):
            raise ValueError("Expected a date without time")
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return datetime.strptime(value, DATE_FORMAT).date()
        raise ValueError("Expected a date formatted as YYYY-MM-DD")

    @field_validator("exclude_category_ids", mode="before")
    @classmethod
    def _reject_booleans(cls, value):
        if isinstance(value, (list, tuple)) and any(
            isinstance(item, bool) for item in value
        ):
            raise ValueError("Category ids must be integers, not booleans")
        return value

    @field_validator("exclude_category_ids")
    @classmethod
    def _positive_ids(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if any(item <= 0 for item in value):
            raise ValueError("Value must be positive")
        return value

    @model_validator(mode="after")
    def _ordered_range(self) -> "GenerateSummaryRequest":
        if self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self


class GenerateSummaryChartRequest(GenerateSummaryRequest):
    """Inputs of a chart generation."""

    chart_type: str = Field(alias="type")

    @field_validator("chart_type")
    @classmethod
    def _supported_type(cls, value: str) -> str:
        if value not in CHART_TYPES:
            raise ValueError(
                f"Unsupported chart type {value!r}, "
                f"expected one of {', '.join(CHART_TYPES)}"
            )
        return value


def parse_summary_request(payload: Mapping) -> GenerateSummaryRequest:
    """Validate a raw summary payload.

    Raises:
        InvalidRangeError: If a date is malformed or the range is reversed.
        InvalidRequestError: For any other contract violation.
    """
    return _validate(GenerateSummaryRequest, payload)


def parse_chart_request(payload: Mapping) -> GenerateSummaryChartRequest:
    """Validate a raw chart payload.

    Raises:
        UnsupportedChartTypeError: If ``type`` is not a supported chart.
        InvalidRangeError: If a date is malformed or the range is reversed.
        InvalidRequestError: For any other contract violation.
    """
    return _validate(GenerateSummaryChartRequest, payload)


def _validate(model: type[GenerateSummaryRequest], payload):
    if not isinstance(payload, Mapping):
        raise InvalidRequestError("Request body must be a JSON object")
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise _translate(exc, payload) from exc


def _translate(exc: ValidationError, payload: Mapping) -> InvalidRequestError:
    errors = exc.errors()
    for error in errors:
        loc = error.get("loc", ())
        if loc and loc[0] in _TYPE_FIELDS and error.get("type") != "missing":
            return UnsupportedChartTypeError(
                payload.get("type", payload.get("chart_type"))
            )
    for error in errors:
        loc = error.get("loc", ())
        if not loc or loc[0] in _DATE_FIELDS:
            return InvalidRangeError(_message(error))
    return InvalidRequestError(_message(errors[0]))


def _message(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "Invalid value")
    return f"{loc}: {message}" if loc else message


__all__ = [
    "GenerateSummaryRequest",
    "GenerateSummaryChartRequest",
    "parse_summary_request",
    "parse_chart_request",
]
