"""Request validation for API Gateway events.

Failures become 422 responses. Details name the field as the client sent it
(query parameter, path parameter or multipart form field) and never echo the
submitted value, which for uploads could be raw photo bytes.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.utils.response import ResponseBuilder

ModelT = TypeVar("ModelT", bound=BaseModel)

# Keyed by pydantic error type; placeholders are filled from the error ctx.
ERROR_MESSAGES: dict[str, str] = {
    "missing": "This field is required",
    "int_parsing": "Must be a whole number",
    "int_from_float": "Must be a whole number",
    "string_type": "Must be text",
    "string_too_short": "Must not be empty",
    "string_too_long": "Must be at most {max_length} characters",
    "greater_than_equal": "Must be at least {ge}",
    "less_than_equal": "Must be at most {le}",
}


def sanitize_validation_errors(
    errors: list[dict[str, Any]],
    *,
    field_names: Mapping[str, str] | None = None,
) -> list[dict[str, str]]:
    """Reduce pydantic errors to `{"field", "message"}` pairs.

    Args:
        errors: Output of `pydantic.ValidationError.errors()`
        field_names: Model field -> name the client used for it

    Returns:
        One entry per error, without `input`, `ctx` or `url`.
    """
    field_names = field_names or {}
    sanitized: list[dict[str, str]] = []

    for err in errors:
        location = ".".join(str(x) for x in err.get("loc", ()))
        field = field_names.get(location, location) or "body"

        template = ERROR_MESSAGES.get(err.get("type", ""))
        if template:
            message = template.format_map(err.get("ctx") or {})
        else:
            message = err.get("msg", "Invalid value").replace("Value error,", "").strip()

        sanitized.append({"field": field, "message": message})

    return sanitized


def query_params(event: Mapping[str, Any], model: type[BaseModel]) -> dict[str, str]:
    """Query string values for the fields `model` declares.

    Unknown parameters are dropped and blank values count as absent, so
    `?page=&size=5` falls back to the default page.
    """
    raw = event.get("queryStringParameters") or {}
    return {key: value for key, value in raw.items() if key in model.model_fields and value != ""}


def validate_request(
    model: type[ModelT],
    data: dict[str, Any],
    *,
    request_id: str | None = None,
    field_names: Mapping[str, str] | None = None,
) -> tuple[bool, ModelT | dict[str, Any]]:
    """Validate request data against a Pydantic model.

    `None` values are treated as absent, so a missing path parameter or form
    field is reported as required rather than as a type error.

    Returns:
        (True, validated_model) on success
        (False, 422 response) on validation failure
    """
    try:
        return True, model(**{key: value for key, value in data.items() if value is not None})

    except ValidationError as exc:
        return (
            False,
            ResponseBuilder.validation_error(
                message="Invalid request payload",
                details=sanitize_validation_errors(exc.errors(), field_names=field_names),
                request_id=request_id,
            ),
        )
