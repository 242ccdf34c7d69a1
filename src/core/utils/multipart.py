"""Parsing of multipart/form-data request bodies."""

import re
from dataclasses import dataclass

from aws_lambda_powertools import Logger
from requests_toolbelt.multipart.decoder import (
    ImproperBodyPartContentException,
    MultipartDecoder,
    NonMultipartContentTypeException,
)

from core.models.errors import ValidationError

logger = Logger(UTC=True)

_DISPOSITION_PARAM = re.compile(r'(\w+)\s*=\s*"((?:[^"\\]|\\.)*)"|(\w+)\s*=\s*([^;\s]+)')


@dataclass(frozen=True)
class FormPart:
    """A single multipart/form-data field."""

    name: str
    content: bytes
    filename: str | None = None
    content_type: str | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8").strip()


def _disposition_params(value: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for match in _DISPOSITION_PARAM.finditer(value):
        if match.group(1):
            params[match.group(1).lower()] = match.group(2).replace('\\"', '"')
        else:
            params[match.group(3).lower()] = match.group(4)
    return params


def parse_form_data(body: bytes, content_type: str | None) -> dict[str, FormPart]:
    """Decode a multipart/form-data body into its named fields.

    Raises:
        ValidationError: If the body is not multipart or cannot be decoded
    """
    if not content_type:
        raise ValidationError(message="Missing Content-Type header")

    if "boundary=" not in content_type.lower():
        raise ValidationError(
            message="Request must be multipart/form-data with a boundary",
            details={"content_type": content_type},
        )

    try:
        decoder = MultipartDecoder(body, content_type)
    except NonMultipartContentTypeException as exc:
        raise ValidationError(
            message="Request must be multipart/form-data",
            details={"content_type": content_type},
        ) from exc
    except ImproperBodyPartContentException as exc:
        logger.warning("Malformed multipart body", extra={"error": str(exc)})
        raise ValidationError(message="Malformed multipart body") from exc

    fields: dict[str, FormPart] = {}
    for part in decoder.parts:
        raw_disposition = part.headers.get(b"Content-Disposition", b"")
        params = _disposition_params(raw_disposition.decode("utf-8", errors="replace"))

        name = params.get("name")
        if not name:
            continue

        raw_type = part.headers.get(b"Content-Type")
        fields[name] = FormPart(
            name=name,
            content=part.content,
            filename=params.get("filename"),
            content_type=raw_type.decode("utf-8") if raw_type else None,
        )

    return fields
