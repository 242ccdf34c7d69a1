"""Helpers for reading API Gateway proxy events."""

from __future__ import annotations

import base64
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from core.utils.constants import ENV_PUBLIC_BASE_URL, PHOTO_URL_PATH

DEFAULT_PORTS = {"http": "80", "https": "443"}


def get_header(event: Mapping[str, Any], name: str) -> str | None:
    """Case-insensitive header lookup on a proxy event."""
    headers = event.get("headers") or {}
    wanted = name.lower()

    for key, value in headers.items():
        if key.lower() == wanted:
            return value

    return None


def get_body_bytes(event: Mapping[str, Any]) -> bytes:
    """Return the raw request body, decoding it when API Gateway base64-encoded it."""
    body = event.get("body") or ""

    if event.get("isBase64Encoded"):
        return base64.b64decode(body)

    if isinstance(body, bytes):
        return body

    return body.encode("utf-8")


def _stage_prefix(event: Mapping[str, Any]) -> str:
    """Path prefix API Gateway strips before routing (e.g. "/prod").

    requestContext.path holds the path as the client sent it, while the
    top-level path is the resource path. Whatever precedes the resource
    path is the prefix.
    """
    request_context = event.get("requestContext") or {}
    full_path = request_context.get("path") or ""
    resource_path = event.get("path") or ""

    if resource_path and full_path.endswith(resource_path):
        return full_path[: len(full_path) - len(resource_path)].rstrip("/")

    return ""


def request_base_url(event: Mapping[str, Any]) -> str:
    """Externally visible origin of the request, including any path prefix.

    PUBLIC_BASE_URL wins when configured. Otherwise the origin is rebuilt
    from the forwarded headers API Gateway passes along. Without a Host
    header an empty base is returned and URLs stay relative.
    """
    configured = os.getenv(ENV_PUBLIC_BASE_URL)
    if configured:
        return configured.rstrip("/")

    host = get_header(event, "X-Forwarded-Host") or get_header(event, "Host")
    if not host:
        return _stage_prefix(event)

    scheme = (get_header(event, "X-Forwarded-Proto") or "https").split(",")[0].strip()
    port = get_header(event, "X-Forwarded-Port")

    origin = f"{scheme}://{host}"
    if port and ":" not in host and DEFAULT_PORTS.get(scheme) != port:
        origin = f"{origin}:{port}"

    return f"{origin}{_stage_prefix(event)}"


def build_photo_url(base_url: str, filename: str) -> str:
    """Join a request base URL and a stored photo filename."""
    return f"{base_url.rstrip('/')}{PHOTO_URL_PATH}{quote(filename, safe='')}"
