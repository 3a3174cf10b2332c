"""
Panel API transport.

``call_api`` is the single place where URLs are built, credentials attached
and response bodies decoded. Every service goes through it.
"""

from __future__ import annotations

from typing import Mapping, Sequence, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ptero.api.config import build_api_url
from ptero.exceptions import APIError, DecodeError
from ptero.logging import get_logger
from ptero.models.errors import ApiErrorPayload
from ptero.models.target import PanelTarget

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def auth_headers(target: PanelTarget) -> dict[str, str]:
    """Headers sent with every authenticated panel request."""
    return {
        "Accept": "application/json",
        "Authorization": f"Bearer {target.api_key}",
    }


def call_api(
    client: httpx.Client,
    target: PanelTarget,
    method: str,
    endpoint: str,
    result_type: type[ModelT],
    segments: Sequence[str] = (),
    data: Mapping[str, str] | None = None,
) -> ModelT:
    """
    Issue one panel API request and decode the response.

    Args:
        client: HTTP client used to send the request
        target: Panel descriptor (base URL and API key)
        method: HTTP method
        endpoint: Endpoint template relative to ``/api/``
        result_type: Model the success body is decoded into
        segments: Path segments appended to the endpoint
        data: Form fields, sent urlencoded when given

    Returns:
        Decoded ``result_type`` instance

    Raises:
        APIError: Panel answered with a non-200 status
        DecodeError: Success or error body could not be decoded
        httpx.HTTPError: Transport failure, propagated unchanged
    """
    url = build_api_url(target, endpoint, segments)
    logger.debug(f"{method} {url}")

    response = client.request(
        method,
        url,
        headers=auth_headers(target),
        data=dict(data) if data else None,
    )
    logger.debug(f"{method} {url} -> {response.status_code}")

    if response.status_code != httpx.codes.OK:
        try:
            payload = ApiErrorPayload.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"could not decode error response (status {response.status_code}): {e}",
                cause=e,
            ) from e
        raise APIError(response.status_code, payload.errors)

    try:
        return result_type.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"could not decode {result_type.__name__} response: {e}",
            cause=e,
        ) from e


__all__ = ["call_api", "auth_headers"]
