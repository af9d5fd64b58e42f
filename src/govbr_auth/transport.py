# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

"""
HTTP plumbing shared by every gov.br call: client factory and error normalization.
"""

from typing import Any

import httpx

from govbr_auth.exceptions import API_ERROR, GovBRAuthError

DEFAULT_TIMEOUT = 10.0


def create_client() -> httpx.AsyncClient:
    """
    Creates the shared async client with a fixed timeout and a JSON content type.
    """
    return httpx.AsyncClient(
        timeout=DEFAULT_TIMEOUT,
        headers={"Content-Type": "application/json"},
    )


def to_api_error(exc: httpx.HTTPError) -> GovBRAuthError:
    """
    Re-tags an httpx failure as an API_ERROR.

    Args:
        exc: Any httpx error (transport failure, timeout, or non-2xx status).

    Returns:
        GovBRAuthError carrying the response status when one was received.
    """
    status_code = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
    return GovBRAuthError(str(exc), API_ERROR, status_code, exc)


async def fetch_json(client: httpx.AsyncClient, method: str, url: str, **kwargs: Any) -> Any:
    """
    Sends a request and returns the decoded JSON body.

    Args:
        client: The async HTTP client.
        method: HTTP method.
        url: Absolute URL.
        **kwargs: Forwarded to `httpx.AsyncClient.request` (params, data, headers...).

    Returns:
        The parsed JSON body.

    Raises:
        GovBRAuthError: If the request fails at the transport level or returns a non-2xx status.
    """
    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise to_api_error(e) from e

    return response.json()
