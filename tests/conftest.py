# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_identity

import os
from collections.abc import Callable, Generator

import httpx
import pytest

from govbr_auth.config import GovBRConfig

from .helpers import Handler, RecordingTransport


@pytest.fixture(autouse=True)
def clean_govbr_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Removes any GOVBR_AUTH_* variables from the environment so that
    GovBRConfig only sees the values passed by each test.
    """
    for key in list(os.environ):
        if key.upper().startswith("GOVBR_AUTH_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def config() -> GovBRConfig:
    return GovBRConfig(
        client_id="test-client",
        client_secret="test-secret",
        redirect_uri="https://app.test/callback",
    )


@pytest.fixture
def staging_config() -> GovBRConfig:
    return GovBRConfig(
        client_id="test-client",
        client_secret="test-secret",
        redirect_uri="https://app.test/callback",
        environment="staging",
    )


@pytest.fixture
def make_client() -> Callable[[Handler], tuple[httpx.AsyncClient, RecordingTransport]]:
    """Builds an AsyncClient backed by a RecordingTransport."""

    def factory(handler: Handler) -> tuple[httpx.AsyncClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport, headers={"Content-Type": "application/json"})
        return client, transport

    return factory
