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
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from govbr_auth.config import DEFAULT_SCOPES, ENDPOINTS, Environment, GovBRConfig

REQUIRED = {
    "client_id": "cid",
    "client_secret": "secret",
    "redirect_uri": "https://app.test/callback",
}


def test_defaults_applied() -> None:
    config = GovBRConfig(**REQUIRED)
    assert config.environment == Environment.PRODUCTION
    assert config.scopes == ("openid", "email", "profile", "govbr_confiabilidades")
    assert config.scopes == DEFAULT_SCOPES


@pytest.mark.parametrize("field", ["client_id", "client_secret", "redirect_uri"])
def test_missing_required_field(field: str) -> None:
    values = {k: v for k, v in REQUIRED.items() if k != field}
    with pytest.raises(ValidationError) as exc:
        GovBRConfig(**values)
    assert field in str(exc.value)


@pytest.mark.parametrize("field", ["client_id", "client_secret", "redirect_uri"])
def test_empty_required_field(field: str) -> None:
    with pytest.raises(ValidationError, match="Missing required configuration parameter"):
        GovBRConfig(**{**REQUIRED, field: ""})


@pytest.mark.parametrize("field", ["client_id", "client_secret", "redirect_uri"])
def test_whitespace_required_field_is_accepted(field: str) -> None:
    config = GovBRConfig(**{**REQUIRED, field: "   "})
    value = getattr(config, field)
    if field == "client_secret":
        value = value.get_secret_value()
    assert value == "   "


def test_none_environment_and_scopes_fall_back_to_defaults() -> None:
    config = GovBRConfig(**REQUIRED, environment=None, scopes=None)
    assert config.environment == Environment.PRODUCTION
    assert config.scopes == DEFAULT_SCOPES


def test_staging_environment_from_string() -> None:
    config = GovBRConfig(**REQUIRED, environment="staging")
    assert config.environment is Environment.STAGING
    assert config.endpoints == ENDPOINTS[Environment.STAGING]


def test_unknown_environment_rejected() -> None:
    with pytest.raises(ValidationError):
        GovBRConfig(**REQUIRED, environment="homologacao")


def test_empty_scopes_are_kept() -> None:
    config = GovBRConfig(**REQUIRED, scopes=[])
    assert config.scopes == ()


def test_single_string_scope_rejected() -> None:
    with pytest.raises(ValidationError):
        GovBRConfig(**REQUIRED, scopes="openid email")


def test_scopes_are_copied() -> None:
    """Mutating the caller's list after construction has no effect."""
    scopes = ["openid", "profile"]
    config = GovBRConfig(**REQUIRED, scopes=scopes)
    scopes.append("email")
    assert config.scopes == ("openid", "profile")


def test_config_is_frozen() -> None:
    config = GovBRConfig(**REQUIRED)
    with pytest.raises(ValidationError):
        config.client_id = "other"  # type: ignore[misc]


def test_secret_not_exposed_in_repr() -> None:
    config = GovBRConfig(**REQUIRED)
    assert "'secret'" not in repr(config)
    assert config.client_secret.get_secret_value() == "secret"


def test_config_loading_from_env() -> None:
    """Test loading configuration from environment variables."""
    with patch.dict(
        os.environ,
        {
            "GOVBR_AUTH_CLIENT_ID": "env-client",
            "GOVBR_AUTH_CLIENT_SECRET": "env-secret",
            "GOVBR_AUTH_REDIRECT_URI": "https://env.test/cb",
            "GOVBR_AUTH_ENVIRONMENT": "staging",
            "GOVBR_AUTH_SCOPES": '["openid", "profile"]',
        },
    ):
        config = GovBRConfig()
        assert config.client_id == "env-client"
        assert config.client_secret.get_secret_value() == "env-secret"
        assert config.redirect_uri == "https://env.test/cb"
        assert config.environment == Environment.STAGING
        assert config.scopes == ("openid", "profile")


def test_config_env_case_insensitive() -> None:
    with patch.dict(
        os.environ,
        {
            "govbr_auth_client_id": "lower-client",
            "GOVBR_AUTH_CLIENT_SECRET": "s",
            "GOVBR_AUTH_REDIRECT_URI": "https://env.test/cb",
        },
    ):
        config = GovBRConfig()
        assert config.client_id == "lower-client"


def test_endpoint_tables() -> None:
    prod = ENDPOINTS[Environment.PRODUCTION]
    staging = ENDPOINTS[Environment.STAGING]

    assert prod.authorize == "https://sso.acesso.gov.br/authorize"
    assert prod.token == "https://sso.acesso.gov.br/token"
    assert prod.userinfo == "https://sso.acesso.gov.br/userinfo"
    assert prod.logout == "https://sso.acesso.gov.br/logout"
    assert prod.confiabilidades == "https://api.acesso.gov.br/confiabilidades/v3"

    assert staging.authorize == "https://sso.staging.acesso.gov.br/authorize"
    assert staging.token == "https://sso.staging.acesso.gov.br/token"
    assert staging.userinfo == "https://sso.staging.acesso.gov.br/userinfo"
    assert staging.logout == "https://sso.staging.acesso.gov.br/logout"
    assert staging.confiabilidades == "https://api.staging.acesso.gov.br/confiabilidades/v3"


def test_endpoints_are_frozen() -> None:
    with pytest.raises(ValidationError):
        ENDPOINTS[Environment.PRODUCTION].token = "https://evil.test/token"  # type: ignore[misc]
