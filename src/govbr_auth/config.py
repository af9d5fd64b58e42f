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
Configuration for the govbr-auth package.
"""

from enum import StrEnum
from typing import Any

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from govbr_auth.models_internal import Endpoints


class Environment(StrEnum):
    PRODUCTION = "production"
    STAGING = "staging"


DEFAULT_SCOPES: tuple[str, ...] = ("openid", "email", "profile", "govbr_confiabilidades")

ENDPOINTS: dict[Environment, Endpoints] = {
    Environment.STAGING: Endpoints(
        authorize="https://sso.staging.acesso.gov.br/authorize",
        token="https://sso.staging.acesso.gov.br/token",
        userinfo="https://sso.staging.acesso.gov.br/userinfo",
        logout="https://sso.staging.acesso.gov.br/logout",
        confiabilidades="https://api.staging.acesso.gov.br/confiabilidades/v3",
    ),
    Environment.PRODUCTION: Endpoints(
        authorize="https://sso.acesso.gov.br/authorize",
        token="https://sso.acesso.gov.br/token",
        userinfo="https://sso.acesso.gov.br/userinfo",
        logout="https://sso.acesso.gov.br/logout",
        confiabilidades="https://api.acesso.gov.br/confiabilidades/v3",
    ),
}


class GovBRConfig(BaseSettings):
    """
    Configuration settings for govbr-auth.

    Values may be passed directly or loaded from `GOVBR_AUTH_*` environment variables.
    The resolved configuration is frozen.

    Attributes:
        client_id (str): The client ID issued by gov.br.
        client_secret (SecretStr): The client secret issued by gov.br.
        redirect_uri (str): The redirect URI registered with gov.br.
        environment (Environment): Which gov.br deployment to talk to. Defaults to production.
        scopes (tuple[str, ...]): OAuth scopes to request. Defaults to DEFAULT_SCOPES.
    """

    model_config = SettingsConfigDict(
        env_prefix="GOVBR_AUTH_",
        case_sensitive=False,
        frozen=True,
    )

    client_id: str
    client_secret: SecretStr
    redirect_uri: str
    environment: Environment = Environment.PRODUCTION
    scopes: tuple[str, ...] = DEFAULT_SCOPES

    @field_validator("client_id", "redirect_uri")
    @classmethod
    def require_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Missing required configuration parameter")
        return v

    @field_validator("client_secret")
    @classmethod
    def require_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("Missing required configuration parameter")
        return v

    @field_validator("environment", mode="before")
    @classmethod
    def default_environment(cls, v: Any) -> Any:
        return Environment.PRODUCTION if v is None or v == "" else v

    @field_validator("scopes", mode="before")
    @classmethod
    def default_scopes(cls, v: Any) -> Any:
        """
        Falls back to DEFAULT_SCOPES when scopes are omitted.
        An explicitly empty sequence is kept and sent as an empty scope.
        """
        if v is None:
            return DEFAULT_SCOPES
        if isinstance(v, str):
            raise ValueError("scopes must be a sequence of strings, not a single string")
        return tuple(v)

    @property
    def endpoints(self) -> Endpoints:
        """The endpoint set for the configured environment."""
        return ENDPOINTS[self.environment]
