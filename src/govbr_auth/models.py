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
Data models for the govbr-auth package.

Provider responses are passed through as-is: unknown fields are kept and no
claim is verified.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorizeParams(BaseModel):
    """
    Optional per-call overrides for the authorization URL.
    Each field falls back to a generated or default value when absent.

    Attributes:
        response_type (str | None): OAuth response type. Defaults to "code".
        nonce (str | None): OpenID Connect nonce. Generated when absent.
        state (str | None): CSRF state. Generated when absent.
        code_challenge (str | None): PKCE code challenge. Derived from a verifier when absent.
        code_challenge_method (str | None): PKCE method. Defaults to "S256".
        code_verifier (str | None): PKCE verifier to derive the challenge from. Generated when absent.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    response_type: str | None = None
    nonce: str | None = None
    state: str | None = None
    code_challenge: str | None = None
    code_challenge_method: str | None = None
    code_verifier: str | None = None


class AuthorizationRequest(BaseModel):
    """
    An authorization URL together with the values the caller must keep for the callback.

    Attributes:
        url (str): The complete authorization URL.
        state (str): The state sent in the URL.
        nonce (str): The nonce sent in the URL.
        code_verifier (str | None): The PKCE verifier, or None if the caller supplied its own challenge.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    state: str
    nonce: str
    code_verifier: str | None = None

    def __repr__(self) -> str:
        return (
            f"AuthorizationRequest(url={self.url!r}, state={self.state!r}, "
            f"nonce={self.nonce!r}, code_verifier='<REDACTED>')"
        )


class TokenResponse(BaseModel):
    """
    Response from the token endpoint.

    Attributes:
        access_token (str | None): The access token.
        id_token (str | None): The OpenID Connect ID token.
        token_type (str | None): The token type (usually "Bearer").
        expires_in (int | None): The lifetime in seconds of the access token.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    access_token: str | None = None
    id_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None

    def __repr__(self) -> str:
        return f"TokenResponse(access_token='<REDACTED>', token_type={self.token_type!r}, expires_in={self.expires_in!r})"

    def __str__(self) -> str:
        return self.__repr__()


class UserInfo(BaseModel):
    """
    Claims returned by the userinfo endpoint.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    sub: str | None = Field(default=None, description="The subject identifier (the user's CPF).")
    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    email_verified: bool | None = None
    phone_number_verified: bool | None = None
    picture: str | None = None
    amr: list[str] = Field(default_factory=list, description="Authentication methods used.")
    social_name: str | None = None
    cnpj: str | None = None


class ConfiabilidadeNivel(BaseModel):
    """A trust level held by the account."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str | int | None = None
    data_atualizacao: str | None = Field(default=None, alias="dataAtualizacao")


class ConfiabilidadeSelo(BaseModel):
    """A trust seal held by the account."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str | int | None = None
    data_atualizacao: str | None = Field(default=None, alias="dataAtualizacao")
