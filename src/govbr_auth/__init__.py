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
Unofficial gov.br authentication client: PKCE authorization, token exchange and confiabilidade lookups.
"""

__version__ = "0.1.3"
__author__ = "govbr-auth maintainers"

from .client import AuthService, GovBRAuth, GovBRAuthAsync
from .config import DEFAULT_SCOPES, ENDPOINTS, Environment, GovBRConfig
from .exceptions import API_ERROR, GovBRAuthError
from .models import (
    AuthorizationRequest,
    AuthorizeParams,
    ConfiabilidadeNivel,
    ConfiabilidadeSelo,
    TokenResponse,
    UserInfo,
)
from .utils.pkce import (
    base64url_encode,
    generate_code_challenge,
    generate_code_verifier,
    generate_nonce,
    generate_state,
)

__all__ = [
    "API_ERROR",
    "DEFAULT_SCOPES",
    "ENDPOINTS",
    "AuthService",
    "AuthorizationRequest",
    "AuthorizeParams",
    "ConfiabilidadeNivel",
    "ConfiabilidadeSelo",
    "Environment",
    "GovBRAuth",
    "GovBRAuthAsync",
    "GovBRAuthError",
    "GovBRConfig",
    "TokenResponse",
    "UserInfo",
    "base64url_encode",
    "generate_code_challenge",
    "generate_code_verifier",
    "generate_nonce",
    "generate_state",
]
