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
PKCE (RFC 7636) and randomness helpers.
"""

import secrets

from authlib.common.encoding import to_bytes, to_unicode, urlsafe_b64encode
from authlib.oauth2.rfc7636 import create_s256_code_challenge

__all__ = [
    "base64url_encode",
    "generate_code_challenge",
    "generate_code_verifier",
    "generate_nonce",
    "generate_state",
]


def generate_nonce() -> str:
    """
    Generate an OpenID Connect nonce.

    Returns:
        str: 16 random bytes as 32 hex characters.
    """
    return secrets.token_hex(16)


def generate_state() -> str:
    """
    Generate an OAuth state value for CSRF protection.

    Returns:
        str: 16 random bytes as 32 hex characters.
    """
    return secrets.token_hex(16)


def generate_code_verifier() -> str:
    """
    Generate a PKCE code verifier.

    Returns:
        str: 32 random bytes, URL-safe base64 without padding (43 characters).
    """
    return secrets.token_urlsafe(32)


def generate_code_challenge(verifier: str) -> str:
    """
    Derive the S256 code challenge for a verifier.

    Args:
        verifier: The PKCE code verifier.

    Returns:
        str: base64url(SHA-256(verifier)) without padding.
    """
    return create_s256_code_challenge(verifier)


def base64url_encode(value: str) -> str:
    """
    Encode a UTF-8 string as URL-safe base64 without padding.

    Used for the token endpoint's Basic credentials, which gov.br clients have
    historically sent in this form rather than standard base64.
    """
    return to_unicode(urlsafe_b64encode(to_bytes(value, "utf-8")))
