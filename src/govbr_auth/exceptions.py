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
Custom exceptions for the govbr-auth package.
"""

API_ERROR = "API_ERROR"


class GovBRAuthError(Exception):
    """
    Raised when a call to the gov.br APIs fails.

    Attributes:
        code (str): Fixed error tag (e.g. "API_ERROR").
        status_code (int | None): HTTP status of the failed response, if one was received.
        original_error (Exception | None): The underlying transport error, kept for diagnostics.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.original_error = original_error

    def __repr__(self) -> str:
        return f"GovBRAuthError(message={self.message!r}, code={self.code!r}, status_code={self.status_code!r})"
