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
Internal data models for the govbr-auth package.
These are not exposed in the public API.
"""

from pydantic import BaseModel, ConfigDict, Field


class Endpoints(BaseModel):
    """
    Fixed set of gov.br URLs for one environment.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    authorize: str = Field(..., description="The authorization endpoint URL.")
    token: str = Field(..., description="The token endpoint URL.")
    userinfo: str = Field(..., description="The userinfo endpoint URL.")
    logout: str = Field(..., description="The logout endpoint URL.")
    confiabilidades: str = Field(..., description="Base URL of the trust levels/seals API.")
