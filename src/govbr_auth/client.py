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
GovBRAuth clients: authorization/logout URL building, PKCE token exchange and
the userinfo and confiabilidade lookups.
"""

from collections.abc import Awaitable, Callable, Mapping
from contextlib import ExitStack
from typing import Any, TypeVar
from urllib.parse import quote, urlencode

import httpx
from anyio.from_thread import BlockingPortal, start_blocking_portal
from opentelemetry import trace
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.trace import Status, StatusCode
from pydantic import TypeAdapter

from govbr_auth.config import GovBRConfig
from govbr_auth.exceptions import GovBRAuthError
from govbr_auth.models import (
    AuthorizationRequest,
    AuthorizeParams,
    ConfiabilidadeNivel,
    ConfiabilidadeSelo,
    TokenResponse,
    UserInfo,
)
from govbr_auth.models_internal import Endpoints
from govbr_auth.transport import create_client, fetch_json
from govbr_auth.utils.logger import logger
from govbr_auth.utils.pkce import (
    base64url_encode,
    generate_code_challenge,
    generate_code_verifier,
    generate_nonce,
    generate_state,
)

tracer = trace.get_tracer(__name__)

T = TypeVar("T")

_NIVEIS_ADAPTER = TypeAdapter(list[ConfiabilidadeNivel])
_SELOS_ADAPTER = TypeAdapter(list[ConfiabilidadeSelo])


class GovBRAuthAsync:
    """
    Async client for the gov.br identity provider (The Core).
    Handles resources via async context manager.

    Attributes:
        config (GovBRConfig): The resolved, frozen configuration.
        endpoints (Endpoints): The endpoint set for the configured environment.
    """

    def __init__(self, config: GovBRConfig | Mapping[str, Any], client: httpx.AsyncClient | None = None) -> None:
        """
        Initialize the client.

        Args:
            config: A GovBRConfig, or a mapping of its fields.
            client: External async client (optional). If not provided, one is created with a 10 second timeout
                and closed by `aclose`.

        Raises:
            pydantic.ValidationError: If client_id, client_secret or redirect_uri is missing or empty.
        """
        self.config = config if isinstance(config, GovBRConfig) else GovBRConfig(**config)
        self.endpoints: Endpoints = self.config.endpoints
        self._internal_client = client is None
        self._client = client if client is not None else create_client()

        # Instrument the client for distributed tracing
        HTTPXClientInstrumentor().instrument_client(self._client)

        logger.debug(f"GovBRAuth initialized for environment '{self.config.environment}'")

    async def __aenter__(self) -> "GovBRAuthAsync":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Closes the HTTP client if it was created by this instance."""
        if self._internal_client:
            await self._client.aclose()

    def create_authorization_request(self, params: AuthorizeParams | None = None) -> AuthorizationRequest:
        """
        Builds the authorization URL and returns it with the generated state, nonce and code verifier.

        The caller must keep `state`, `nonce` and `code_verifier` for the callback; nothing is stored here.

        Args:
            params: Optional overrides. Any field left empty is generated or defaulted.

        Returns:
            AuthorizationRequest: The URL plus the values it was built from.
        """
        params = params or AuthorizeParams()

        nonce = params.nonce or generate_nonce()
        state = params.state or generate_state()

        code_verifier: str | None = None
        code_challenge = params.code_challenge
        if not code_challenge:
            code_verifier = params.code_verifier or generate_code_verifier()
            code_challenge = generate_code_challenge(code_verifier)

        query = urlencode(
            {
                "response_type": params.response_type or "code",
                "client_id": self.config.client_id,
                "scope": " ".join(self.config.scopes),
                "redirect_uri": self.config.redirect_uri,
                "nonce": nonce,
                "state": state,
                "code_challenge": code_challenge,
                "code_challenge_method": params.code_challenge_method or "S256",
            }
        )

        return AuthorizationRequest(
            url=f"{self.endpoints.authorize}?{query}",
            state=state,
            nonce=nonce,
            code_verifier=code_verifier,
        )

    def generate_authorization_url(self, params: AuthorizeParams | None = None) -> str:
        """
        Generates the authorization URL for the OAuth flow.

        Args:
            params: Optional overrides. Any field left empty is generated or defaulted.

        Returns:
            str: The complete authorization URL.
        """
        return self.create_authorization_request(params).url

    def generate_logout_url(self, post_logout_redirect_uri: str) -> str:
        """
        Generates the logout URL.

        Args:
            post_logout_redirect_uri: Where gov.br sends the browser after logout.

        Returns:
            str: The complete logout URL.
        """
        query = urlencode({"post_logout_redirect_uri": post_logout_redirect_uri})
        return f"{self.endpoints.logout}?{query}"

    async def get_tokens(self, code: str, code_verifier: str) -> TokenResponse:
        """
        Exchanges an authorization code for tokens.

        The client credentials are sent as `Basic base64url(client_id:client_secret)`, URL-safe and unpadded,
        which is what existing gov.br integrations send.

        Args:
            code: The authorization code from the callback.
            code_verifier: The PKCE verifier the URL's code challenge was derived from.

        Returns:
            TokenResponse: The provider's token response.

        Raises:
            GovBRAuthError: With code API_ERROR if the request fails or returns a non-2xx status.
        """
        credentials = f"{self.config.client_id}:{self.config.client_secret.get_secret_value()}"
        data = await self._request(
            "get_tokens",
            "POST",
            self.endpoints.token,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.config.redirect_uri,
                "code_verifier": code_verifier,
            },
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Authorization": f"Basic {base64url_encode(credentials)}",
            },
        )
        logger.info("Token exchange succeeded.")
        return TokenResponse.model_validate(data)

    async def get_user_info(self, access_token: str) -> UserInfo:
        """
        Retrieves the user's claims from the userinfo endpoint.

        Args:
            access_token: A valid access token.

        Returns:
            UserInfo: The user's claims.

        Raises:
            GovBRAuthError: With code API_ERROR if the request fails or returns a non-2xx status.
        """
        data = await self._request(
            "get_user_info",
            "GET",
            self.endpoints.userinfo,
            headers=_bearer(access_token),
        )
        return UserInfo.model_validate(data)

    async def get_confiabilidade_niveis(self, access_token: str, cpf: str) -> list[ConfiabilidadeNivel]:
        """
        Gets the account's trust levels.

        Args:
            access_token: A valid access token.
            cpf: The user's CPF, percent-encoded as a single path segment.

        Returns:
            list[ConfiabilidadeNivel]: The trust levels in provider order.

        Raises:
            GovBRAuthError: With code API_ERROR if the request fails or returns a non-2xx status.
        """
        data = await self._request(
            "get_confiabilidade_niveis",
            "GET",
            f"{self.endpoints.confiabilidades}/contas/{quote(cpf, safe='')}/niveis",
            params={"response-type": "ids"},
            headers=_bearer(access_token),
        )
        return _NIVEIS_ADAPTER.validate_python(data)

    async def get_confiabilidade_selos(self, access_token: str, cpf: str) -> list[ConfiabilidadeSelo]:
        """
        Gets the account's trust seals.

        Args:
            access_token: A valid access token.
            cpf: The user's CPF, percent-encoded as a single path segment.

        Returns:
            list[ConfiabilidadeSelo]: The trust seals in provider order.

        Raises:
            GovBRAuthError: With code API_ERROR if the request fails or returns a non-2xx status.
        """
        data = await self._request(
            "get_confiabilidade_selos",
            "GET",
            f"{self.endpoints.confiabilidades}/contas/{quote(cpf, safe='')}/confiabilidades",
            params={"response-type": "ids"},
            headers=_bearer(access_token),
        )
        return _SELOS_ADAPTER.validate_python(data)

    async def _request(self, operation: str, method: str, url: str, **kwargs: Any) -> Any:
        """
        Runs one gov.br call inside a span. Emits an OpenTelemetry span named after the operation.
        """
        log = logger.bind(operation=operation)
        with tracer.start_as_current_span(operation, record_exception=False, set_status_on_exception=False) as span:
            span.set_attribute("http.request.method", method)
            span.set_attribute("govbr.environment", str(self.config.environment))
            try:
                data = await fetch_json(self._client, method, url, **kwargs)
            except GovBRAuthError as e:
                # The message may embed the URL (and thus the CPF), so only the status is logged
                log.error(f"{operation} failed (status={e.status_code}, cause={type(e.original_error).__name__})")
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, e.code))
                raise
            span.set_status(Status(StatusCode.OK))
            return data


def _bearer(access_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


AuthService = GovBRAuthAsync


class GovBRAuth:
    """
    Sync facade for GovBRAuthAsync.

    Inside a `with` block network calls share one anyio blocking portal, so the
    async client stays on a single event loop. Outside of it each call runs on a
    short-lived portal and no thread outlives the call.
    """

    def __init__(self, config: GovBRConfig | Mapping[str, Any], client: httpx.AsyncClient | None = None) -> None:
        """
        Initialize the sync facade.

        Args:
            config: A GovBRConfig, or a mapping of its fields.
            client: External async client (optional).
        """
        self._async = GovBRAuthAsync(config, client=client)
        self._exit_stack = ExitStack()
        self._portal: BlockingPortal | None = None
        self._closed = False

    def __enter__(self) -> "GovBRAuth":
        if self._portal is None:
            self._portal = self._exit_stack.enter_context(start_blocking_portal())
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Closes the underlying async client and stops the portal, if one is running."""
        if self._closed:
            return
        self._closed = True
        try:
            self._call(self._async.aclose)
        finally:
            self._portal = None
            self._exit_stack.close()

    def _call(self, func: Callable[..., Awaitable[T]], *args: Any) -> T:
        if self._portal is not None:
            return self._portal.call(func, *args)
        with start_blocking_portal() as portal:
            return portal.call(func, *args)

    @property
    def config(self) -> GovBRConfig:
        return self._async.config

    @property
    def endpoints(self) -> Endpoints:
        return self._async.endpoints

    def create_authorization_request(self, params: AuthorizeParams | None = None) -> AuthorizationRequest:
        return self._async.create_authorization_request(params)

    def generate_authorization_url(self, params: AuthorizeParams | None = None) -> str:
        return self._async.generate_authorization_url(params)

    def generate_logout_url(self, post_logout_redirect_uri: str) -> str:
        return self._async.generate_logout_url(post_logout_redirect_uri)

    def get_tokens(self, code: str, code_verifier: str) -> TokenResponse:
        return self._call(self._async.get_tokens, code, code_verifier)

    def get_user_info(self, access_token: str) -> UserInfo:
        return self._call(self._async.get_user_info, access_token)

    def get_confiabilidade_niveis(self, access_token: str, cpf: str) -> list[ConfiabilidadeNivel]:
        return self._call(self._async.get_confiabilidade_niveis, access_token, cpf)

    def get_confiabilidade_selos(self, access_token: str, cpf: str) -> list[ConfiabilidadeSelo]:
        return self._call(self._async.get_confiabilidade_selos, access_token, cpf)
