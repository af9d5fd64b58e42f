import contextlib
import os

import anyio
from anyio import create_task_group, to_thread

from govbr_auth import GovBRAuthAsync, GovBRAuthError, GovBRConfig


async def main() -> None:
    """
    Walks through the gov.br login flow from a terminal.

    Reads GOVBR_AUTH_CLIENT_ID, GOVBR_AUTH_CLIENT_SECRET and GOVBR_AUTH_REDIRECT_URI
    from the environment. In a web app, the authorization request would be kept in
    the session by the /login handler and read back by the /callback handler.
    """
    print(">>> Starting gov.br login example")

    config = GovBRConfig(environment=os.getenv("GOVBR_AUTH_ENVIRONMENT", "staging"))

    async with GovBRAuthAsync(config) as auth:
        request = auth.create_authorization_request()
        print(f">>> Open this URL in a browser:\n{request.url}")

        code = await to_thread.run_sync(input, ">>> Paste the 'code' query parameter from the redirect: ")
        code = code.strip()

        try:
            tokens = await auth.get_tokens(code, request.code_verifier or "")
            access_token = tokens.access_token or ""
            user = await auth.get_user_info(access_token)
            cpf = user.sub or ""
            print(f">>> Logged in as {user.name} ({user.sub})")

            # Trust levels and seals are independent lookups
            results: dict[str, list] = {}

            async def fetch(name: str, call, *args) -> None:  # type: ignore[no-untyped-def]
                results[name] = await call(*args)

            async with create_task_group() as tg:
                tg.start_soon(fetch, "niveis", auth.get_confiabilidade_niveis, access_token, cpf)
                tg.start_soon(fetch, "selos", auth.get_confiabilidade_selos, access_token, cpf)

            print(f">>> Niveis: {[n.id for n in results['niveis']]}")
            print(f">>> Selos: {[s.id for s in results['selos']]}")
        except* GovBRAuthError as group:
            for e in group.exceptions:
                print(f">>> gov.br call failed (status={getattr(e, 'status_code', None)}): {e}")

        print(f">>> Logout URL: {auth.generate_logout_url(config.redirect_uri)}")


if __name__ == "__main__":
    with contextlib.suppress(KeyboardInterrupt):
        anyio.run(main)
