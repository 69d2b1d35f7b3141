"""Identity provider client for job seeker session verification."""

import logging

import httpx
from jose import JWTError, jwt

from app.core.exceptions import AuthenticationError, IdentityProviderError

logger = logging.getLogger(__name__)

# Provider answers with these when the session is unknown, revoked or expired.
REJECTED_STATUSES = {400, 401, 403, 404, 410, 422}


class IdentityProviderClient:
    """Identity provider backend API client."""

    def __init__(
        self,
        api_base: str,
        secret_key: str | None,
        client: httpx.AsyncClient | None = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.secret_key = secret_key
        self.client = client or httpx.AsyncClient(
            base_url=self.api_base,
            timeout=httpx.Timeout(10.0),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def verify_session(self, token: str) -> str:
        """Verify a session token and return the provider's user ID.

        The token's ``sid`` claim names the session; the provider decides
        whether the session is still active.
        """
        if not self.secret_key:
            raise IdentityProviderError(500, "Identity provider secret not configured")

        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError as e:
            raise AuthenticationError("Authentication failed.", reason="invalid") from e

        session_id = claims.get("sid")
        if not session_id:
            raise AuthenticationError("Authentication failed.", reason="invalid")

        try:
            response = await self.client.post(
                f"/v1/sessions/{session_id}/verify",
                json={"token": token},
                headers={"Authorization": f"Bearer {self.secret_key}"},
            )
        except httpx.RequestError as e:
            logger.error(f"Identity provider unreachable: {e}")
            raise IdentityProviderError(502, "Identity provider unreachable") from e

        if response.status_code in REJECTED_STATUSES:
            raise AuthenticationError("Authentication failed.", reason="invalid")
        if response.status_code >= 400:
            logger.error(
                f"Identity provider returned {response.status_code}: {response.text[:200]}"
            )
            raise IdentityProviderError(response.status_code, "Session verification failed")

        session = response.json()
        user_id = session.get("user_id")
        if session.get("status") != "active" or not user_id:
            raise AuthenticationError("Authentication failed.", reason="invalid")
        return user_id
