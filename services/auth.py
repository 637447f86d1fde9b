"""Auth gateway: login and registration exchanges producing a session credential.

Both operations report any failure (rejected credentials, server error,
unreachable backend) as the same generic `AuthError`.
"""
from __future__ import annotations
import logging
from typing import Optional

from domain.constants import LOGIN_PATH, REGISTER_PATH, LOGIN_FAILED, REGISTER_FAILED
from services.api import BackendClient, read_json
from services.errors import AuthError, BackendUnavailable
from services.session import SessionStore

logger = logging.getLogger(__name__)


class AuthGateway:
    def __init__(self, session: SessionStore, client: BackendClient):
        self.session = session
        self.client = client
        self.loading = False
        self.error: Optional[str] = None

    async def login(self, identity: str, secret: str) -> str:
        return await self._exchange(
            lambda: self.client.post_form(LOGIN_PATH, {'username': identity, 'password': secret}),
            LOGIN_FAILED,
        )

    async def register(self, identity: str, secret: str) -> str:
        return await self._exchange(
            lambda: self.client.post_json(REGISTER_PATH, {'email': identity, 'password': secret}),
            REGISTER_FAILED,
        )

    async def _exchange(self, send, failure_message: str) -> str:
        self.loading = True
        self.error = None
        try:
            try:
                response = await send()
            except BackendUnavailable as exc:
                raise AuthError(failure_message) from exc
            if not response.is_success:
                logger.warning("Auth exchange rejected with status %s", response.status_code)
                raise AuthError(failure_message)
            body = read_json(response)
            token = body.get('access_token') if isinstance(body, dict) else None
            if not isinstance(token, str) or not token:
                logger.warning("Auth exchange returned no access token")
                raise AuthError(failure_message)
            # Last write wins when login and register race
            self.session.set(token)
            logger.info("Operator authenticated")
            return token
        except AuthError as exc:
            self.error = exc.message
            raise
        finally:
            self.loading = False
