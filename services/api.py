"""HTTP access to the visitor backend.

Every request opens a short-lived `httpx.AsyncClient` bounded by the configured
timeout. Transport failures and timeouts are raised as `BackendUnavailable`;
HTTP status codes are left to the calling service to interpret.
"""
from __future__ import annotations
import logging
from typing import Dict, Any, Optional

import httpx

from domain.settings import Settings, get_settings
from services.errors import BackendUnavailable

logger = logging.getLogger(__name__)


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class BackendClient:
    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self.settings.api_base

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.settings.REQUEST_TIMEOUT,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc.__class__.__name__)
            raise BackendUnavailable() from exc
        logger.info("%s %s -> %s", method, path, response.status_code)
        return response

    async def post_form(self, path: str, fields: Dict[str, str]) -> httpx.Response:
        return await self._send("POST", path, data=fields)

    async def post_json(self, path: str, payload: Dict[str, Any]) -> httpx.Response:
        return await self._send("POST", path, json=payload)

    async def get(self, path: str, token: str, params: Optional[Dict[str, str]] = None) -> httpx.Response:
        return await self._send("GET", path, headers=bearer(token), params=params or None)

    async def post_multipart(self, path: str, token: str, fields: Dict[str, str]) -> httpx.Response:
        # (None, value) parts are plain form fields without a filename
        parts = {k: (None, (v or '').encode('utf-8')) for k, v in fields.items()}
        return await self._send("POST", path, headers=bearer(token), files=parts)


def read_json(response: httpx.Response) -> Any:
    """Decoded JSON body, or None when the body is not JSON."""
    try:
        return response.json()
    except ValueError:
        return None
