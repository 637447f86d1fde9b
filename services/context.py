"""Per-browser-session application context.

One `AppContext` is created when a browser session starts and is kept in
`st.session_state` so every rerun reuses the same session store and services.
A browser reload starts a new Streamlit session and therefore a new context.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import MutableMapping, Any, Optional

import httpx

from domain.constants import CONTEXT_KEY
from domain.settings import Settings, get_settings
from services.api import BackendClient
from services.auth import AuthGateway
from services.session import SessionStore
from services.visitors import VisitorRepository


@dataclass
class AppContext:
    settings: Settings
    session: SessionStore
    client: BackendClient
    auth: AuthGateway
    visitors: VisitorRepository


def build_context(state: Optional[MutableMapping[str, Any]] = None, settings: Optional[Settings] = None,
                  transport: Optional[httpx.AsyncBaseTransport] = None) -> AppContext:
    settings = settings or get_settings()
    session = SessionStore(state)
    client = BackendClient(settings, transport=transport)
    return AppContext(
        settings=settings,
        session=session,
        client=client,
        auth=AuthGateway(session, client),
        visitors=VisitorRepository(session, client),
    )


def get_context(state: MutableMapping[str, Any]) -> AppContext:
    ctx = state.get(CONTEXT_KEY)
    if ctx is None:
        ctx = build_context(state)
        state[CONTEXT_KEY] = ctx
    return ctx
