"""Visitor repository: search and create against the backend visitor collection.

The repository keeps a read-only copy of the last result set. Writes never
patch that copy; a successful create reloads the whole list with whatever query
is active at that moment (full-reload policy). If the operator changed the
search box after typing the draft, the reloaded list may not include the new
visitor.

Responses that arrive after the session credential changed are dropped.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from domain.constants import VISITORS_PATH, SEARCH_FAILED, CREATE_FAILED
from domain.models import DraftVisitor, VisitorRecord, visitor_from_dict
from services.api import BackendClient, read_json
from services.errors import BackendUnavailable, CreateError, NotAuthenticatedError, SearchError
from services.session import SessionStore

logger = logging.getLogger(__name__)


def parse_items(body) -> List[VisitorRecord]:
    """Visitor records from a search body; anything malformed yields an empty list."""
    if not isinstance(body, dict):
        return []
    raw = body.get('items')
    if not isinstance(raw, list):
        return []
    records = [visitor_from_dict(item) for item in raw]
    return [r for r in records if r is not None]


class VisitorRepository:
    def __init__(self, session: SessionStore, client: BackendClient):
        self.session = session
        self.client = client
        self.items: List[VisitorRecord] = []
        self.query = ''
        self.draft = DraftVisitor()
        self.error: Optional[str] = None
        self._needs_initial_load = session.is_authenticated
        self._was_authenticated = session.is_authenticated
        session.subscribe(self._on_credential)

    def _on_credential(self, credential: Optional[str]):
        now_authenticated = bool(credential)
        if now_authenticated and not self._was_authenticated:
            self._needs_initial_load = True
        elif not now_authenticated:
            self._needs_initial_load = False
            self.items = []
        self._was_authenticated = now_authenticated

    def _token(self) -> str:
        token = self.session.get()
        if token is None:
            raise NotAuthenticatedError()
        return token

    async def ensure_initial_load(self) -> bool:
        """Run the empty-query listing once per sign-in; later calls are no-ops."""
        if not self._needs_initial_load:
            return False
        self._needs_initial_load = False
        await self.search('')
        return True

    async def search(self, query: Optional[str] = None) -> List[VisitorRecord]:
        token = self._token()
        if query is not None:
            self.query = query
        q = self.query
        epoch = self.session.epoch
        params = {'q': q} if q else None
        try:
            response = await self.client.get(VISITORS_PATH, token, params=params)
        except BackendUnavailable as exc:
            if epoch != self.session.epoch:
                return self.items
            self._search_failed()
            raise SearchError(SEARCH_FAILED) from exc
        if epoch != self.session.epoch:
            logger.info("Discarding visitor list for a replaced session")
            return self.items
        if not response.is_success:
            logger.warning("Visitor search failed with status %s", response.status_code)
            self._search_failed()
            raise SearchError(SEARCH_FAILED)
        self.items = parse_items(read_json(response))
        self.error = None
        return self.items

    def _search_failed(self):
        self.items = []
        self.error = SEARCH_FAILED

    async def create(self, draft: Optional[DraftVisitor] = None) -> bool:
        """Submit the draft; on success reset it and reload the list.

        A failed create leaves the draft untouched and raises CreateError.
        """
        token = self._token()
        draft = draft if draft is not None else self.draft
        epoch = self.session.epoch
        try:
            response = await self.client.post_multipart(VISITORS_PATH, token, draft.to_form_fields())
        except BackendUnavailable as exc:
            if epoch != self.session.epoch:
                return False
            self.error = CREATE_FAILED
            raise CreateError(CREATE_FAILED) from exc
        if epoch != self.session.epoch:
            return False
        if not response.is_success:
            logger.warning("Visitor create failed with status %s", response.status_code)
            self.error = CREATE_FAILED
            raise CreateError(CREATE_FAILED)
        self.draft = DraftVisitor()
        self.error = None
        await self.search()
        return True
