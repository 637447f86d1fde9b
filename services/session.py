"""Session store: the single source of truth for "is the operator authenticated".

The credential lives in a mutable mapping. In the running app that mapping is
`st.session_state`, which Streamlit drops on browser reload, so nothing is
persisted. Tests pass a plain dict.
"""
from __future__ import annotations
from typing import Callable, List, MutableMapping, Optional, Any

from domain.constants import CREDENTIAL_KEY

Listener = Callable[[Optional[str]], None]


class SessionStore:
    def __init__(self, state: Optional[MutableMapping[str, Any]] = None, key: str = CREDENTIAL_KEY):
        self._state = state if state is not None else {}
        self._key = key
        self._listeners: List[Listener] = []
        self.epoch = 0

    def get(self) -> Optional[str]:
        return self._state.get(self._key) or None

    def set(self, credential: str):
        if not credential:
            raise ValueError("credential must be a non-empty token")
        self._state[self._key] = credential
        self._changed(credential)

    def clear(self):
        if self._key in self._state:
            del self._state[self._key]
        self._changed(None)

    @property
    def is_authenticated(self) -> bool:
        return self.get() is not None

    def subscribe(self, listener: Listener):
        self._listeners.append(listener)

    def _changed(self, credential: Optional[str]):
        # Any in-flight response captured under the previous epoch is now stale
        self.epoch += 1
        for listener in list(self._listeners):
            listener(credential)
