"""
In-memory registry of lookup sessions, keyed by session id.
Nothing is persisted; only the most recently used sessions are kept.
"""

from collections import OrderedDict
from typing import Callable, Optional
import logging
from weatherflow.models.state_model import RequestState, Idle
from weatherflow.services.Lookup_service import LookupSession
from weatherflow.core.config import settings
from weatherflow.core.logger import logs


class SessionStateManager:
    """
    Hands out one LookupSession per session id, evicting the least recently
    used session once max_sessions is reached
    """

    def __init__(self, session_factory: Callable[[], LookupSession] = LookupSession, max_sessions: int = None):
        self.session_factory = session_factory
        self.max_sessions = max_sessions if max_sessions is not None else settings.MAX_SESSIONS
        self._sessions: "OrderedDict[str, LookupSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get_session(self, session_id: str) -> LookupSession:
        """Get the session for this id, creating it on first use"""
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
            return session

        session = self.session_factory()
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logs.log(logging.DEBUG, f"Evicted lookup session {evicted}")
        return session

    def get_state(self, session_id: str) -> RequestState:
        """Current state for a session; unknown sessions are Idle"""
        session: Optional[LookupSession] = self._sessions.get(session_id)
        return session.state if session is not None else Idle()

    async def submit(self, session_id: str, query: str) -> RequestState:
        # Blank queries never start a run, so they don't need a session either
        if not (query or "").strip():
            return self.get_state(session_id)
        return await self.get_session(session_id).submit(query)


session_manager = SessionStateManager()
