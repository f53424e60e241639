"""In-memory session store keyed by a session cookie."""

from __future__ import annotations

import threading

from .http import Request, Response, Session


class SessionStore:
    """Keep :class:`Session` objects between requests of the same client."""

    def __init__(self, cookie_name: str = "SESSION") -> None:
        self.cookie_name = cookie_name
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def load(self, request: Request) -> Session:
        """Return the session named by the request cookie, or a new one."""
        sid = request.cookie(self.cookie_name)
        with self._lock:
            session = self._sessions.get(sid) if sid else None
            if session is None:
                session = Session()
                self._sessions[session.id] = session
        return session

    def commit(self, session: Session, response: Response) -> None:
        response.set_cookie(self.cookie_name, session.id, path="/", httponly=True)

    def invalidate(self, session: Session) -> None:
        with self._lock:
            self._sessions.pop(session.id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["SessionStore"]
