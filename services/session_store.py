"""
In-process session store mapping opaque tokens to authenticated chefs.
"""

import threading
from typing import Dict, Optional

from models import Chef


class SessionStore:
    """
    Token -> Chef mapping shared by all request threads.

    Every operation holds one lock, so operations on the same token are
    linearizable: once remove() returns, no get() can see the entry again.
    Sessions have no expiry and live until logout or process exit.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: Dict[str, Chef] = {}

    def put(self, token: str, chef: Chef):
        with self._lock:
            self._sessions[token] = chef

    def get(self, token: str) -> Optional[Chef]:
        with self._lock:
            return self._sessions.get(token)

    def remove(self, token: str) -> bool:
        """Remove a session; False if the token was not present"""
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def clear(self):
        with self._lock:
            self._sessions.clear()

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
